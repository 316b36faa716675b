from __future__ import annotations

from collections.abc import Callable
from functools import partial

from .config import Settings
from .convert import (
    ConversionResult,
    check_source,
    convert_to_gif,
    convert_to_jpeg,
    convert_to_png,
    convert_to_webp,
    copy_svg,
    ensure_output_dir,
)

Step = Callable[[], ConversionResult]


def prepare(settings: Settings) -> None:
    """Check the source, then create the output directory.

    A missing source leaves the filesystem untouched.
    """
    check_source(settings.source_svg)
    ensure_output_dir(settings.output_dir)


def conversion_steps(settings: Settings) -> list[Step]:
    src, out, width = settings.source_svg, settings.output_dir, settings.width
    return [
        partial(copy_svg, src, out),
        partial(convert_to_png, src, out, width),
        partial(convert_to_jpeg, src, out, width, settings.jpeg_quality),
        partial(convert_to_webp, src, out, width, settings.webp_quality),
        partial(convert_to_gif, src, out, width),
    ]


def generate_all(settings: Settings) -> list[ConversionResult]:
    prepare(settings)
    return [step() for step in conversion_steps(settings)]
