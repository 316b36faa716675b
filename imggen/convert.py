from __future__ import annotations

import io
import shutil
from dataclasses import dataclass
from pathlib import Path

import cairosvg
from PIL import Image

from .utils import human_kb

DEFAULT_WIDTH = 400
DEFAULT_QUALITY = 80

SVG_NAME = "sample.svg"
PNG_NAME = "sample.png"
JPEG_NAME = "sample.jpg"
WEBP_NAME = "sample.webp"
GIF_NAME = "sample.gif"


@dataclass(frozen=True)
class ConversionResult:
    kind: str
    path: Path
    size: int

    def describe(self) -> str:
        return f"{self.kind} created: {self.path} ({human_kb(self.size)})"


def check_source(source: Path) -> None:
    if not source.is_file():
        raise FileNotFoundError(f"Source SVG not found: {source}")


def _check_width(width: int) -> None:
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")


def _check_quality(quality: int) -> None:
    if not 1 <= quality <= 100:
        raise ValueError(f"quality must be within 1..100, got {quality}")


def _result(kind: str, path: Path) -> ConversionResult:
    return ConversionResult(kind=kind, path=path, size=path.stat().st_size)


def ensure_output_dir(output_dir: Path) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def render_png(source: Path, width: int = DEFAULT_WIDTH) -> bytes:
    """Rasterise ``source`` to PNG bytes at ``width`` pixels.

    Height follows the SVG's aspect ratio. Output is deterministic for a given
    source and width, which is what lets the GIF-named copy match the PNG.
    """
    check_source(source)
    _check_width(width)
    # "#" and "?" in a path must not reach the URL parser
    return cairosvg.svg2png(bytestring=source.read_bytes(), output_width=width)


def _open_raster(source: Path, width: int) -> Image.Image:
    img = Image.open(io.BytesIO(render_png(source, width)))
    img.load()
    return img


def copy_svg(source: Path, output_dir: Path) -> ConversionResult:
    check_source(source)
    dest = output_dir / SVG_NAME
    shutil.copyfile(source, dest)
    return _result("SVG", dest)


def convert_to_png(source: Path, output_dir: Path, width: int = DEFAULT_WIDTH) -> ConversionResult:
    dest = output_dir / PNG_NAME
    dest.write_bytes(render_png(source, width))
    return _result("PNG", dest)


def convert_to_jpeg(
    source: Path,
    output_dir: Path,
    width: int = DEFAULT_WIDTH,
    quality: int = DEFAULT_QUALITY,
) -> ConversionResult:
    """JPEG has no alpha channel, so transparent areas are flattened onto white."""
    _check_quality(quality)
    img = _open_raster(source, width).convert("RGBA")
    flat = Image.new("RGB", img.size, (255, 255, 255))
    flat.paste(img, mask=img.getchannel("A"))
    dest = output_dir / JPEG_NAME
    flat.save(dest, format="JPEG", quality=quality)
    return _result("JPEG", dest)


def convert_to_webp(
    source: Path,
    output_dir: Path,
    width: int = DEFAULT_WIDTH,
    quality: int = DEFAULT_QUALITY,
) -> ConversionResult:
    _check_quality(quality)
    img = _open_raster(source, width).convert("RGBA")
    dest = output_dir / WEBP_NAME
    img.save(dest, format="WEBP", quality=quality)
    return _result("WebP", dest)


def convert_to_gif(source: Path, output_dir: Path, width: int = DEFAULT_WIDTH) -> ConversionResult:
    """Write PNG bytes under the ``.gif`` name.

    This is not GIF encoding: consumers only need a file with that extension,
    and the content is identical to ``sample.png``.
    """
    dest = output_dir / GIF_NAME
    dest.write_bytes(render_png(source, width))
    return _result("GIF", dest)
