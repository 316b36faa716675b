from __future__ import annotations

import asyncio
import logging
import sys
from logging.handlers import RotatingFileHandler

from dotenv import load_dotenv

from imggen.config import Settings, load_settings
from imggen.convert import GIF_NAME
from imggen.runner import conversion_steps, prepare

log = logging.getLogger("imggen")


def setup_logging(settings: Settings) -> None:
    """Console always; optional rotating file."""
    log_format = "%(asctime)s %(levelname)s %(name)s %(message)s"
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=log_format)
    if settings.log_file:
        try:
            settings.log_file.parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                settings.log_file,
                maxBytes=settings.log_max_bytes,
                backupCount=settings.log_backups,
                encoding="utf-8",
            )
            fh.setLevel(level)
            fh.setFormatter(logging.Formatter(log_format))
            root = logging.getLogger()
            root.addHandler(fh)
        except Exception:
            logging.exception("Failed to set up file logging")


async def main(settings: Settings | None = None) -> int:
    """Generate every sample image in turn. Returns the process exit code."""
    try:
        if settings is None:
            # Load .env if present
            load_dotenv()
            settings = load_settings()
            setup_logging(settings)

        log.info("Generating images from %s", settings.source_svg)
        prepare(settings)

        # One step at a time; the thread only keeps the loop free while encoding.
        for step in conversion_steps(settings):
            result = await asyncio.to_thread(step)
            log.info("%s", result.describe())
            if result.path.name == GIF_NAME:
                log.info("Note: %s contains PNG data, not GIF", result.path.name)

        log.info("Done. Output: %s", settings.output_dir)
        return 0
    except Exception as e:
        log.error("Image generation failed: %s", e)
        log.debug("Traceback", exc_info=True)
        return 1


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    try:
        run()
    except KeyboardInterrupt:
        sys.exit(1)
