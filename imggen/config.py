import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import normalize_path

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_SOURCE_SVG = PACKAGE_DIR / "assets" / "source.svg"


def default_output_dir() -> Path:
    """``public/assets/img`` under the current working directory."""
    return Path.cwd() / "public" / "assets" / "img"


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def _env_path(name: str, default: Path) -> Path:
    raw = (os.getenv(name) or "").strip()
    return normalize_path(raw) if raw else default


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    source_svg: Path = DEFAULT_SOURCE_SVG
    output_dir: Path = Field(default_factory=default_output_dir)
    width: int = Field(default=400, gt=0)
    jpeg_quality: int = Field(default=80, ge=1, le=100)
    webp_quality: int = Field(default=80, ge=1, le=100)
    # Logging
    log_file: Path | None = None
    log_level: str = "INFO"
    log_max_bytes: int = 5 * 1024 * 1024
    log_backups: int = 5

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return (v or "INFO").upper()

    @field_validator("source_svg", "output_dir", mode="before")
    @classmethod
    def _ensure_path(cls, v: Path | str) -> Path:
        return Path(v).expanduser().resolve()

    @field_validator("log_file", mode="before")
    @classmethod
    def _ensure_log_path(cls, v: str | Path | None) -> Path | None:
        if not v:
            return None
        return Path(v).expanduser().resolve()


def load_settings() -> Settings:
    """Build settings from the environment; every variable is optional."""
    source_svg = _env_path("IMGGEN_SOURCE_SVG", DEFAULT_SOURCE_SVG)
    output_dir = _env_path("IMGGEN_OUTPUT_DIR", default_output_dir())
    width = _env_int("IMGGEN_WIDTH", 400)
    jpeg_quality = _env_int("IMGGEN_JPEG_QUALITY", 80)
    webp_quality = _env_int("IMGGEN_WEBP_QUALITY", 80)

    # Logging
    log_file_raw = os.getenv("LOG_FILE", "").strip()
    log_file = normalize_path(log_file_raw) if log_file_raw else None
    log_level = (os.getenv("LOG_LEVEL", "INFO") or "INFO").upper()
    log_max_bytes = _env_int("LOG_MAX_BYTES", 5 * 1024 * 1024)
    log_backups = _env_int("LOG_BACKUPS", 5)

    return Settings(
        source_svg=source_svg,
        output_dir=output_dir,
        width=width,
        jpeg_quality=jpeg_quality,
        webp_quality=webp_quality,
        log_file=log_file,
        log_level=log_level,
        log_max_bytes=log_max_bytes,
        log_backups=log_backups,
    )
