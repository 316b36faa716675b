from pathlib import Path

import pytest
from pydantic import ValidationError

import imggen.config
from imggen.config import DEFAULT_SOURCE_SVG, Settings, load_settings

ENV_VARS = (
    "IMGGEN_SOURCE_SVG",
    "IMGGEN_OUTPUT_DIR",
    "IMGGEN_WIDTH",
    "IMGGEN_JPEG_QUALITY",
    "IMGGEN_WEBP_QUALITY",
    "LOG_FILE",
    "LOG_LEVEL",
    "LOG_MAX_BYTES",
    "LOG_BACKUPS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_load_settings_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    s = load_settings()
    assert s.source_svg == DEFAULT_SOURCE_SVG
    assert s.output_dir == Path.cwd() / "public" / "assets" / "img"
    assert s.width == 400
    assert s.jpeg_quality == 80
    assert s.webp_quality == 80
    assert s.log_file is None
    assert s.log_level == "INFO"


def test_default_output_dir_follows_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    s = Settings()
    assert s.output_dir.parts[-3:] == ("public", "assets", "img")
    assert s.output_dir.parent.parent.parent == Path.cwd()


def test_default_source_ships_inside_package():
    assert DEFAULT_SOURCE_SVG.is_file()
    package_dir = Path(imggen.config.__file__).resolve().parent
    assert DEFAULT_SOURCE_SVG.parent.parent == package_dir


def test_pyproject_ships_source_as_package_data():
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    text = pyproject.read_text(encoding="utf-8")
    assert "[tool.setuptools.package-data]" in text
    assert 'imggen = ["assets/*.svg"]' in text


def test_load_settings_parses_paths_and_logging(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("IMGGEN_SOURCE_SVG", str(tmp_path / "in.svg"))
    monkeypatch.setenv("IMGGEN_OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("IMGGEN_WIDTH", " 128 ")
    monkeypatch.setenv("IMGGEN_JPEG_QUALITY", "90")
    monkeypatch.setenv("IMGGEN_WEBP_QUALITY", "60")

    log_file = tmp_path / "logs" / "imggen.log"
    monkeypatch.setenv("LOG_FILE", str(log_file))
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_MAX_BYTES", "1024")
    monkeypatch.setenv("LOG_BACKUPS", "3")

    s = load_settings()
    assert s.source_svg == (tmp_path / "in.svg").resolve()
    assert s.output_dir == (tmp_path / "out").resolve()
    assert s.width == 128
    assert s.jpeg_quality == 90
    assert s.webp_quality == 60
    assert s.log_file == log_file.resolve()
    assert s.log_level == "DEBUG"
    assert s.log_max_bytes == 1024
    assert s.log_backups == 3


def test_load_settings_rejects_non_integer(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("IMGGEN_WIDTH", "wide")
    with pytest.raises(RuntimeError, match="IMGGEN_WIDTH"):
        load_settings()


@pytest.mark.parametrize(
    "name,value",
    [("IMGGEN_WIDTH", "0"), ("IMGGEN_JPEG_QUALITY", "101"), ("IMGGEN_WEBP_QUALITY", "0")],
)
def test_load_settings_rejects_out_of_range(monkeypatch: pytest.MonkeyPatch, name: str, value: str):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        load_settings()


def test_settings_are_frozen(tmp_path: Path):
    s = Settings(output_dir=tmp_path)
    with pytest.raises(ValidationError):
        s.width = 10
