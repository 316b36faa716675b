from pathlib import Path

import pytest

from imggen.config import DEFAULT_SOURCE_SVG, Settings

SOURCE = DEFAULT_SOURCE_SVG


@pytest.fixture
def source_svg() -> Path:
    return SOURCE


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(source_svg=SOURCE, output_dir=tmp_path / "img")
