"""Unit tests for projc.config."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from projc.config import DIRECTORIES, MAKEFILES, ScaffoldConfig

pytestmark = pytest.mark.unit


class TestScaffoldConfig:
    def test_defaults(self, tmp_path: Path):
        config = ScaffoldConfig(project_name="foo", target_dir=tmp_path)
        assert config.directories == ("lib", "src", "test", "include")
        assert config.directories == DIRECTORIES
        assert config.makefiles == MAKEFILES

    def test_target_dir_coerced_to_path(self):
        config = ScaffoldConfig(project_name="foo", target_dir="/tmp/foo")
        assert isinstance(config.target_dir, Path)

    def test_empty_name_rejected(self, tmp_path: Path):
        with pytest.raises(ValidationError):
            ScaffoldConfig(project_name="", target_dir=tmp_path)

    def test_derived_paths(self, tmp_path: Path):
        config = ScaffoldConfig(project_name="foo", target_dir=tmp_path)
        assert list(config.directory_paths) == ["lib", "src", "test", "include"]
        assert config.directory_paths["lib"] == tmp_path / "lib"
        assert config.directory_paths["include"] == tmp_path / "include"
        assert config.makefile_paths == [tmp_path / "Makefile", tmp_path / "Makefile.win"]
