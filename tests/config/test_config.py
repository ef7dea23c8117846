"""Tests for the TOML configuration loader."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from vitetags import StaticAttributes
from vitetags.config.config import (
    ConfigParseError,
    ConfigValidationError,
    load_vite_config,
)
from vitetags.config.paths import CONFIG_PATH_ENV


class TestLoadViteConfig:
    """Unit tests for ``load_vite_config``."""

    def test_template_created_when_file_missing(self, tmp_path: Path) -> None:
        destination = tmp_path / "config" / "vite.toml"

        options = load_vite_config(path=destination)

        assert destination.exists()
        assert "entrypoints = []" in destination.read_text(encoding="utf-8")
        assert options.entrypoints == ()
        assert options.hot_file == Path("public/hot.json")
        assert options.build_directory == Path("public/assets")
        assert options.script_attributes is None

    def test_loads_values(self, tmp_path: Path) -> None:
        config_path = tmp_path / "vite.toml"
        _ = config_path.write_text(
            textwrap.dedent(
                """
                entrypoints = ["resources/js/app.js", "resources/css/app.css"]
                hot_file = "build/hot.json"
                build_directory = "build/assets"
                assets_url = "https://cdn.example.com/"
                reload = ["templates/**/*.html"]

                [script_attributes]
                defer = true

                [style_attributes]
                media = "all"
                """
            ),
            encoding="utf-8",
        )

        options = load_vite_config(path=config_path)

        assert options.entrypoints == ("resources/js/app.js", "resources/css/app.css")
        assert options.hot_file == Path("build/hot.json")
        assert options.manifest_path == Path("build/assets/manifest.json")
        assert options.assets_url == "https://cdn.example.com"
        assert options.reload == ("templates/**/*.html",)
        assert options.script_attributes == StaticAttributes({"defer": True})
        assert options.style_attributes == StaticAttributes({"media": "all"})

    def test_env_override(self, tmp_path: Path) -> None:
        config_path = tmp_path / "custom.toml"
        _ = config_path.write_text('entrypoints = ["app.js"]\n', encoding="utf-8")

        options = load_vite_config(env={CONFIG_PATH_ENV: str(config_path)})

        assert options.entrypoints == ("app.js",)

    def test_invalid_toml_raises_parse_error(self, tmp_path: Path) -> None:
        config_path = tmp_path / "vite.toml"
        _ = config_path.write_text("entrypoints = [", encoding="utf-8")

        with pytest.raises(ConfigParseError):
            _ = load_vite_config(path=config_path)

    @pytest.mark.parametrize(
        "content",
        [
            'entrypoints = "app.js"\n',
            "hot_file = 1\n",
            'script_attributes = "defer"\n',
            "[style_attributes]\nmedia = [1]\n",
        ],
        ids=["entrypoints-not-list", "hot-file-not-str", "attributes-not-table", "attribute-array"],
    )
    def test_wrong_types_raise_validation_error(self, tmp_path: Path, content: str) -> None:
        config_path = tmp_path / "vite.toml"
        _ = config_path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigValidationError):
            _ = load_vite_config(path=config_path)

    def test_unknown_keys_are_logged(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        config_path = tmp_path / "vite.toml"
        _ = config_path.write_text('entrypoints = []\nbogus = 1\n', encoding="utf-8")

        with caplog.at_level("WARNING", logger="vitetags"):
            _ = load_vite_config(path=config_path)

        assert "bogus" in caplog.text
