"""
Tests for grid configuration loading.
"""

import json

import pytest

from responsive_images.config import (
    BOOTSTRAP_BREAKPOINTS,
    DEFAULT_TRANSFORM,
    GridConfig,
    load_grid_config,
)
from responsive_images.errors import InvalidConfiguration


def test_default_config():
    """Test Bootstrap 5 defaults."""
    config = load_grid_config()

    assert config.columns == 12
    assert config.gutter == 24
    assert config.breakpoints == BOOTSTRAP_BREAKPOINTS
    assert config.containers["lg"] == 960
    assert "xs" not in config.containers
    assert config.default_transform == DEFAULT_TRANSFORM
    assert config.column_spans == {}


def test_defaults_are_not_shared():
    """Test that every config gets its own default mappings."""
    first = GridConfig()
    first.containers["lg"] = 1000
    first.default_transform["quality"] = 90

    second = GridConfig()
    assert second.containers["lg"] == 960
    assert second.default_transform == DEFAULT_TRANSFORM


def test_load_from_mapping():
    """Test loading with span shorthands and fluid containers."""
    config = load_grid_config({
        "gutter": 32,
        "containers": {"sm": "fluid", "md": 720},
        "column_spans": {
            "md": 6,
            "lg": {"columns_taken": 4, "height": 300, "crop": "thumb"},
        },
    })

    assert config.gutter == 32
    assert config.containers == {"sm": None, "md": 720}
    assert config.column_spans["md"].columns_taken == 6
    assert config.column_spans["md"].height is None
    assert config.column_spans["lg"].height == 300
    assert config.column_spans["lg"].crop == "thumb"


def test_load_from_json_file(tmp_path):
    """Test loading a JSON configuration file."""
    config_path = tmp_path / "grid.json"
    config_path.write_text(json.dumps({
        "columns": 24,
        "breakpoints": {"base": 0, "wide": 1024},
        "containers": {"wide": 1000},
        "column_spans": {"wide": 12},
    }))

    config = load_grid_config(config_path)

    assert config.columns == 24
    assert list(config.breakpoints) == ["base", "wide"]
    assert config.column_spans["wide"].columns_taken == 12

    assert load_grid_config(str(config_path)) == config


def test_load_returns_given_config():
    """Test that validated configs pass through."""
    config = GridConfig(columns=6)
    assert load_grid_config(config) is config


def test_missing_file(tmp_path):
    """Test missing configuration files."""
    with pytest.raises(FileNotFoundError):
        load_grid_config(tmp_path / "missing.json")


@pytest.mark.parametrize("data", [
    {"columns": 0},
    {"gutter": -1},
    {"breakpoints": {"xs": "wide"}},
    {"column_spans": {"md": {"columns_taken": 0}}},
    {"column_spans": {"md": {"columns_taken": 6, "height": 0}}},
    {"column_spans": {"md": True}},
])
def test_invalid_config(data):
    """Test malformed configuration data."""
    with pytest.raises(InvalidConfiguration):
        load_grid_config(data)


def test_default_containers_follow_breakpoints():
    """Test that default containers are kept only for declared breakpoints."""
    config = load_grid_config({"breakpoints": {"xs": 0, "sm": 576, "md": 768}})
    assert config.containers == {"sm": 540, "md": 720}

    config = load_grid_config({"breakpoints": {"base": 0, "wide": 1024}})
    assert config.containers == {}


def test_given_containers_are_kept():
    """Test that containers given by the caller are not filtered."""
    config = load_grid_config({"breakpoints": {"base": 0}, "containers": {"wide": 1000}})
    assert config.containers == {"wide": 1000}


def test_next_breakpoint():
    """Test breakpoint succession by declaration order."""
    config = GridConfig()

    assert config.next_breakpoint("xs") == "sm"
    assert config.next_breakpoint("xl") == "xxl"
    assert config.next_breakpoint("xxl") is None
