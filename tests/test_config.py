"""Tests for config loading and validation."""

import json

import numpy as np
import pytest

from palette_extractor.config import DEFAULT_CONFIG, load_config, validate_config


def test_load_config_defaults():
    cfg = load_config(None)

    assert cfg == DEFAULT_CONFIG
    assert cfg["palette"]["max_dimension"] == 200
    assert cfg["palette"]["max_iterations"] == 100
    assert cfg["palette"]["alpha_threshold"] == 128


def test_load_config_returns_copy():
    """Editing the loaded config leaves the defaults alone."""
    cfg = load_config(None)
    cfg["palette"]["color_count"] = 3

    assert DEFAULT_CONFIG["palette"]["color_count"] == 6


def test_load_config_merges_sections(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"palette": {"color_count": 8}, "logging": {"level": "DEBUG"}}), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["palette"]["color_count"] == 8
    assert cfg["palette"]["max_dimension"] == 200
    assert cfg["logging"]["level"] == "DEBUG"


def test_validate_config_accepts_defaults():
    pal = dict(DEFAULT_CONFIG["palette"])
    assert validate_config(pal) is pal


@pytest.mark.parametrize(
    "key, value",
    [
        ("color_count", 0),
        ("color_count", 2.0),
        ("color_count", True),
        ("max_dimension", -1),
        ("max_iterations", 0),
        ("alpha_threshold", -1),
        ("alpha_threshold", 300),
        ("seed", "abc"),
    ],
)
def test_validate_config_rejects(key, value):
    pal = dict(DEFAULT_CONFIG["palette"])
    pal[key] = value
    with pytest.raises(ValueError, match=key):
        validate_config(pal)


@pytest.mark.parametrize("content", ["[1, 2]", '"palette"', '{"palette": null}', '{"logging": [1]}'])
def test_load_config_rejects_non_objects(tmp_path, content):
    path = tmp_path / "cfg.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_validate_config_accepts_numpy_integers():
    """numpy ints are accepted, like kmeans_rgb accepts them."""
    pal = dict(DEFAULT_CONFIG["palette"])
    pal["color_count"] = np.int64(4)
    pal["max_dimension"] = np.int32(50)
    pal["seed"] = np.uint8(3)

    assert validate_config(pal) is pal
