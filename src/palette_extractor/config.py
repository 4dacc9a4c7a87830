import json
from pathlib import Path

import numpy as np

DEFAULT_CONFIG = {
    # image is resized so its longer side is at most max_dimension before sampling
    # pixels with alpha < alpha_threshold (0..255) are ignored
    "palette": {
        "color_count": 6,
        "max_dimension": 200,
        "max_iterations": 100,
        "alpha_threshold": 128,
        "seed": None
    },
    "logging": {"level": "INFO"}
}

def load_config(path):
    if path is None:
        return {k: dict(v) for k, v in DEFAULT_CONFIG.items()}
    cfg = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path} must be a JSON object, got {type(cfg).__name__}")
    out = {k: dict(v) for k, v in DEFAULT_CONFIG.items()}
    for section, values in cfg.items():
        if section in out:
            if not isinstance(values, dict):
                raise ValueError(f"Config section \"{section}\" must be an object, got {type(values).__name__}")
            out[section].update(values)
        else:
            out[section] = values
    return out

def _is_int(value):
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)

def validate_config(pal_cfg):
    """Kiểm tra section "palette", raise ValueError nếu giá trị không hợp lệ."""
    k = pal_cfg.get("color_count")
    if not _is_int(k) or k <= 0:
        raise ValueError(f"color_count must be a positive integer, got {k!r}")

    max_dim = pal_cfg.get("max_dimension")
    if not _is_int(max_dim) or max_dim < 1:
        raise ValueError(f"max_dimension must be an integer >= 1, got {max_dim!r}")

    max_iter = pal_cfg.get("max_iterations")
    if not _is_int(max_iter) or max_iter < 1:
        raise ValueError(f"max_iterations must be an integer >= 1, got {max_iter!r}")

    alpha = pal_cfg.get("alpha_threshold")
    if not _is_int(alpha) or not 0 <= alpha <= 255:
        raise ValueError(f"alpha_threshold must be an integer in 0..255, got {alpha!r}")

    seed = pal_cfg.get("seed")
    if seed is not None and (not _is_int(seed) or seed < 0):
        raise ValueError(f"seed must be a non-negative integer or null, got {seed!r}")
    return pal_cfg
