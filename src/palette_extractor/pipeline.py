import os
from loguru import logger
from .config import DEFAULT_CONFIG, validate_config
from .io_utils import read_image, decode_image, rgba_from_buffer, save_json, save_image
from .preprocess import downscale_rgba, sample_visible_pixels
from .kmeans import kmeans_rgb
from .palette import build_palette, fallback_palette
from .stats import palette_summary
from .viz import render_palette

# =========================
# Core: RGBA pixels -> palette
# =========================
def extract_palette(rgba, color_count=None, cfg=None, rng=None, seed=None):
    """
    Extract the dominant colors of an RGBA image.

    Args:
        rgba: (H, W, 4) uint8 array, row-major RGBA
        color_count: requested number of colors (defaults to cfg["palette"]["color_count"])
        cfg: config dict shaped like DEFAULT_CONFIG
        rng: numpy Generator used to seed the clustering
        seed: integer seed, used when rng is not given (falls back to cfg seed)

    Returns:
        list of PaletteEntry sorted by descending count. A fully transparent
        image gives a single white entry at 100%.
    """
    pal_cfg = dict(DEFAULT_CONFIG["palette"])
    if cfg is not None:
        section = cfg.get("palette", {})
        if not isinstance(section, dict):
            raise ValueError(f"Config section \"palette\" must be a dict, got {type(section).__name__}")
        pal_cfg.update(section)
    if color_count is not None:
        pal_cfg["color_count"] = color_count
    if seed is not None:
        pal_cfg["seed"] = seed
    validate_config(pal_cfg)

    small = downscale_rgba(rgba, pal_cfg["max_dimension"])
    samples = sample_visible_pixels(small, pal_cfg["alpha_threshold"])
    if samples.shape[0] == 0:
        logger.info("No visible pixels, returning fallback palette")
        return fallback_palette()

    result = kmeans_rgb(samples, pal_cfg["color_count"],
                        max_iterations=pal_cfg["max_iterations"],
                        rng=rng, seed=pal_cfg["seed"])
    entries = build_palette(result.centroids, result.counts, total=samples.shape[0])
    logger.info(f"Extracted {len(entries)} colors from {samples.shape[0]} samples "
                f"({result.iterations} iterations, converged={result.converged})")
    return entries

def extract_palette_from_bytes(data, color_count=None, cfg=None, rng=None, seed=None):
    """Same as extract_palette, for encoded image bytes (PNG, JPEG, WebP...)."""
    return extract_palette(decode_image(data), color_count=color_count, cfg=cfg, rng=rng, seed=seed)

def extract_palette_from_buffer(width, height, data, color_count=None, cfg=None, rng=None, seed=None):
    """Same as extract_palette, for a decoded row-major RGBA byte buffer."""
    rgba = rgba_from_buffer(width, height, data)
    return extract_palette(rgba, color_count=color_count, cfg=cfg, rng=rng, seed=seed)

# =========================
# Main image pipeline
# =========================
def process_image(path, cfg=None, out_dir="out", color_count=None, seed=None, save_preview=True):
    if cfg is None:
        cfg = DEFAULT_CONFIG
    os.makedirs(out_dir, exist_ok=True)

    # read image (RGBA)
    rgba = read_image(path)
    logger.debug(f"Loaded {path}: {rgba.shape[1]}x{rgba.shape[0]}")

    entries = extract_palette(rgba, color_count=color_count, cfg=cfg, seed=seed)
    summary = palette_summary(entries)
    pal = [e.to_dict() for e in entries]
    save_json(os.path.join(out_dir, "palette.json"), {"palette": pal, "summary": summary})

    if save_preview:
        save_image(os.path.join(out_dir, "palette_preview.png"), render_palette(entries))

    # === Console report ===
    print("\n== DOMINANT COLORS ==")
    for e in entries:
        print(f"  - {e.color}  {e.percentage:5.1f}%  ({e.count:,} px)")
    print(f"• Colors: {summary['color_count']}, analyzed pixels: {summary['analyzed_pixels']:,}")

    return {"palette": pal, "summary": summary}
