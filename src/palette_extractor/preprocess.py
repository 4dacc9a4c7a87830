import cv2
import numpy as np
from loguru import logger

# =========================
# Preprocess: downscale + sampling
# =========================

def _check_rgba(rgba):
    if not isinstance(rgba, np.ndarray) or rgba.ndim != 3 or rgba.shape[2] != 4:
        raise ValueError(f"Expected an (H, W, 4) RGBA array, got {getattr(rgba, 'shape', type(rgba))}")
    if rgba.dtype != np.uint8:
        raise ValueError(f"Expected uint8 pixels, got {rgba.dtype}")

# Longer side is capped at max_dimension, aspect ratio kept, sizes truncated to int
def downscale_size(width, height, max_dimension=200):
    if max_dimension < 1:
        raise ValueError(f"max_dimension must be >= 1, got {max_dimension}")
    longest = max(width, height)
    if longest <= max_dimension:
        return width, height
    scale = max_dimension / longest
    return max(1, int(width * scale)), max(1, int(height * scale))

def downscale_rgba(rgba, max_dimension=200):
    _check_rgba(rgba)
    h, w = rgba.shape[:2]
    new_w, new_h = downscale_size(w, h, max_dimension)
    if (new_w, new_h) == (w, h):
        return rgba
    logger.debug(f"Downscaling {w}x{h} -> {new_w}x{new_h}")

    # resample premultiplied so transparent pixels do not bleed their RGB into visible ones
    px = rgba.astype(np.float32)
    alpha = px[:, :, 3:] / 255.0
    px[:, :, :3] *= alpha
    small = cv2.resize(px, (new_w, new_h), interpolation=cv2.INTER_AREA)

    a = small[:, :, 3:]
    rgb = np.divide(small[:, :, :3] * 255.0, a, out=np.zeros_like(small[:, :, :3]), where=a > 0)
    out = np.empty((new_h, new_w, 4), dtype=np.uint8)
    out[:, :, :3] = np.clip(np.rint(rgb), 0, 255)
    out[:, :, 3] = np.clip(np.rint(a[:, :, 0]), 0, 255)
    return out

def sample_visible_pixels(rgba, alpha_threshold=128):
    """
    Lấy các pixel đủ đục (alpha >= alpha_threshold) làm mẫu màu.
    Trả về mảng (N, 3) uint8 RGB; N == 0 khi ảnh trong suốt hoàn toàn.
    """
    _check_rgba(rgba)
    flat = rgba.reshape(-1, 4)
    visible = flat[:, 3] >= alpha_threshold
    samples = flat[visible, :3].copy()
    logger.debug(f"Visible samples: {samples.shape[0]}/{flat.shape[0]} (alpha >= {alpha_threshold})")
    return samples
