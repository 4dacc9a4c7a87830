import os, json
import cv2
import numpy as np

# =========================
# I/O helpers
# =========================
def _to_rgba(img):
    # cv2 decodes as gray / BGR / BGRA depending on the file
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    if img.shape[2] == 3:
        return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    raise ValueError(f"Unsupported channel count: {img.shape[2]}")

def _to_uint8(img):
    if img.dtype == np.uint8:
        return img
    if img.dtype == np.uint16:
        return (img >> 8).astype(np.uint8)
    raise ValueError(f"Unsupported image dtype: {img.dtype}")

def read_image(path):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Not found: {path}")
    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError("cv2.imread failed")
    return _to_rgba(_to_uint8(img))  # RGBA uint8

def decode_image(data):
    """Decode encoded image bytes (PNG, JPEG, WebP...) to an RGBA uint8 array."""
    buf = np.frombuffer(bytes(data), dtype=np.uint8)
    if buf.size == 0:
        raise ValueError("Empty image data")
    img = cv2.imdecode(buf, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError("cv2.imdecode failed")
    return _to_rgba(_to_uint8(img))

def rgba_from_buffer(width, height, data):
    """Wrap interleaved row-major RGBA bytes as an (height, width, 4) array."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid image size: {width}x{height}")
    expected = width * height * 4
    if len(data) != expected:
        raise ValueError(f"RGBA buffer has {len(data)} bytes, expected {expected} for {width}x{height}")
    return np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, 4).copy()

def save_image(path, rgb):
    cv2.imwrite(path, cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR))

def save_json(path, data):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
