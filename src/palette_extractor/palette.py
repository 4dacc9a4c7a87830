from dataclasses import dataclass, asdict

import numpy as np

# =========================
# Palette: centroids + counts -> HEX entries
# =========================

@dataclass(frozen=True)
class PaletteEntry:
    color: str          # "#RRGGBB", uppercase
    count: int
    percentage: float   # 0..100, not rounded

    def to_dict(self):
        return asdict(self)


def _round_channel(v):
    # round half away from zero, then clamp to a byte
    v = float(v)
    r = np.floor(v + 0.5) if v >= 0 else np.ceil(v - 0.5)
    return int(min(255, max(0, r)))

def rgb_to_hex(rgb):
    r, g, b = (_round_channel(c) for c in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"

def build_palette(centroids, counts, total=None):
    """Turn cluster centers and counts into entries sorted by descending count.
    Clusters with no samples are dropped."""
    counts = [int(c) for c in counts]
    if len(counts) != len(centroids):
        raise ValueError(f"{len(centroids)} centroids but {len(counts)} counts")
    if total is None:
        total = sum(counts)
    if total <= 0:
        raise ValueError(f"total must be positive, got {total}")

    entries = [
        PaletteEntry(color=rgb_to_hex(c), count=n, percentage=n / total * 100.0)
        for c, n in zip(centroids, counts)
        if n > 0
    ]
    # sorted() is stable: equal counts keep centroid order
    return sorted(entries, key=lambda e: e.count, reverse=True)

def fallback_palette():
    # used when no pixel is opaque enough to sample
    return [PaletteEntry(color="#FFFFFF", count=1, percentage=100.0)]
