# =========================
# Stats
# =========================
def palette_summary(entries):
    """Số màu trong palette và tổng số pixel đã phân tích."""
    total = 0
    for e in entries:
        total += e.count
    return {
        "color_count": len(entries),
        "analyzed_pixels": total,
        "dominant": entries[0].color if entries else None,
    }
