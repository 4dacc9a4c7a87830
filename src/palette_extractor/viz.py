import math
import cv2
import numpy as np

# ==== Layout of the preview image (RGB) ====
BACKGROUND = (248, 249, 251)
CARD_CAPTION_BG = (238, 240, 244)
CARD_BORDER = (210, 214, 220)
CAPTION_FG = (33, 37, 41)

def hex_to_rgb(color):
    c = color.lstrip("#")
    return (int(c[0:2], 16), int(c[2:4], 16), int(c[4:6], 16))

def is_dark_color(color):
    # perceived brightness, 0..1
    r, g, b = hex_to_rgb(color)
    luminance = (0.299 * r + 0.587 * g + 0.114 * b) / 255
    return luminance < 0.5

def _draw_text_with_bg(img, text, org, fg=(255,255,255), bg=(0,0,0), scale=0.5, thickness=1, pad=3):
    """Vẽ chữ có nền để dễ đọc trên mọi nền."""
    (tw, th), base = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, scale, thickness)
    x, y = org
    cv2.rectangle(img, (x, y - th - 2*pad), (x + tw + 2*pad, y + base + pad), bg, thickness=-1)
    cv2.putText(img, text, (x + pad, y), cv2.FONT_HERSHEY_SIMPLEX, scale, fg, thickness, cv2.LINE_AA)

def _draw_centered(img, text, box, fg, scale=0.5, thickness=1):
    x1, y1, x2, y2 = box
    (tw, th), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, scale, thickness)
    org = (x1 + (x2 - x1 - tw) // 2, y1 + (y2 - y1 + th) // 2)
    cv2.putText(img, text, org, cv2.FONT_HERSHEY_SIMPLEX, scale, fg, thickness, cv2.LINE_AA)

def draw_distribution_bar(img, entries, box):
    """Fill box left to right with one segment per entry, width ~ percentage."""
    x1, y1, x2, y2 = box
    width = x2 - x1
    x = x1
    for i, e in enumerate(entries):
        # last segment absorbs rounding so the bar is always full
        x_end = x2 if i == len(entries) - 1 else x1 + int(round(width * sum(p.percentage for p in entries[:i+1]) / 100.0))
        x_end = min(x_end, x2)
        if x_end > x:
            cv2.rectangle(img, (x, y1), (x_end - 1, y2), hex_to_rgb(e.color), thickness=-1)
        x = x_end
    return img

def render_palette(entries, columns=3, swatch_w=190, swatch_h=120, caption_h=44, gap=16, pad=24, bar_h=16):
    """
    Render the palette as an RGB image:
    - a distribution bar on top,
    - one card per color: swatch with percentage badge, caption with HEX and count.
    """
    n = max(len(entries), 1)
    cols = min(n, columns)
    rows = math.ceil(n / cols)
    card_h = swatch_h + caption_h

    W = pad*2 + cols*swatch_w + (cols - 1)*gap
    H = pad*2 + bar_h + gap + rows*card_h + (rows - 1)*gap
    out = np.full((H, W, 3), BACKGROUND, dtype=np.uint8)

    draw_distribution_bar(out, entries, (pad, pad, W - pad, pad + bar_h))

    top = pad + bar_h + gap
    for i, e in enumerate(entries):
        row, col = divmod(i, cols)
        x1 = pad + col*(swatch_w + gap)
        y1 = top + row*(card_h + gap)
        x2 = x1 + swatch_w - 1
        sy2 = y1 + swatch_h - 1
        y2 = y1 + card_h - 1
        rgb = hex_to_rgb(e.color)

        cv2.rectangle(out, (x1, y1), (x2, sy2), rgb, thickness=-1)
        cv2.rectangle(out, (x1, sy2 + 1), (x2, y2), CARD_CAPTION_BG, thickness=-1)
        cv2.rectangle(out, (x1, y1), (x2, y2), CARD_BORDER, thickness=1)

        # badge: light on dark swatches, dark on light ones
        dark = is_dark_color(e.color)
        badge_bg = tuple(min(255, int(c + (255 - c)*0.3)) for c in rgb) if dark else tuple(int(c*0.7) for c in rgb)
        pct_txt = f"{e.percentage:.1f}%"
        (tw, _), _ = cv2.getTextSize(pct_txt, cv2.FONT_HERSHEY_SIMPLEX, 0.45, 1)
        _draw_text_with_bg(out, pct_txt, (x2 - tw - 12, y1 + 20), fg=(255,255,255), bg=badge_bg, scale=0.45)

        _draw_centered(out, e.color, (x1, sy2 + 1, x2, sy2 + caption_h // 2), CAPTION_FG)
        _draw_centered(out, f"{e.count:,} px", (x1, sy2 + caption_h // 2, x2, y2), CAPTION_FG, scale=0.4)

    return out
