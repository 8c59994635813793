# =============================================================================
# 🖼️ QR-Vorschau & PNG-Export – QR Studio
# -----------------------------------------------------------------------------
# Setzt Symbol, Rahmenfläche und Beschriftung zu einem Bild zusammen.
# Alle Maße in CSS-Pixeln, skaliert mit pixel_ratio.
# =============================================================================

from __future__ import annotations
from io import BytesIO
from typing import List, Union
import logging

from PIL import Image, ImageDraw, ImageFont
from qrcode.exceptions import DataOverflowError

from models.frame import FrameConfig
from utils.qr_config import (
    EXPORT_PIXEL_RATIO,
    FALLBACK_VALUE,
    LABEL_FONT_SIZE,
    LABEL_FONTS,
    LABEL_GAP,
    LABEL_LINE_HEIGHT,
    MAX_PIXEL_RATIO,
    PREVIEW_PADDING,
    PREVIEW_SIZE,
    SYMBOL_BACKGROUND,
    SYMBOL_PADDING,
    SYMBOL_RADIUS,
)
from utils.qr_generator import render_qr_image

logger = logging.getLogger(__name__)

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


class ExportError(Exception):
    """Vorschau konnte nicht als Bild erzeugt werden."""


def _load_font(px: int) -> Font:
    for name in LABEL_FONTS:
        try:
            return ImageFont.truetype(name, px)
        except OSError:
            continue
    return ImageFont.load_default(size=px)


def _wrap_label(text: str, font: Font, max_width: int) -> List[str]:
    """Bricht die Beschriftung an Wortgrenzen um, überlange Wörter zeichenweise."""
    measure = ImageDraw.Draw(Image.new("RGB", (1, 1)))

    def fits(candidate: str) -> bool:
        return measure.textlength(candidate, font=font) <= max_width

    lines: List[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if fits(candidate):
            current = candidate
            continue
        if current:
            lines.append(current)
            current = ""
        # break-words
        while word and not fits(word):
            cut = max(len(word) - 1, 1)
            while cut > 1 and not fits(word[:cut]):
                cut -= 1
            lines.append(word[:cut])
            word = word[cut:]
        current = word
    if current:
        lines.append(current)
    return lines


def render_preview(payload: str, frame: FrameConfig, pixel_ratio: int = 1) -> Image.Image:
    """
    Zeichnet die komplette Vorschau (so wie sie heruntergeladen wird).
    Leerer Inhalt → Platzhalter-URL im Symbol.
    """
    if pixel_ratio < 1 or pixel_ratio > MAX_PIXEL_RATIO:
        raise ValueError(f"pixel_ratio muss zwischen 1 und {MAX_PIXEL_RATIO} liegen")

    r = pixel_ratio
    pad = PREVIEW_PADDING * r
    symbol_pad = SYMBOL_PADDING * r
    symbol_size = PREVIEW_SIZE * r
    box = symbol_size + 2 * symbol_pad
    width = box + 2 * pad

    # === 1️⃣ Beschriftung vorbereiten ===
    lines: List[str] = []
    font = None
    label_height = 0
    if frame.enabled:
        font = _load_font(LABEL_FONT_SIZE * r)
        lines = _wrap_label(frame.text.upper(), font, symbol_size)
        label_height = LABEL_GAP * r + len(lines) * LABEL_LINE_HEIGHT * r

    height = pad + box + label_height + pad

    # === 2️⃣ Fläche + weiße Box + Symbol ===
    canvas = Image.new("RGB", (width, height), frame.background())
    draw = ImageDraw.Draw(canvas)
    draw.rounded_rectangle(
        (pad, pad, pad + box - 1, pad + box - 1),
        radius=SYMBOL_RADIUS * r,
        fill=SYMBOL_BACKGROUND,
    )
    symbol = render_qr_image(payload or FALLBACK_VALUE, size=symbol_size, fg=frame.color)
    canvas.paste(symbol, (pad + symbol_pad, pad + symbol_pad))

    # === 3️⃣ Beschriftung unten ===
    if font is not None:
        y = pad + box + LABEL_GAP * r
        for line in lines:
            text_w = draw.textlength(line, font=font)
            draw.text(
                ((width - text_w) / 2, y),
                line,
                fill=frame.label_color(),
                font=font,
            )
            y += LABEL_LINE_HEIGHT * r

    return canvas


def export_png(payload: str, frame: FrameConfig, pixel_ratio: int = EXPORT_PIXEL_RATIO) -> bytes:
    """Rendert die Vorschau als PNG-Bytes; jeder Renderfehler wird zu ExportError."""
    try:
        img = render_preview(payload, frame, pixel_ratio=pixel_ratio)
        buffer = BytesIO()
        img.save(buffer, format="PNG")
    except (ValueError, OSError, DataOverflowError) as e:
        raise ExportError(str(e)) from e

    logger.info(f"✅ Vorschau exportiert ({img.width}x{img.height}px, Faktor {pixel_ratio})")
    return buffer.getvalue()
