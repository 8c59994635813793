# =============================================================================
# 🧠 QR-Code Generator – QR Studio
# -----------------------------------------------------------------------------
# Erzeugt das nackte QR-Symbol (ohne Ruhezone) in Vorder-/Hintergrundfarbe.
# Fehlerkorrektur ist immer Stufe H.
# =============================================================================

from __future__ import annotations
from io import BytesIO
import logging

import qrcode
from qrcode.constants import ERROR_CORRECT_H
from PIL import Image, ImageColor

from utils.qr_config import PREVIEW_SIZE, SYMBOL_BACKGROUND

# ---------------------------------------------------------------------------
# ⚙️ Logging konfigurieren
# ---------------------------------------------------------------------------
logger = logging.getLogger(__name__)


def render_qr_image(
    payload: str,
    size: int = PREVIEW_SIZE,
    fg: str = "#000000",
    bg: str = SYMBOL_BACKGROUND,
) -> Image.Image:
    """
    Rendert den QR-Code als RGB-Bild mit exakt size×size Pixeln.
    Ungültige Farben lösen ValueError aus.
    """
    fg_rgb = ImageColor.getrgb(fg)
    bg_rgb = ImageColor.getrgb(bg)

    # === 1️⃣ QR-Code Basis ===
    qr = qrcode.QRCode(
        version=None,
        error_correction=ERROR_CORRECT_H,
        box_size=10,
        border=0,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    # === 2️⃣ Ganzzahlige Modulgröße, Rest wird zentriert aufgefüllt ===
    qr.box_size = max(size // qr.modules_count, 1)
    img = qr.make_image(fill_color=fg_rgb, back_color=bg_rgb).convert("RGB")
    if img.width > size:
        # Symbol hat mehr Module als Pixel – nur dann skalieren
        img = img.resize((size, size), Image.Resampling.NEAREST)
    elif img.width < size:
        canvas = Image.new("RGB", (size, size), bg_rgb)
        offset = (size - img.width) // 2
        canvas.paste(img, (offset, offset))
        img = canvas

    logger.debug(f"QR-Symbol gerendert (Version {qr.version}, {qr.box_size}px/Modul, {size}px)")
    return img


def generate_qr_png(
    payload: str,
    size: int = PREVIEW_SIZE,
    fg: str = "#000000",
    bg: str = SYMBOL_BACKGROUND,
) -> bytes:
    """Wie render_qr_image, gibt aber PNG-Bytes zurück."""
    img = render_qr_image(payload, size=size, fg=fg, bg=bg)
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()
