"""
utils/qr_config.py
────────────────────────────────────────────
Globale Darstellungs- und Exportkonfiguration
für QR Studio.

Definiert Vorschaugröße, Export-Skalierung, Rahmenstile
und die Schriften für die Rahmenbeschriftung.
────────────────────────────────────────────
"""

from typing import Dict, Tuple

from models.frame import FrameConfig

# ─────────────────────────────────────────────
# 📐 VORSCHAU & EXPORT
# ─────────────────────────────────────────────
PREVIEW_SIZE = 200          # Kantenlänge des QR-Symbols in px
PREVIEW_PADDING = 32        # Rand um das gesamte Vorschaubild
SYMBOL_PADDING = 8          # weißer Rand um das Symbol
SYMBOL_RADIUS = 8
LABEL_GAP = 16
LABEL_FONT_SIZE = 20
LABEL_LINE_HEIGHT = 28

EXPORT_PIXEL_RATIO = 3
MAX_PIXEL_RATIO = 6
EXPORT_FILENAME = "qrcode.png"

# Platzhalter, solange noch kein Inhalt eingegeben wurde
FALLBACK_VALUE = "https://example.com"
SYMBOL_BACKGROUND = "#ffffff"

EXPORT_ERROR_MESSAGE = "Fehler beim Erzeugen des Bildes. Bitte erneut versuchen."

# ─────────────────────────────────────────────
# 🖼️ RAHMENSTILE
# ─────────────────────────────────────────────
FRAME_STYLES: Dict[str, str] = {
    "simple": "Ohne Rahmen",
    "scanme": "Scan Me",
    "custom": "Eigener Text",
}

DEFAULT_FRAME = FrameConfig()

# Fett-Schriften in Suchreihenfolge; Fallback ist Pillows eingebaute Schrift
LABEL_FONTS: Tuple[str, ...] = (
    "DejaVuSans-Bold.ttf",
    "Arial Bold.ttf",
    "arialbd.ttf",
    "arial.ttf",
)
