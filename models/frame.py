# models/frame.py
# =============================================================================
# 🖼️ Rahmen-Konfiguration (QR Studio)
# -----------------------------------------------------------------------------
# Reine Darstellungsdaten: Rahmen an/aus, Beschriftung, Stil, Farben.
# Gehört nicht zum Payload – wird nur von Vorschau & Export gelesen.
# =============================================================================

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

FrameStyle = Literal["simple", "scanme", "custom"]

SCAN_ME_TEXT = "SCAN ME"
CUSTOM_DEFAULT_TEXT = "SCANNEN"
MAX_FRAME_TEXT = 20
HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"

WHITE = "#ffffff"
BLACK = "#000000"


class FrameConfig(BaseModel):
    """Rahmen um die QR-Vorschau. Änderungen liefern immer eine neue Instanz."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    text: str = Field(SCAN_ME_TEXT, max_length=MAX_FRAME_TEXT)
    style: FrameStyle = "scanme"
    color: str = Field(BLACK, pattern=HEX_COLOR_PATTERN)
    bg_color: str = Field(BLACK, pattern=HEX_COLOR_PATTERN)

    def select_style(self, style: FrameStyle) -> "FrameConfig":
        if style == "scanme":
            text = SCAN_ME_TEXT
        else:
            text = self.text or CUSTOM_DEFAULT_TEXT
        return self.model_copy(update={"enabled": style != "simple", "style": style, "text": text})

    def with_text(self, text: str) -> "FrameConfig":
        return self.model_copy(update={"text": text[:MAX_FRAME_TEXT]})

    def with_colors(self, color: Optional[str] = None, bg_color: Optional[str] = None) -> "FrameConfig":
        update = {}
        if color:
            update["color"] = color
        if bg_color:
            update["bg_color"] = bg_color
        return self.model_copy(update=update)

    def label_color(self) -> str:
        """Schriftfarbe der Beschriftung – weiß, außer auf weißem Rahmen."""
        color = self.color.lower()
        bg = self.bg_color.lower()
        if color == BLACK and bg == BLACK:
            return WHITE
        if bg == WHITE:
            return self.color
        return WHITE

    def background(self) -> str:
        return self.bg_color if self.enabled else WHITE
