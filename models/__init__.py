# =============================================================================
# 📦 models/__init__.py
# -----------------------------------------------------------------------------
# Inhaltstypen, Feldsatz & Rahmen-Konfiguration
# =============================================================================

from .content import (
    ContentType,
    Encryption,
    FieldSet,
    FormField,
    FIELD_NAMES,
    NAV_ITEMS,
    QR_SCHEMAS,
    URL_TYPES,
    fields_for,
)
from .frame import FrameConfig

__all__ = [
    "ContentType",
    "Encryption",
    "FieldSet",
    "FormField",
    "FIELD_NAMES",
    "NAV_ITEMS",
    "QR_SCHEMAS",
    "URL_TYPES",
    "fields_for",
    "FrameConfig",
]
