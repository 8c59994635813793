# models/content.py
# =============================================================================
# 🧩 Content-Modell (QR Studio)
# -----------------------------------------------------------------------------
# Geschlossene Menge der Inhaltstypen + Feldnamen je Typ.
# Kein Verhalten – nur Definitionen für Formular, API und Payload-Formatter.
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class ContentType(str, Enum):
    LINK = "link"
    TEXT = "text"
    EMAIL = "email"
    PHONE = "phone"
    SMS = "sms"
    WHATSAPP = "whatsapp"
    WIFI = "wifi"
    VCARD = "vcard"
    EVENT = "event"
    # Typen, die technisch nur Links sind, im UI aber als Datei/Medium erscheinen
    PDF = "pdf"
    APP = "app"
    IMAGE = "image"
    VIDEO = "video"
    SOCIAL = "social"

    @classmethod
    def parse(cls, value: object) -> Optional["ContentType"]:
        """Gibt den passenden Typ zurück oder None bei unbekannten Werten."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class Encryption(str, Enum):
    WPA = "WPA"
    WEP = "WEP"
    NOPASS = "nopass"


URL_TYPES: Tuple[ContentType, ...] = (
    ContentType.LINK,
    ContentType.PDF,
    ContentType.APP,
    ContentType.IMAGE,
    ContentType.VIDEO,
    ContentType.SOCIAL,
)

FIELD_NAMES: Tuple[str, ...] = (
    "url",
    "text",
    "email",
    "subject",
    "body",
    "phone",
    "firstName",
    "lastName",
    "organization",
    "ssid",
    "password",
    "encryption",
    "eventTitle",
    "eventLocation",
    "eventStart",
    "eventEnd",
)


class FieldSet(BaseModel):
    """Flacher Datensatz aller Formularwerte (alle optional)."""

    model_config = ConfigDict(extra="ignore")

    url: Optional[str] = None
    text: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    phone: Optional[str] = None
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    organization: Optional[str] = None
    ssid: Optional[str] = None
    password: Optional[str] = None
    encryption: Optional[str] = None
    eventTitle: Optional[str] = None
    eventLocation: Optional[str] = None
    eventStart: Optional[str] = None
    eventEnd: Optional[str] = None


# ─────────────────────────────────────────────
# ✅ Relevante Felder pro Typ
# ─────────────────────────────────────────────
QR_SCHEMAS: Dict[ContentType, Tuple[str, ...]] = {
    **{t: ("url",) for t in URL_TYPES},
    ContentType.TEXT: ("text",),
    ContentType.EMAIL: ("email", "subject", "body"),
    ContentType.PHONE: ("phone",),
    ContentType.SMS: ("phone", "text"),
    ContentType.WHATSAPP: ("phone", "text"),
    ContentType.WIFI: ("ssid", "password", "encryption"),
    ContentType.VCARD: ("firstName", "lastName", "phone", "email", "organization"),
    ContentType.EVENT: ("eventTitle", "eventLocation", "eventStart", "eventEnd"),
}


# ─────────────────────────────────────────────
# 🧭 Navigation (Reihenfolge = Anzeige)
# ─────────────────────────────────────────────
NAV_ITEMS: List[Tuple[ContentType, str]] = [
    (ContentType.LINK, "Link"),
    (ContentType.TEXT, "Text"),
    (ContentType.EMAIL, "E-Mail"),
    (ContentType.PHONE, "Anruf"),
    (ContentType.SMS, "SMS"),
    (ContentType.WHATSAPP, "WhatsApp"),
    (ContentType.WIFI, "WLAN"),
    (ContentType.VCARD, "V-Card"),
    (ContentType.EVENT, "Termin"),
    (ContentType.PDF, "PDF"),
    (ContentType.APP, "App"),
    (ContentType.IMAGE, "Bilder"),
    (ContentType.VIDEO, "Video"),
    (ContentType.SOCIAL, "Social"),
]

TYPE_LABELS: Dict[ContentType, str] = dict(NAV_ITEMS)


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    kind: str = "text"  # url | text | textarea | email | tel | select
    placeholder: str = ""
    options: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    note: str = ""


_HOSTING_NOTE = "* Hinweis: Der QR-Code speichert nur den Link, unter dem Ihre Datei liegt."

# Label / Platzhalter für die Link-Typen
_URL_INPUTS: Dict[ContentType, Tuple[str, str]] = {
    ContentType.LINK: ("Website-URL", "https://www.beispiel.de"),
    ContentType.PDF: ("Link zur PDF-Datei", "https://..."),
    ContentType.APP: ("Link zum App Store / Play Store", "https://..."),
    ContentType.IMAGE: ("Link zum Bild", "https://..."),
    ContentType.VIDEO: ("Link zum Video (YouTube usw.)", "https://..."),
    ContentType.SOCIAL: ("Link zum Social-Media-Profil", "https://instagram.com/ihr_profil"),
}

ENCRYPTION_OPTIONS: Tuple[Tuple[str, str], ...] = (
    (Encryption.WPA.value, "WPA/WPA2"),
    (Encryption.WEP.value, "WEP"),
    (Encryption.NOPASS.value, "Ohne Passwort"),
)

FORM_FIELDS: Dict[ContentType, List[FormField]] = {
    **{
        t: [
            FormField(
                "url",
                label,
                kind="url",
                placeholder=placeholder,
                note=_HOSTING_NOTE if t in (ContentType.PDF, ContentType.IMAGE, ContentType.VIDEO) else "",
            )
        ]
        for t, (label, placeholder) in _URL_INPUTS.items()
    },
    ContentType.TEXT: [
        FormField("text", "Text", kind="textarea", placeholder="Text hier eingeben..."),
    ],
    ContentType.EMAIL: [
        FormField("email", "Empfänger-E-Mail", kind="email"),
        FormField("subject", "Betreff"),
        FormField("body", "Nachricht", kind="textarea"),
    ],
    ContentType.PHONE: [
        FormField("phone", "Telefonnummer", kind="tel", placeholder="+49 30 1234567"),
    ],
    ContentType.SMS: [
        FormField("phone", "Telefonnummer", kind="tel", placeholder="+49..."),
        FormField("text", "SMS-Nachricht", kind="textarea"),
    ],
    ContentType.WHATSAPP: [
        FormField("phone", "WhatsApp-Nummer", kind="tel", placeholder="+49..."),
        FormField("text", "Startnachricht (optional)", kind="textarea"),
    ],
    ContentType.WIFI: [
        FormField("ssid", "Netzwerkname (SSID)"),
        FormField("password", "Passwort"),
        FormField("encryption", "Verschlüsselung", kind="select", options=ENCRYPTION_OPTIONS),
    ],
    ContentType.VCARD: [
        FormField("firstName", "Vorname"),
        FormField("lastName", "Nachname"),
        FormField("phone", "Telefon", kind="tel"),
        FormField("email", "E-Mail", kind="email"),
        FormField("organization", "Firma/Organisation"),
    ],
    ContentType.EVENT: [
        FormField("eventTitle", "Titel des Termins"),
        FormField("eventLocation", "Ort"),
        FormField("eventStart", "Beginn (z. B. 20231231T190000)", placeholder="YYYYMMDDTHHmmSS"),
        FormField("eventEnd", "Ende", placeholder="YYYYMMDDTHHmmSS"),
    ],
}


def fields_for(content_type: object) -> List[FormField]:
    """Formularfelder für einen Typ; leere Liste für unbekannte Typen."""
    ctype = ContentType.parse(content_type)
    if ctype is None:
        return []
    return FORM_FIELDS[ctype]
