"""
utils/payload.py
────────────────────────────────────────────
Payload-Formatter für QR Studio.
(Inhaltstyp, Feldsatz) → String, der in den QR-Code kodiert wird.

- Reine Funktion: keine I/O, kein Zustand, keine Exceptions
- Fehlende Felder werden zu "" (ein einziger Schritt am Anfang)
- Formate: mailto, tel, SMSTO, wa.me, WIFI, vCard 3.0, VEVENT
────────────────────────────────────────────
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, Mapping, Optional, Union
from urllib.parse import quote

from models.content import FIELD_NAMES, ContentType, FieldSet, URL_TYPES

Fields = Dict[str, str]
FieldInput = Union[FieldSet, Mapping[str, Any], None]

# Zeichen, die encodeURIComponent unverändert lässt
_URI_COMPONENT_SAFE = "-_.!~*'()"
_NON_DIGITS = re.compile(r"[^0-9]")
_DATE_SEPARATORS = re.compile(r"[-:]")


def encode_uri_component(value: str) -> str:
    """Prozent-Kodierung wie encodeURIComponent (Leerzeichen → %20)."""
    return quote(value, safe=_URI_COMPONENT_SAFE, errors="surrogatepass")


def resolve_fields(fields: FieldInput) -> Fields:
    """Alle bekannten Feldnamen → Text; None/fehlend → ""."""
    if fields is None:
        raw: Mapping[str, Any] = {}
    elif isinstance(fields, FieldSet):
        raw = fields.model_dump()
    else:
        raw = fields

    resolved: Fields = {}
    for name in FIELD_NAMES:
        value = raw.get(name)
        resolved[name] = "" if value is None else str(value)
    return resolved


# ---------------------------------------------------------------------------
# 🧾 Formatierer pro Typ
# ---------------------------------------------------------------------------

def _url(f: Fields) -> str:
    return f["url"]


def _text(f: Fields) -> str:
    return f["text"]


def _email(f: Fields) -> str:
    return (
        f"mailto:{f['email']}"
        f"?subject={encode_uri_component(f['subject'])}"
        f"&body={encode_uri_component(f['body'])}"
    )


def _phone(f: Fields) -> str:
    return f"tel:{f['phone']}"


def _sms(f: Fields) -> str:
    return f"SMSTO:{f['phone']}:{f['text']}"


def _whatsapp(f: Fields) -> str:
    digits = _NON_DIGITS.sub("", f["phone"])
    return f"https://wa.me/{digits}?text={encode_uri_component(f['text'])}"


def _wifi(f: Fields) -> str:
    # WIFI:T:WPA;S:MeinNetz;P:geheim;;
    encryption = f["encryption"] or "WPA"
    return f"WIFI:T:{encryption};S:{f['ssid']};P:{f['password']};;"


def _vcard(f: Fields) -> str:
    # Werte bewusst ohne Escaping von ; , und Zeilenumbrüchen
    return "\n".join(
        [
            "BEGIN:VCARD",
            "VERSION:3.0",
            f"N:{f['lastName']};{f['firstName']}",
            f"FN:{f['firstName']} {f['lastName']}",
            f"ORG:{f['organization']}",
            f"TEL:{f['phone']}",
            f"EMAIL:{f['email']}",
            "END:VCARD",
        ]
    )


def _compact_datetime(value: str) -> str:
    return _DATE_SEPARATORS.sub("", value)


def _event(f: Fields) -> str:
    return "\n".join(
        [
            "BEGIN:VEVENT",
            f"SUMMARY:{f['eventTitle']}",
            f"LOCATION:{f['eventLocation']}",
            f"DTSTART:{_compact_datetime(f['eventStart'])}",
            f"DTEND:{_compact_datetime(f['eventEnd'])}",
            "END:VEVENT",
        ]
    )


PAYLOAD_BUILDERS: Dict[ContentType, Callable[[Fields], str]] = {
    **{t: _url for t in URL_TYPES},
    ContentType.TEXT: _text,
    ContentType.EMAIL: _email,
    ContentType.PHONE: _phone,
    ContentType.SMS: _sms,
    ContentType.WHATSAPP: _whatsapp,
    ContentType.WIFI: _wifi,
    ContentType.VCARD: _vcard,
    ContentType.EVENT: _event,
}


def build_payload(content_type: Optional[object], fields: FieldInput = None) -> str:
    """
    Erzeugt den QR-Inhalt für (Typ, Feldsatz).
    Unbekannter oder fehlender Typ → "".
    """
    ctype = ContentType.parse(content_type)
    if ctype is None:
        return ""
    return PAYLOAD_BUILDERS[ctype](resolve_fields(fields))
