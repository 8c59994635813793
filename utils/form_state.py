# utils/form_state.py
"""
Formular-Zustand pro Sitzung (gewählter Typ, Feldsatz, Rahmen).
Liegt in request.session (signiertes Cookie, SessionMiddleware).
Der Payload wird bei jedem Zugriff neu berechnet – nie gespeichert.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, MutableMapping, Optional

from pydantic import ValidationError

from models.content import FIELD_NAMES, ContentType
from models.frame import FrameConfig, FrameStyle
from utils.payload import build_payload
from utils.qr_config import DEFAULT_FRAME

logger = logging.getLogger(__name__)

SESSION_KEY = "qr_form"

Session = MutableMapping[str, Any]


@dataclass
class FormState:
    content_type: ContentType = ContentType.LINK
    fields: Dict[str, str] = field(default_factory=dict)
    frame: FrameConfig = DEFAULT_FRAME

    @property
    def payload(self) -> str:
        return build_payload(self.content_type, self.fields)

    def to_session(self) -> Dict[str, Any]:
        return {
            "type": self.content_type.value,
            "details": dict(self.fields),
            "frame": self.frame.model_dump(),
        }


def load_state(session: Session) -> FormState:
    raw = session.get(SESSION_KEY)
    if not raw:
        return FormState()

    try:
        content_type = ContentType(raw.get("type", ContentType.LINK.value))
        details = raw.get("details") or {}
        fields = {k: str(v) for k, v in details.items() if k in FIELD_NAMES and v is not None}
        frame = FrameConfig.model_validate(raw.get("frame") or {})
    except (AttributeError, ValueError, ValidationError) as e:
        logger.warning(f"⚠️ Ungültiger Formular-Zustand in der Sitzung – zurückgesetzt: {e}")
        session.pop(SESSION_KEY, None)
        return FormState()

    return FormState(content_type=content_type, fields=fields, frame=frame)


def save_state(session: Session, state: FormState) -> FormState:
    session[SESSION_KEY] = state.to_session()
    return state


def reset_state(session: Session) -> None:
    session.pop(SESSION_KEY, None)


def select_type(session: Session, content_type: ContentType) -> FormState:
    """Typwechsel leert den Feldsatz, der Rahmen bleibt."""
    state = load_state(session)
    return save_state(session, FormState(content_type=content_type, frame=state.frame))


def update_fields(session: Session, values: Mapping[str, Any]) -> FormState:
    state = load_state(session)
    for name, value in values.items():
        if name not in FIELD_NAMES:
            continue
        state.fields[name] = "" if value is None else str(value)
    return save_state(session, state)


def update_frame(
    session: Session,
    style: Optional[FrameStyle] = None,
    text: Optional[str] = None,
    color: Optional[str] = None,
    bg_color: Optional[str] = None,
) -> FormState:
    state = load_state(session)
    frame = state.frame
    if style is not None:
        frame = frame.select_style(style)
    if text is not None and frame.style == "custom":
        frame = frame.with_text(text)
    frame = frame.with_colors(color=color, bg_color=bg_color)
    state.frame = frame
    return save_state(session, state)
