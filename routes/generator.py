# routes/generator.py
# =============================================================================
# 🚀 Generator-Seite (QR Studio)
# - Typ wählen, Felder ausfüllen, Rahmen gestalten
# - Vorschau als PNG, Download als qrcode.png
# =============================================================================

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, Request, Form, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from models.content import NAV_ITEMS, ContentType, fields_for
from models.frame import HEX_COLOR_PATTERN, MAX_FRAME_TEXT, FrameStyle
from utils.form_state import FormState, load_state, reset_state, select_type, update_fields, update_frame
from utils.qr_config import EXPORT_ERROR_MESSAGE, EXPORT_FILENAME, FRAME_STYLES
from utils.qr_preview import ExportError, export_png

logger = logging.getLogger(__name__)

router = APIRouter(tags=["QR Generator"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def _page_context(state: FormState, alert: Optional[str] = None) -> Dict[str, Any]:
    payload = state.payload
    return {
        "app_title": os.getenv("APP_TITLE", "QR Studio"),
        "nav_items": NAV_ITEMS,
        "selected_type": state.content_type,
        "form_fields": fields_for(state.content_type),
        "details": state.fields,
        "payload": payload,
        "frame": state.frame,
        "frame_styles": FRAME_STYLES,
        "max_frame_text": MAX_FRAME_TEXT,
        "preview_version": abs(hash((payload, state.frame.model_dump_json()))),
        "alert": alert,
    }


def _see_other() -> RedirectResponse:
    return RedirectResponse("/", status_code=303)


@router.get("/", response_class=HTMLResponse)
def show_generator(request: Request) -> HTMLResponse:
    """Zeigt Typauswahl, Formular und Vorschau."""
    state = load_state(request.session)
    return templates.TemplateResponse(request, "generator.html", _page_context(state))


@router.post("/type")
def change_type(request: Request, content_type: str = Form(...)) -> RedirectResponse:
    """Wechselt den Inhaltstyp und leert alle Felder."""
    ctype = ContentType.parse(content_type)
    if ctype is None:
        raise HTTPException(status_code=400, detail=f"Unbekannter QR-Typ: {content_type}")
    select_type(request.session, ctype)
    return _see_other()


@router.post("/fields")
async def submit_fields(request: Request) -> RedirectResponse:
    """Übernimmt die Formularwerte in den Feldsatz der Sitzung."""
    form = await request.form()
    values = {name: value for name, value in form.items() if isinstance(value, str)}
    update_fields(request.session, values)
    return _see_other()


@router.post("/frame")
def change_frame(
    request: Request,
    style: Optional[FrameStyle] = Form(None),
    text: Optional[str] = Form(None),
    color: Optional[str] = Form(None, pattern=HEX_COLOR_PATTERN),
    bg_color: Optional[str] = Form(None, pattern=HEX_COLOR_PATTERN),
) -> RedirectResponse:
    """Rahmenstil, Beschriftung und Farben ändern."""
    update_frame(request.session, style=style, text=text, color=color, bg_color=bg_color)
    return _see_other()


@router.post("/reset")
def reset_generator(request: Request) -> RedirectResponse:
    reset_state(request.session)
    return _see_other()


@router.get("/preview.png")
def preview_png(request: Request) -> Response:
    state = load_state(request.session)
    try:
        png = export_png(state.payload, state.frame, pixel_ratio=1)
    except ExportError:
        logger.exception("❌ Vorschau konnte nicht gerendert werden")
        raise HTTPException(status_code=500, detail=EXPORT_ERROR_MESSAGE)
    return Response(png, media_type="image/png", headers={"Cache-Control": "no-store"})


@router.get("/download", response_class=HTMLResponse)
def download_qr(request: Request) -> Response:
    """Liefert die Vorschau in dreifacher Auflösung als qrcode.png."""
    state = load_state(request.session)
    payload = state.payload
    if not payload:
        raise HTTPException(status_code=400, detail="Kein Inhalt zum Herunterladen")

    try:
        png = export_png(payload, state.frame)
    except ExportError:
        logger.exception("❌ Fehler beim Export des QR-Codes")
        return templates.TemplateResponse(
            request,
            "generator.html",
            _page_context(state, alert=EXPORT_ERROR_MESSAGE),
            status_code=500,
        )

    return Response(
        png,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )
