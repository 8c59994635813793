from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field

from models.content import NAV_ITEMS, QR_SCHEMAS
from models.frame import FrameConfig
from utils.payload import build_payload
from utils.qr_config import EXPORT_ERROR_MESSAGE, EXPORT_FILENAME, EXPORT_PIXEL_RATIO, MAX_PIXEL_RATIO
from utils.qr_preview import ExportError, export_png

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Public API"])


class PayloadIn(BaseModel):
    type: str = Field(..., description="QR type")
    details: dict[str, Any] = Field(default_factory=dict)


class QRImageIn(PayloadIn):
    frame: FrameConfig = Field(default_factory=FrameConfig)
    pixel_ratio: int = Field(default=EXPORT_PIXEL_RATIO, ge=1, le=MAX_PIXEL_RATIO)


@router.get("/types")
def list_types():
    return [
        {"type": ctype.value, "label": label, "fields": list(QR_SCHEMAS[ctype])}
        for ctype, label in NAV_ITEMS
    ]


@router.post("/payload")
def create_payload(body: PayloadIn):
    # Unknown types are not an error: the payload is simply empty.
    return {"type": body.type, "value": build_payload(body.type, body.details)}


@router.post("/qr")
def create_qr_image(body: QRImageIn, download: bool = False):
    payload = build_payload(body.type, body.details)
    try:
        png = export_png(payload, body.frame, pixel_ratio=body.pixel_ratio)
    except ExportError:
        logger.exception("QR export failed for type %s", body.type)
        raise HTTPException(status_code=500, detail=EXPORT_ERROR_MESSAGE)

    headers = {"Cache-Control": "no-store"}
    if download:
        headers["Content-Disposition"] = f'attachment; filename="{EXPORT_FILENAME}"'
    return Response(png, media_type="image/png", headers=headers)
