from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.config.settings import Settings
from src.interfaces.http.deps import get_app_settings
from src.interfaces.http.schemas.contacts import ContactLinksResponse
from src.utils.phone import build_contact_links

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.get("/links", response_model=ContactLinksResponse)
async def contact_links(
    *,
    settings: Settings = Depends(get_app_settings),
    phone: str | None = Query(None),
    email: str | None = Query(None),
    text: str | None = Query(None, description="Prefilled WhatsApp message"),
):
    links = build_contact_links(
        phone,
        email,
        text=text,
        default_country_code=settings.default_country_code,
    )
    return ContactLinksResponse(
        e164=links.e164,
        tel=links.tel,
        mailto=links.mailto,
        whatsapp=links.whatsapp,
    )
