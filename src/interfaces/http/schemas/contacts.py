from __future__ import annotations

from pydantic import BaseModel


class ContactLinksResponse(BaseModel):
    e164: str | None = None
    tel: str | None = None
    mailto: str | None = None
    whatsapp: str | None = None
