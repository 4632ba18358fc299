from __future__ import annotations

from typing import Any, Dict

from fastapi import HTTPException, Request
from pydantic import BaseModel, field_validator

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class ReservationForm(BaseModel):
    """Booking form body. Fields are not validated beyond presence."""

    name: str = ""
    time: str = ""
    guests: str = ""

    @field_validator("name", "time", "guests", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


async def read_reservation_form(request: Request) -> ReservationForm:
    """Parse a JSON or form-encoded body into a :class:`ReservationForm`."""
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    payload: Dict[str, Any] = {}
    if content_type == "application/json" and (await request.body()).strip():
        try:
            data = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Malformed JSON body")
        if isinstance(data, dict):
            payload = data
    elif content_type in FORM_TYPES:
        form = await request.form()
        payload = {key: form.get(key) for key in ("name", "time", "guests")}
    return ReservationForm(**{key: payload.get(key) for key in ("name", "time", "guests")})


__all__ = ["ReservationForm", "read_reservation_form"]
