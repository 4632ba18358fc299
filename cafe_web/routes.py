from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from cafe import GUEST_OPTIONS, MenuCatalog, ReservationBook, ReviewBoard

from .pages import SITE_NAME, render_fragment, render_page
from .schemas import ReservationForm, read_reservation_form

TODAYS_SPECIAL = "Cold Brew Nitro"

site = APIRouter(default_response_class=HTMLResponse)
api = APIRouter(prefix="/api")


# ---------------------------------------------------------------------------
# Store dependencies
# ---------------------------------------------------------------------------
def get_catalog(request: Request) -> MenuCatalog:
    return request.app.state.catalog


def get_reviews(request: Request) -> ReviewBoard:
    return request.app.state.reviews


def get_reservations(request: Request) -> ReservationBook:
    return request.app.state.reservations


# ---------------------------------------------------------------------------
# HTML pages
# ---------------------------------------------------------------------------
def _page(title: str, template: str, **context: Any) -> HTMLResponse:
    return HTMLResponse(render_page(title, render_fragment(template, **context)))


@site.get("/")
def home(
    catalog: MenuCatalog = Depends(get_catalog),
    reviews: ReviewBoard = Depends(get_reviews),
) -> HTMLResponse:
    return _page(
        "Home",
        "home.html",
        site_name=SITE_NAME,
        special=catalog.find(TODAYS_SPECIAL),
        reviews=reviews.list(),
    )


@site.get("/menu")
def menu(catalog: MenuCatalog = Depends(get_catalog)) -> HTMLResponse:
    return _page("Menu", "menu.html", groups=catalog.by_category())


@site.get("/reservations")
def reservation_form() -> HTMLResponse:
    return _page("Reservations", "reservation_form.html", guest_options=GUEST_OPTIONS)


@site.post("/reservations")
def book_table(
    form: ReservationForm = Depends(read_reservation_form),
    reservations: ReservationBook = Depends(get_reservations),
) -> HTMLResponse:
    reservation = reservations.create(name=form.name, time=form.time, guests=form.guests)
    return _page("Booking Confirmed", "reservation_confirmed.html", reservation=reservation)


@site.get("/admin")
def staff_portal(reservations: ReservationBook = Depends(get_reservations)) -> HTMLResponse:
    return _page("Staff Portal", "admin.html", reservations=reservations.list())


# ---------------------------------------------------------------------------
# JSON API
# ---------------------------------------------------------------------------
@api.get("/menu")
def api_menu(catalog: MenuCatalog = Depends(get_catalog)) -> List[Dict[str, Any]]:
    return [item.to_api() for item in catalog.list()]


@api.get("/reservations")
def api_reservations(reservations: ReservationBook = Depends(get_reservations)) -> List[Dict[str, Any]]:
    return [r.to_api() for r in reservations.list()]


__all__ = ["api", "get_catalog", "get_reservations", "get_reviews", "site"]
