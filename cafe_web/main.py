from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cafe import MenuCatalog, ReservationBook, ReviewBoard

from .access_log import configure_logging, log_requests
from .config import Settings
from .pages import SITE_NAME
from .routes import api, site

logger = logging.getLogger("cafe_web")

BANNER = """
  ################################################
  #    THE GRAND CAFE SYSTEM IS LIVE             #
  #    Server running on: {url:<23}#
  ################################################
"""


def create_app(
    catalog: Optional[MenuCatalog] = None,
    reviews: Optional[ReviewBoard] = None,
    reservations: Optional[ReservationBook] = None,
) -> FastAPI:
    app = FastAPI(title=SITE_NAME, version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    app.state.catalog = catalog if catalog is not None else MenuCatalog.house_menu()
    app.state.reviews = reviews if reviews is not None else ReviewBoard.house_reviews()
    app.state.reservations = reservations if reservations is not None else ReservationBook()

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}

    app.include_router(site)
    app.include_router(api)
    return app


def run(settings: Optional[Settings] = None) -> None:
    import uvicorn

    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    logger.info(BANNER.format(url=settings.public_url))
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
    )


configure_logging()
app = create_app()


if __name__ == "__main__":
    run()

# Entry for local dev
# uvicorn cafe_web.main:app --reload --port 3000
