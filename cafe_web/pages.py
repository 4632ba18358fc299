"""HTML rendering for the café pages.

Every page is a route-specific fragment wrapped in the shared layout by
:func:`render_page`. Templates autoescape, so values coming from guests
(reservation names, times, party sizes) are escaped wherever they land.
"""
from __future__ import annotations

from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

SITE_NAME = "The Grand Café"

env = Environment(
    loader=PackageLoader("cafe_web", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_fragment(template: str, **context: Any) -> Markup:
    """Render a content fragment; the result is safe to embed in a page."""
    return Markup(env.get_template(template).render(**context))


def render_page(title: str, content: str) -> str:
    """Wrap ``content`` in the shared navigation, styling and footer.

    Plain strings are escaped; fragments from :func:`render_fragment` are
    embedded as-is.
    """
    return env.get_template("base.html").render(title=title, content=content, site_name=SITE_NAME)


__all__ = ["SITE_NAME", "env", "render_fragment", "render_page"]
