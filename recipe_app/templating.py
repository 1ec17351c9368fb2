"""Jinja2 views: a view name such as ``recipe/show`` maps to ``recipe/show.html``."""

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    request: Request, view: str, model: dict[str, Any] | None = None, status_code: int = 200
) -> Response:
    """Render the template for ``view`` with ``model`` as its context."""
    return templates.TemplateResponse(
        request, f"{view}.html", model or {}, status_code=status_code
    )
