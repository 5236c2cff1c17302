"""
Snippets — Template Rendering
==============================

What:  The Jinja2 environment for every page and component.
How:   Templates render to strings; routes wrap them in HTMLResponse, so
       views can be rendered (and tested) without a Request object.
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(template_name: str, **context) -> str:
    return templates.get_template(template_name).render(**context)
