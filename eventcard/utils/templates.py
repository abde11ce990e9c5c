from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2
from markupsafe import Markup

_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=jinja2.StrictUndefined,
)


def render_template(template_name: str, **kwargs: Any) -> Markup:
    """Render a fragment template; the result is safe to embed in another template."""
    return Markup(_jinja_env.get_template(template_name).render(**kwargs))
