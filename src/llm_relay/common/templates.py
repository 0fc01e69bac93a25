"""Page templating helpers."""
from __future__ import annotations
from pathlib import Path

DEFAULT_PAGE = Path(__file__).with_name("page.html")

def load_template(path: str | Path = DEFAULT_PAGE) -> str:
    """
    Load a page template file.

    Args:
        path: Path to template.
    """
    return Path(path).read_text(encoding="utf-8")

def render_page(template: str, **values: str) -> str:
    """
    Fill ``{{name}}`` placeholders in the template.

    Args:
        template: Template content.
        values: Replacement text keyed by placeholder name.

    Returns:
        Rendered page.
    """
    for key, value in values.items():
        template = template.replace("{{" + key + "}}", value)
    return template
