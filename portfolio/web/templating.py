# portfolio/web/templating.py
"""
Jinja2 setup shared by the public and admin pages.
"""
import logging
from pathlib import Path
from typing import Optional

from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, select_autoescape

from portfolio.web.formatting import FILTERS

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


def create_environment(template_dir: Optional[str] = None) -> Environment:
    """
    Build the Jinja2 environment with the display filters registered.

    Args:
        template_dir: Path to template directory. Defaults to portfolio/templates
    """
    template_dir = template_dir or str(TEMPLATE_DIR)

    env = Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=select_autoescape(['html', 'xml']),
        trim_blocks=True,
        lstrip_blocks=True
    )
    env.filters.update(FILTERS)

    logger.debug(f"Template environment initialized with template_dir={template_dir}")
    return env


templates = Jinja2Templates(env=create_environment())
