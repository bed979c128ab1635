"""Site generation and redirect stubs."""

from .mkdocs_build import build_site
from .redirects import Redirect, generate_redirects, parse_redirects, render_redirect_page

__all__ = [
    "build_site",
    "Redirect",
    "generate_redirects",
    "parse_redirects",
    "render_redirect_page",
]
