"""Steam Card Exchange inventory page extraction."""
from .fetch import fetch_and_parse
from .parse import parse_sce_html

__all__ = [
    "fetch_and_parse",
    "parse_sce_html",
]
