"""Escaping helpers for HTML and inline CSS interpolation.

Every user-supplied string that ends up in the generated page passes
through one of these functions.
"""

from __future__ import annotations

import html
import re
from urllib.parse import quote

from portfolio_builder.constants.theme_constants import GRADIENT_FUNCTIONS

# Characters that would let a value escape a CSS declaration or a <style> element.
_CSS_UNSAFE = re.compile(r"""[<>{};"'\\\r\n]""")

# Keep URL structure intact, encode quotes, parens, whitespace and angle brackets.
_URL_SAFE_CHARS = ":/?#[]@!$&*+,;=%~-._"


def escape_html(value: object) -> str:
    """Escape *value* for an HTML text node or a quoted attribute."""
    return html.escape("" if value is None else str(value), quote=True)


def css_value(value: object) -> str:
    """Strip characters that could break out of a CSS property value."""
    return _CSS_UNSAFE.sub("", "" if value is None else str(value)).strip()


def css_url(value: object) -> str:
    """Percent-encode *value* for use inside ``url('...')``."""
    return quote("" if value is None else str(value).strip(), safe=_URL_SAFE_CHARS)


def is_css_gradient(value: str) -> bool:
    """Return True if *value* is a CSS gradient expression rather than a URL."""
    return value.strip().lower().startswith(GRADIENT_FUNCTIONS)


def css_background_image(value: str) -> str:
    """Return a ``background-image`` value for a URL or gradient expression."""
    if is_css_gradient(value):
        return css_value(value)
    return f"url('{css_url(value)}')"
