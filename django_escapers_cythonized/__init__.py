"""Context-aware output escaping for Django templates."""

from .css import escape_css
from .html import SAFE_ATTRIBUTES, escape_attr, escape_text, is_safe_attribute
from .js import escape_js
from .urls import escape_param

__all__ = [
    "SAFE_ATTRIBUTES",
    "escape_attr",
    "escape_css",
    "escape_js",
    "escape_param",
    "escape_text",
    "is_safe_attribute",
]
