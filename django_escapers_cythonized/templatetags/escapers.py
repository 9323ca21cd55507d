"""
Template filters for the context escapers.

    {% load escapers %}
    <p>{{ comment|escapetext }}</p>
    <div title="{{ title|escapeattr }}"></div>
    <style>p { font-family: "{{ font|escapecss }}"; }</style>
    <script>var name = '{{ name|escapejsstr }}';</script>
    <a href="/search?q={{ query|escapeparam }}">search</a>

Each filter escapes unconditionally, even values already marked safe, and
returns a SafeString so autoescaping leaves the result alone.
"""

from django import template

from ..css import escape_css
from ..html import escape_attr, escape_text
from ..js import escape_js
from ..urls import escape_param

register = template.Library()


@register.filter
def escapetext(value):
    """Escape value for HTML element content."""
    return escape_text(value)


@register.filter
def escapeattr(value):
    """Escape value for a quoted attribute listed in SAFE_ATTRIBUTES."""
    return escape_attr(value)


@register.filter
def escapecss(value):
    """Escape value for a quoted CSS property value."""
    return escape_css(value)


# Django already ships an "escapejs" filter with different rules.
@register.filter
def escapejsstr(value):
    """Escape value for a quoted JavaScript string literal."""
    return escape_js(value)


@register.filter
def escapeparam(value):
    """Escape value for a URL query parameter value."""
    return escape_param(value)
