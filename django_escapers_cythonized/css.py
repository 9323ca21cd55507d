"""
CSS property value escaping.

    <style>selector { property: "{{ value|escapecss }}"; }</style>
    <span style="property: '{{ value|escapecss }}'">text</span>

Only for quoted, simple property values. Never for url(), behavior,
-moz-binding or expression(), which stay dangerous even when escaped.
"""

import cython

from django.utils.safestring import SafeString

from .encoding import to_text, utf16_code_units

__all__ = ["escape_css"]

_css_whitelist = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
)


@cython.cfunc
def _css_escape_char(c):
    cp: cython.long = ord(c)
    # CSS hex escapes are variable length, so each one is terminated with a
    # space; otherwise "\3B" followed by "a" would read as U+3BA.
    if cp < 0x80:
        return "\\%X " % cp
    # Astral characters come out as two surrogate escapes. CSS parsers map an
    # escaped surrogate to U+FFFD, so such characters render as two
    # replacement characters in a browser.
    return "".join(["\\%X " % unit for unit in utf16_code_units(cp)])


@cython.ccall
def escape_css(text):
    """
    Return text escaped for a quoted CSS property value.

    Every character outside [A-Za-z0-9] becomes a backslash, the uppercase
    hex value without leading zeros and a space: ";" -> "\\3B ",
    NUL -> "\\0 ", "П" -> "\\41F ".
    """
    s = to_text(text)
    parts = []
    for c in s:
        if c in _css_whitelist:
            parts.append(c)
        else:
            parts.append(_css_escape_char(c))
    return SafeString("".join(parts))
