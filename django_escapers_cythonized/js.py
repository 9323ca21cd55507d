"""
JavaScript string literal escaping.

    <script>var current = '{{ value|escapejsstr }}';</script>
    <script>someFunction("{{ value|escapejsstr }}");</script>

The only safe place for untrusted data in a script is inside a quoted data
value. Escaping does not help with code that evaluates strings, such as
setInterval('...') or eval(), nor with unquoted event handler bodies.
"""

import cython

from django.utils.safestring import SafeString

from .encoding import to_text, utf16_code_units

__all__ = ["escape_js"]

_js_whitelist = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789,._"
)


@cython.cfunc
def _js_escape_char(c):
    cp: cython.long = ord(c)
    if cp < 0x80:
        return "\\x%02X" % cp
    return "".join(["\\u%04X" % unit for unit in utf16_code_units(cp)])


@cython.ccall
def escape_js(text):
    """
    Return text escaped for a quoted JavaScript string literal.

    ASCII letters, digits and ",._" pass through. Other ASCII characters
    become \\xHH, everything else \\uHHHH per UTF-16 code unit, so astral
    characters come out as a surrogate pair.
    """
    s = to_text(text)
    parts = []
    for c in s:
        if c in _js_whitelist:
            parts.append(c)
        else:
            parts.append(_js_escape_char(c))
    return SafeString("".join(parts))
