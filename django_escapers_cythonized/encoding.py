"""
Input normalization shared by the context escapers.

Every escaper runs its argument through to_text() first, so the malformed
input policy is the same everywhere: undecodable bytes and lone surrogates
become U+FFFD before any character is classified.
"""

import cython
import re

from django.utils.encoding import force_str

__all__ = ["REPLACEMENT_CHARACTER", "to_text", "utf16_code_units"]

REPLACEMENT_CHARACTER = "\ufffd"

# A Python str can carry surrogate code points that are not valid Unicode
# scalar values (e.g. from "surrogateescape" decoding or "\ud800" literals).
_surrogate_re = re.compile("[%s-%s]" % (chr(0xD800), chr(0xDFFF)))


@cython.ccall
def to_text(value):
    """
    Return value as a str of Unicode scalar values.

    Bytes are decoded as UTF-8 with invalid and overlong sequences replaced,
    other objects go through force_str(), and surrogate code points are
    replaced with U+FFFD. str subclasses such as SafeString come back as
    plain str.
    """
    if isinstance(value, str):
        text = value
    else:
        text = force_str(value, errors="replace")
    if type(text) is not str:
        text = str.__str__(text)
    if _surrogate_re.search(text) is None:
        return text
    return _surrogate_re.sub(REPLACEMENT_CHARACTER, text)


@cython.ccall
def utf16_code_units(cp: cython.long):
    """Return the UTF-16 code unit(s) of code point cp, high surrogate first."""
    if cp < 0x10000:
        return (cp,)
    cp -= 0x10000
    return (0xD800 | (cp >> 10), 0xDC00 | (cp & 0x3FF))
