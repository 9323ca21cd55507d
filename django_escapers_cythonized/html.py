"""
HTML body text and attribute value escaping.

escape_text() is the classic entity escape (plus "/"), with a C-level scan
that skips html.escape() when no special character is present.
escape_attr() is the aggressive attribute escape: everything outside
[A-Za-z0-9,._-] becomes a character reference, so the value cannot break
out of the attribute even if the template leaves it unquoted.
"""

import cython
import html as _html

from django.utils.safestring import SafeString

from .encoding import to_text, utf16_code_units

__all__ = ["SAFE_ATTRIBUTES", "escape_attr", "escape_text", "is_safe_attribute"]

# Restricted to the entities XML knows about, so the output also survives
# HTML5's XML serialisation ("undefined entity" otherwise).
_attr_entities = {
    0x22: "&quot;",
    0x26: "&amp;",
    0x3C: "&lt;",
    0x3E: "&gt;",
}

_attr_whitelist = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789,.-_"
)

# Attributes whose value cannot change document structure or run script.
# escape_attr() output is only safe inside one of these.
SAFE_ATTRIBUTES = frozenset([
    "align", "alink", "alt", "bgcolor", "border", "cellpadding",
    "cellspacing", "class", "color", "cols", "colspan", "coords", "dir",
    "face", "height", "hspace", "ismap", "lang", "marginheight",
    "marginwidth", "multiple", "nohref", "noresize", "noshade", "nowrap",
    "ref", "rel", "rev", "rows", "rowspan", "scrolling", "shape", "span",
    "summary", "tabindex", "title", "usemap", "valign", "value", "vlink",
    "vspace", "width",
])


@cython.cfunc
def _needs_text_escape(s: str) -> cython.bint:
    c: cython.Py_UCS4
    for c in s:
        if c in '&<>"\'/':
            return True
    return False


@cython.ccall
def escape_text(text):
    """
    Return the given text with ampersands, quotes, angle brackets and
    forward slashes encoded for use in HTML element content.

    Always escapes, even if the input is already marked safe, so
    escape_text("&amp;") == "&amp;amp;".
    """
    s = to_text(text)
    if not _needs_text_escape(s):
        return SafeString(s)
    # "/" helps end an HTML element.
    escaped = _html.escape(s).replace("&#x27;", "&#039;").replace("/", "&#x2F;")
    return SafeString(escaped)


@cython.cfunc
def _attr_escape_char(c):
    cp: cython.long = ord(c)
    # Characters undefined in HTML become the replacement character.
    if (cp <= 0x1F and cp not in (0x09, 0x0A, 0x0D)) or 0x7F <= cp <= 0x9F:
        return "&#xFFFD;"
    entity = _attr_entities.get(cp)
    if entity is not None:
        return entity
    if cp < 0x80:
        return "&#x%02X;" % cp
    return "".join(["&#x%04X;" % unit for unit in utf16_code_units(cp)])


@cython.ccall
def escape_attr(text):
    """
    Return text escaped for a quoted HTML attribute value.

    ASCII letters, digits and ",.-_" pass through; everything else becomes
    a named entity (&quot; &amp; &lt; &gt;) or a hex character reference,
    one &#xHHHH; per UTF-16 code unit for non-ASCII characters.

    Only safe for attributes in SAFE_ATTRIBUTES, which this function does
    not check. An href or src value such as "javascript:alert(1)" stays
    executable no matter how it is escaped.
    """
    s = to_text(text)
    parts = []
    for c in s:
        if c in _attr_whitelist:
            parts.append(c)
        else:
            parts.append(_attr_escape_char(c))
    return SafeString("".join(parts))


def is_safe_attribute(name):
    """Return True if escape_attr() output may be placed in attribute name."""
    return str(name).strip().lower() in SAFE_ATTRIBUTES
