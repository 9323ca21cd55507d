"""
URL query parameter escaping.

    <a href="/search?value={{ value|escapeparam }}">click me</a>

Form-urlencoding (application/x-www-form-urlencoded) of the UTF-8 bytes (or of
the given bytes), matching PHP's urlencode(): unlike
urllib.parse.quote_plus(), "~" is encoded too. Never use it on a whole URL
or a path: it would encode the ":", "/" and "?" delimiters. Untrusted URLs
placed into href or src must be validated for their scheme and then
attribute-escaped instead.
"""

import cython

from django.utils.safestring import SafeString

from .encoding import to_text

__all__ = ["escape_param"]

_param_unreserved = frozenset(
    b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_."
)

# byte value -> encoded form
_param_table = tuple(
    chr(b) if b in _param_unreserved else "+" if b == 0x20 else "%%%02X" % b
    for b in range(256)
)


@cython.ccall
def escape_param(value):
    """
    Return value percent-encoded for use as a query string parameter value.

    urllib.parse.unquote_plus() of the result gives back the input. Bytes
    are encoded as they are, so unquote_to_bytes() recovers them exactly
    even when they are not valid UTF-8.
    """
    if isinstance(value, bytes):
        data = value
    else:
        data = to_text(value).encode("utf-8")
    return SafeString("".join([_param_table[b] for b in data]))
