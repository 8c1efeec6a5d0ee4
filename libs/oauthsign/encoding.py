"""
Percent-encoding primitives for OAuth 1.0 (RFC 5849 §3.6).

Strings may carry raw bytes which are not valid UTF-8 as surrogate
escapes (`\\udcXX`), the way Python hands over such command line
arguments. Both directions keep them as the original byte.
"""

from urllib.parse import quote, unquote_plus

# RFC 3986 unreserved characters, which are never escaped.
UNRESERVED = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789-._~")

BYTE_ERRORS = "surrogateescape"


def percent_encode(value: str) -> str:
    """RFC 3986 percent encoding for OAuth 1.0."""
    return quote(str(value), safe='', errors=BYTE_ERRORS)


def url_decode(value: str) -> str:
    """Form-style decoding used for query strings (`%XX` and `+` -> space).
    An escape that is not part of a UTF-8 sequence decodes to its byte."""
    return unquote_plus(value, errors=BYTE_ERRORS)
