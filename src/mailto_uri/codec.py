"""Percent-encoding helpers for mailto URI components.

Decoding is deliberately permissive: URIs usually come from untrusted links,
so malformed escapes are passed through rather than rejected.
"""

from __future__ import annotations

import string
from urllib.parse import quote, unquote

# RFC 3986 unreserved characters besides ASCII letters and digits.
_UNRESERVED_MARKS = "-_.~"

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def percent_decode(text: str) -> str:
    """Decode one level of ``%XX`` escapes.

    Valid triplets are decoded as UTF-8 bytes. Malformed escapes such as
    ``%2`` or ``%zz`` are kept verbatim, and byte sequences that are not valid
    UTF-8 decode to U+FFFD. A ``+`` is left alone, it is not a space here.

    Examples:
        >>> percent_decode("send%20index")
        'send index'
        >>> percent_decode("%2525")
        '%25'
        >>> percent_decode("100%")
        '100%'
    """
    return unquote(text, encoding="utf-8", errors="replace")


def percent_encode(text: str) -> str:
    """Encode everything outside the unreserved set.

    Lone surrogates, which decoding can let through, are written as their
    UTF-8 byte pattern instead of failing.

    Examples:
        >>> percent_encode("a@b.com")
        'a%40b.com'
        >>> percent_encode(", joe")
        '%2C%20joe'
    """
    return quote(text, safe=_UNRESERVED_MARKS, encoding="utf-8", errors="surrogatepass")


def ascii_lower(text: str) -> str:
    """Lower-case ``A``-``Z`` only, leaving every other character untouched."""
    return text.translate(_ASCII_LOWER)
