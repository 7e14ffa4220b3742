"""Parsing and serialization of ``mailto:`` URIs (RFC 6068).

A parsed URI is a flat mapping of lower-cased header names to decoded values.
The address part of the URI ends up in the ``to`` header, merged with any
explicit ``to=`` query parameter.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Optional

from mailto_uri.codec import ascii_lower, percent_decode, percent_encode
from mailto_uri.exceptions import ParseError

if TYPE_CHECKING:
    from mailto_uri.models import ComposeDraft

MAILTO_SCHEME = "mailto:"

# Well known headers
TO = "to"
CC = "cc"
BCC = "bcc"
SUBJECT = "subject"
BODY = "body"

WELL_KNOWN_HEADERS = (TO, CC, BCC, SUBJECT, BODY)


def is_mailto(candidate: Any) -> bool:
    """Test whether ``candidate`` is a mailto URI.

    Args:
        candidate: Value to test. ``None`` and non-strings are accepted.

    Returns:
        True if ``candidate`` is a string starting with ``mailto:``.
    """
    return isinstance(candidate, str) and candidate.startswith(MAILTO_SCHEME)


class MailtoUri:
    """A parsed mailto URI.

    Instances are created by :meth:`parse`. All headers, including the well
    known ones, live in a single mapping keyed by lower-cased header name.
    """

    __slots__ = ("_headers",)

    def __init__(self, headers: Optional[Mapping[str, Optional[str]]] = None) -> None:
        self._headers: dict[str, Optional[str]] = dict(headers or {})

    @classmethod
    def parse(cls, uri: str) -> MailtoUri:
        """Parse and decode a mailto URI.

        Args:
            uri: String containing a mailto URI.

        Returns:
            MailtoUri: The parsed headers.

        Raises:
            TypeError: If ``uri`` is None.
            ParseError: If ``uri`` does not use the mailto scheme.
        """
        if uri is None:
            raise TypeError("uri must not be None")

        if not is_mailto(uri):
            raise ParseError("Not a mailto scheme")

        # Drop fragment if present
        uri, _, _ = uri.partition("#")

        rest = uri[len(MAILTO_SCHEME):]
        raw_address, question_mark, query = rest.partition("?")
        address = percent_decode(raw_address)

        mailto = cls()
        if question_mark:
            for parameter in query.split("&"):
                if not parameter:
                    continue

                name, equals_sign, value = parameter.partition("=")
                # Lower-case names so the well known headers are easy to find
                key = ascii_lower(percent_decode(name))
                mailto._headers[key] = percent_decode(value) if equals_sign else None

        # The address may be given both before the query and as a 'to' header.
        to_parameter = mailto.to
        if to_parameter is not None:
            address = f"{address}, {to_parameter}"
        mailto._headers[TO] = address

        return mailto

    @property
    def to(self) -> Optional[str]:
        """Comma-space delimited To addresses, or None."""
        return self._headers.get(TO)

    @property
    def cc(self) -> Optional[str]:
        """Comma-space delimited CC addresses, or None."""
        return self._headers.get(CC)

    @property
    def bcc(self) -> Optional[str]:
        """Comma-space delimited BCC addresses, or None."""
        return self._headers.get(BCC)

    @property
    def subject(self) -> Optional[str]:
        """Subject line, or None."""
        return self._headers.get(SUBJECT)

    @property
    def body(self) -> Optional[str]:
        """Message body, or None."""
        return self._headers.get(BODY)

    @property
    def headers(self) -> Mapping[str, Optional[str]]:
        """Read-only view of every parsed header."""
        return MappingProxyType(self._headers)

    def serialize(self) -> str:
        """Build a canonical mailto URI from the headers.

        Every header becomes a query parameter followed by ``&``, including
        the last one. A header without a value is written without ``=``.
        """
        parts = [MAILTO_SCHEME, "?"]
        for name, value in self._headers.items():
            parts.append(percent_encode(name))
            if value is not None:
                parts.append("=")
                parts.append(percent_encode(value))
            parts.append("&")
        return "".join(parts)

    def to_compose_draft(self) -> ComposeDraft:
        """Shortcut for :func:`mailto_uri.compose.mailto_to_compose_draft`."""
        from mailto_uri.compose import mailto_to_compose_draft

        return mailto_to_compose_draft(self)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"MailtoUri(headers={self._headers!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MailtoUri):
            return NotImplemented
        return self._headers == other._headers

    __hash__ = None  # type: ignore[assignment]


def parse(uri: str) -> MailtoUri:
    """Parse a mailto URI. See :meth:`MailtoUri.parse`."""
    return MailtoUri.parse(uri)
