"""Helpers for turning parsed mailto URIs into compose drafts."""

from __future__ import annotations

from email.utils import getaddresses

from mailto_uri.models import ComposeDraft
from mailto_uri.uri import WELL_KNOWN_HEADERS, MailtoUri


def _parse_address_list(value: str | None) -> list[str]:
    if not value:
        return []
    # getaddresses returns list[(name, addr)]; the merge rule can leave an
    # empty entry in front of the first address.
    return [addr for _, addr in getaddresses([value]) if addr]


def mailto_to_compose_draft(uri: MailtoUri) -> ComposeDraft:
    """Convert a parsed mailto URI to a ComposeDraft.

    Args:
        uri: Parsed mailto URI.

    Returns:
        ComposeDraft: Recipients split into lists, remaining headers kept as-is.
    """
    headers = uri.headers

    return ComposeDraft(
        to_addrs=_parse_address_list(uri.to),
        cc_addrs=_parse_address_list(uri.cc),
        bcc_addrs=_parse_address_list(uri.bcc),
        subject=uri.subject or "",
        body=uri.body or "",
        extra_headers={
            name: value for name, value in headers.items() if name not in WELL_KNOWN_HEADERS
        },
    )
