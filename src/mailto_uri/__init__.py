"""mailto-uri - parse and serialize mailto URIs.

This package turns ``mailto:`` links into structured headers following
RFC 6068, and writes them back out as canonical URIs.
"""

__version__ = "0.1.0"

from mailto_uri.compose import mailto_to_compose_draft
from mailto_uri.config import Settings, get_settings
from mailto_uri.exceptions import MailtoError, ParseError
from mailto_uri.log import configure_logging
from mailto_uri.models import ComposeDraft
from mailto_uri.uri import MAILTO_SCHEME, MailtoUri, is_mailto, parse

__all__ = [
    "MAILTO_SCHEME",
    "ComposeDraft",
    "MailtoError",
    "MailtoUri",
    "ParseError",
    "Settings",
    "configure_logging",
    "get_settings",
    "is_mailto",
    "mailto_to_compose_draft",
    "parse",
    "__version__",
]
