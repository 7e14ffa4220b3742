"""Data models for mailto-uri.

This module contains Pydantic models handed to code that builds a message
from a parsed mailto URI.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ComposeDraft(BaseModel):
    """Fields needed to pre-fill a compose window."""

    to_addrs: list[str] = Field(default_factory=list, description="To addresses")
    cc_addrs: list[str] = Field(default_factory=list, description="Cc addresses")
    bcc_addrs: list[str] = Field(default_factory=list, description="Bcc addresses")
    subject: str = Field(default="", description="Subject line")
    body: str = Field(default="", description="Message body")
    extra_headers: dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Headers other than to, cc, bcc, subject and body",
    )

    @property
    def has_recipients(self) -> bool:
        """Whether any To, Cc or Bcc address is set."""
        return bool(self.to_addrs or self.cc_addrs or self.bcc_addrs)
