"""
Result records produced by the contact extractor.
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Contact(BaseModel):
    """A reviewable contact row built from one page's signals."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    name: str
    organization: str
    domain: str
    emails: Tuple[str, ...] = ()
    phones: Tuple[str, ...] = ()
    twitter: Optional[str] = None
    linkedin: Optional[str] = Field(default=None, alias="linkedIn")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ContactSignals(BaseModel):
    """Contact signals extracted from a single document.

    Every collection is de-duplicated by exact string and keeps the order in
    which its members first appeared in the document.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    emails: Tuple[str, ...] = ()
    phones: Tuple[str, ...] = ()
    twitter_links: Tuple[str, ...] = Field(default=(), alias="twitter")
    linkedin_links: Tuple[str, ...] = Field(default=(), alias="linkedIn")
    organization: str = Field(min_length=1)
    domain: str = Field(min_length=1)

    @property
    def has_contact_details(self) -> bool:
        """True when the page yielded at least one email or phone number."""
        return bool(self.emails or self.phones)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the external output contract.

        Keys: emails, phones, twitter, linkedIn, organization, domain.
        """
        return self.model_dump(mode="json", by_alias=True)

    def to_contact(self, contact_id: str = "") -> Contact:
        """Build a contact row; the first social link of each kind becomes its handle."""
        return Contact(
            id=contact_id,
            name=self.organization,
            organization=self.organization,
            domain=self.domain,
            emails=self.emails,
            phones=self.phones,
            twitter=self.twitter_links[0] if self.twitter_links else None,
            linkedin=self.linkedin_links[0] if self.linkedin_links else None,
        )
