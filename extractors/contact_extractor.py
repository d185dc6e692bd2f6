"""
Contact Extractor - pulls contact signals out of a fetched webpage.
Finds emails, international phone numbers, Twitter/X and LinkedIn profiles,
and infers the owning organization and domain.
"""

from typing import List, Optional, Tuple

from extractors.signals import ContactSignals
from utils.logger import LoggerMixin
from utils.patterns import DocumentPatterns, EmailPatterns, PhonePatterns, SocialPatterns
from utils.text_processing import TextProcessor, unique_in_order
from utils.validators import derive_domain


class ContactExtractor(LoggerMixin):
    """Stateless extractor. One instance can be shared between threads."""

    def __init__(self):
        self.email_patterns = EmailPatterns()
        self.phone_patterns = PhonePatterns()
        self.social_patterns = SocialPatterns()
        self.document_patterns = DocumentPatterns()
        self.text_processor = TextProcessor()

    def extract(self, content: Optional[str], source_url: str) -> ContactSignals:
        """Extract contact signals from raw markup.

        Raises InvalidSourceUrlError if source_url is not an absolute URL.
        """
        domain = derive_domain(source_url)
        cleaned = self.text_processor.sanitize_markup(content or "")

        emails = self._extract_emails(cleaned)
        phones = self._extract_phones(cleaned)
        twitter_links = self._extract_social(cleaned, 'twitter')
        linkedin_links = self._extract_social(cleaned, 'linkedin')
        organization = self._extract_organization(cleaned, domain)

        self.logger.debug(
            f"Extracted {len(emails)} emails, {len(phones)} phones, "
            f"{len(twitter_links)} twitter and {len(linkedin_links)} linkedin links from {source_url}"
        )

        return ContactSignals(
            emails=emails,
            phones=phones,
            twitter_links=twitter_links,
            linkedin_links=linkedin_links,
            organization=organization,
            domain=domain,
        )

    def _extract_emails(self, cleaned: str) -> Tuple[str, ...]:
        """Match addresses inside @-bearing character runs only.

        Characters outside a run are never word characters, so matching a run on
        its own gives the same results as matching the whole text.
        """
        emails: List[str] = []
        for run in self.email_patterns.candidate_run.findall(cleaned):
            if '@' in run:
                emails.extend(self.email_patterns.standard.findall(run))
        return unique_in_order(emails)

    def _extract_phones(self, cleaned: str) -> Tuple[str, ...]:
        """tel: link targets first, then numbers written in the page text."""
        link_phones = [
            match.strip() for match in self.phone_patterns.tel_link.findall(cleaned)
        ]

        text_phones: List[str] = []
        for text in self.text_processor.visible_text_nodes(cleaned):
            for match in self.phone_patterns.international.findall(text):
                text_phones.append(self.text_processor.normalize_whitespace(match))

        return unique_in_order(phone for phone in link_phones + text_phones if phone)

    def _extract_social(self, cleaned: str, platform: str) -> Tuple[str, ...]:
        return unique_in_order(self.social_patterns.patterns[platform].findall(cleaned))

    def _extract_organization(self, cleaned: str, domain: str) -> str:
        """Page title if present, otherwise the first label of the domain."""
        match = self.document_patterns.title.search(cleaned)
        if match:
            title = match.group(1).strip()
            if title:
                return title

        return domain.split('.')[0] or domain


_default_extractor = ContactExtractor()


def extract(content: Optional[str], source_url: str) -> ContactSignals:
    """Extract contact signals from markup fetched from source_url."""
    return _default_extractor.extract(content, source_url)
