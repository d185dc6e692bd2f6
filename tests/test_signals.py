import pytest
from pydantic import ValidationError

from extractors.signals import Contact, ContactSignals


@pytest.fixture
def signals():
    return ContactSignals(
        emails=("info@acme.com", "sales@acme.com"),
        phones=("+15551234567",),
        twitter_links=("https://twitter.com/acme", "https://x.com/acme_support"),
        linkedin_links=("https://www.linkedin.com/company/acme",),
        organization="Acme",
        domain="acme.com",
    )


def test_payload_uses_external_field_names(signals):
    payload = signals.to_payload()

    assert list(payload) == ["emails", "phones", "twitter", "linkedIn", "organization", "domain"]
    assert payload == {
        "emails": ["info@acme.com", "sales@acme.com"],
        "phones": ["+15551234567"],
        "twitter": ["https://twitter.com/acme", "https://x.com/acme_support"],
        "linkedIn": ["https://www.linkedin.com/company/acme"],
        "organization": "Acme",
        "domain": "acme.com",
    }


def test_payload_round_trips_through_model_validate(signals):
    assert ContactSignals.model_validate(signals.to_payload()) == signals


def test_signals_are_immutable(signals):
    with pytest.raises(ValidationError):
        signals.emails = ("other@acme.com",)


def test_organization_and_domain_must_be_non_empty():
    with pytest.raises(ValidationError):
        ContactSignals(organization="", domain="acme.com")
    with pytest.raises(ValidationError):
        ContactSignals(organization="Acme", domain="")


def test_has_contact_details(signals):
    assert signals.has_contact_details
    assert not ContactSignals(
        twitter_links=("https://twitter.com/acme",), organization="Acme", domain="acme.com"
    ).has_contact_details


def test_to_contact_uses_first_social_links(signals):
    contact = signals.to_contact("42")

    assert isinstance(contact, Contact)
    assert contact.to_payload() == {
        "id": "42",
        "name": "Acme",
        "organization": "Acme",
        "domain": "acme.com",
        "emails": ["info@acme.com", "sales@acme.com"],
        "phones": ["+15551234567"],
        "twitter": "https://twitter.com/acme",
        "linkedIn": "https://www.linkedin.com/company/acme",
    }


def test_to_contact_omits_missing_social_links():
    contact = ContactSignals(emails=("a@b.io",), organization="B", domain="b.io").to_contact()

    payload = contact.to_payload()
    assert "twitter" not in payload
    assert "linkedIn" not in payload
    assert payload["id"] == ""
