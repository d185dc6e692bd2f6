import pytest
from pydantic import ValidationError

from utils.config import Config, DEFAULT_USER_AGENT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "CONTACT_EXTRACTOR_USER_AGENT",
        "CONTACT_EXTRACTOR_REQUEST_TIMEOUT",
        "CONTACT_EXTRACTOR_FOLLOW_REDIRECTS",
        "CONTACT_EXTRACTOR_CONCURRENT_REQUESTS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = Config.from_env()

    assert config.user_agent == DEFAULT_USER_AGENT
    assert config.request_timeout == 30.0
    assert config.follow_redirects is True
    assert config.concurrent_requests == 3


def test_environment_values(monkeypatch):
    monkeypatch.setenv("CONTACT_EXTRACTOR_USER_AGENT", "ContactBot/2.0")
    monkeypatch.setenv("CONTACT_EXTRACTOR_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("CONTACT_EXTRACTOR_FOLLOW_REDIRECTS", "False")
    monkeypatch.setenv("CONTACT_EXTRACTOR_CONCURRENT_REQUESTS", "7")

    config = Config.from_env()

    assert config.user_agent == "ContactBot/2.0"
    assert config.request_timeout == 5.0
    assert config.follow_redirects is False
    assert config.concurrent_requests == 7


def test_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("CONTACT_EXTRACTOR_REQUEST_TIMEOUT", "5")

    config = Config.from_env(request_timeout=12.5, user_agent=None)

    assert config.request_timeout == 12.5
    assert config.user_agent == DEFAULT_USER_AGENT


@pytest.mark.parametrize("field, value", [
    ("request_timeout", 0.1),
    ("request_timeout", 500),
    ("concurrent_requests", 0),
    ("concurrent_requests", 50),
    ("user_agent", ""),
])
def test_out_of_range_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        Config(**{field: value})
