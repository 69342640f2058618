"""Shared test fixtures."""

import pytest
from nacl.signing import SigningKey

from chalbot import create_app

TEST_APPLICATION_ID = "123456789012345678"
TEST_TOKEN = "test-bot-token"
TEST_API_BASE = "https://discord.test/api/v10"


@pytest.fixture(scope="session")
def signing_key() -> SigningKey:
    """A throwaway Ed25519 key standing in for Discord's."""
    return SigningKey.generate()


@pytest.fixture
def app(signing_key: SigningKey):
    return create_app({
        "TESTING": True,
        "DISCORD_APPLICATION_ID": TEST_APPLICATION_ID,
        "DISCORD_TOKEN": TEST_TOKEN,
        "DISCORD_PUBLIC_KEY": signing_key.verify_key.encode().hex(),
        "DISCORD_API_BASE": TEST_API_BASE,
    })


@pytest.fixture
def client(app):
    return app.test_client()
