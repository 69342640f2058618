"""Request builders shared by the webhook tests."""

import json
import time

from nacl.signing import SigningKey


def sign(signing_key: SigningKey, body: bytes, timestamp: str | None = None) -> dict:
    """Build the signature headers Discord would send for ``body``."""
    timestamp = timestamp or str(int(time.time()))
    signature = signing_key.sign(timestamp.encode() + body).signature.hex()
    return {
        "X-Signature-Ed25519": signature,
        "X-Signature-Timestamp": timestamp,
        "Content-Type": "application/json",
    }


def post_signed(client, signing_key: SigningKey, payload: dict):
    """Send a correctly signed interaction to the webhook."""
    body = json.dumps(payload).encode()
    return client.post("/", data=body, headers=sign(signing_key, body))


def command_interaction(name: str, options: list | None = None, **overrides) -> dict:
    """An APPLICATION_COMMAND interaction invoked from a channel in a category."""
    interaction = {
        "type": 2,
        "guild_id": "111",
        "channel_id": "222",
        "channel": {"id": "222", "parent_id": "333"},
        "data": {"name": name, "options": options or []},
    }
    interaction.update(overrides)
    return interaction


def string_option(name: str, value: str) -> dict:
    return {"name": name, "type": 3, "value": value}
