import json
import logging

from chalbot.commands import (
    ADD_CHAL_COMMAND,
    NEW_VOICE_CHANNEL_COMMAND,
    RENAME_CHAL_COMMAND,
    SOLVED_COMMAND,
    UNSOLVED_COMMAND,
    get_string_option,
)
from chalbot.discord_api import TEXT_CHANNEL, VOICE_CHANNEL, DiscordAPIError
from chalbot.naming import (
    MAX_CHANNEL_NAME_LENGTH,
    SOLVED_MARKER,
    UNSOLVED_MARKER,
    apply_marker,
    normalize_name,
    strip_marker,
)

PING = 1
APPLICATION_COMMAND = 2

PONG = 1
CHANNEL_MESSAGE_WITH_SOURCE = 4

EPHEMERAL = 64

FETCH_FAILED = "❌ Could not fetch the current channel."
TEXT_ONLY = "ℹ️ This command can only be used in a text channel."
PERMISSION_HINT = (
    "❌ Failed to {action} the channel. Check that the bot has the "
    "`Manage Channels` permission or try again later."
)


def message(content, ephemeral=False):
    """Builds a CHANNEL_MESSAGE_WITH_SOURCE response."""
    data = {"content": content}
    if ephemeral:
        data["flags"] = EPHEMERAL
    return {"type": CHANNEL_MESSAGE_WITH_SOURCE, "data": data}


def unknown_type():
    return {"error": "Unknown Type"}, 400


def handle_ping():
    """
    Responds to Discord's PING request.
    """
    return {"type": PONG}


def _create_channel(interaction, client, name, kind, announcement):
    try:
        channel = client.create_channel(
            interaction["guild_id"],
            name,
            kind,
            (interaction.get("channel") or {}).get("parent_id"),
        )
    except DiscordAPIError as e:
        logging.error(f"Create channel failed in guild {interaction['guild_id']}: {e.status} {e.body}")
        return message(f"create channel error ({e.status}): {json.dumps(e.body)}", ephemeral=True)
    except Exception as e:
        logging.error(f"Error calling Discord API: {e}")
        return message("create channel internal error", ephemeral=True)

    if not channel.get("id"):
        logging.error(f"Created channel response has no id: {channel}")
        return message("create channel internal error", ephemeral=True)
    return message(f"{announcement} \n<#{channel['id']}>")


def handle_add_challenge(interaction, client):
    """
    Handles /addchal: creates a pending text channel in the current category.
    """
    name = normalize_name(get_string_option(interaction["data"], "name"))
    if not name:
        logging.warning(f"addchal without a name in channel {interaction.get('channel_id')}")
        return message("Error: name is required when performing addchal", ephemeral=True)

    return _create_channel(
        interaction, client, apply_marker(UNSOLVED_MARKER, name), TEXT_CHANNEL, "✅ New Challenge Found!!!"
    )


def handle_add_voice_channel(interaction, client):
    name = normalize_name(get_string_option(interaction["data"], "name"))
    if not name:
        logging.warning(f"newvoicechannel without a name in channel {interaction.get('channel_id')}")
        return message("Error: name is required when performing newvoicechannel", ephemeral=True)

    return _create_channel(interaction, client, name, VOICE_CHANNEL, "✅ New Voice Channel Found!!!")


def _fetch_text_channel(interaction, client):
    """
    Fetches the invoking channel.

    Returns:
        tuple: (channel, None) on success, or (None, error reply).
    """
    channel = client.fetch_channel(interaction["channel_id"])
    if not channel:
        return None, message(FETCH_FAILED, ephemeral=True)
    if channel.get("type") != TEXT_CHANNEL:
        logging.info(f"Channel {interaction['channel_id']} is not a text channel (type {channel.get('type')})")
        return None, message(TEXT_ONLY, ephemeral=True)
    return channel, None


def _set_marker(interaction, client, marker, label):
    channel, error = _fetch_text_channel(interaction, client)
    if error:
        return error

    current_name = channel.get("name") or "channel"
    if current_name.startswith(marker):
        logging.info(f"Channel {interaction['channel_id']} is already marked as {label}")
        return message(f"ℹ️ This channel is already marked as {label}.", ephemeral=True)

    _, base = strip_marker(current_name)
    if client.rename_channel(interaction["channel_id"], apply_marker(marker, base)):
        return message(f"✅ Marked this channel as {label}.")
    return message(PERMISSION_HINT.format(action="update"), ephemeral=True)


def handle_solved(interaction, client):
    return _set_marker(interaction, client, SOLVED_MARKER, "solved")


def handle_unsolved(interaction, client):
    return _set_marker(interaction, client, UNSOLVED_MARKER, "pending")


def handle_rename_challenge(interaction, client):
    """
    Handles /renamechal: renames the channel, keeping its status marker.
    """
    desired = normalize_name(get_string_option(interaction["data"], "newname"))
    if not desired:
        logging.error(f"Missing or empty \"newname\" option for renamechal command in channel {interaction.get('channel_id')}")
        return message("❌ Please provide a valid new channel name.", ephemeral=True)

    channel, error = _fetch_text_channel(interaction, client)
    if error:
        return error

    current_name = channel.get("name") or "channel"
    marker, _ = strip_marker(current_name)
    final_name = apply_marker(marker, desired)
    note = " (marker kept)" if marker else ""

    if final_name == current_name:
        logging.info(f"Channel {interaction['channel_id']} is already named {final_name}")
        return message(f"ℹ️ The channel is already named `{desired}`{note}.", ephemeral=True)

    if len(final_name) > MAX_CHANNEL_NAME_LENGTH:
        logging.warning(f"New name for channel {interaction['channel_id']} is too long ({len(final_name)} characters)")
        return message(
            f"❌ Sorry, the new channel name (including the marker \"{marker or ''}\") is too long "
            f"({len(final_name)}/{MAX_CHANNEL_NAME_LENGTH} characters). Please shorten it.",
            ephemeral=True,
        )

    if client.rename_channel(interaction["channel_id"], final_name):
        return message(f"✅ Channel <#{interaction['channel_id']}> renamed to `{desired}`{note}.")
    return message(PERMISSION_HINT.format(action="rename"), ephemeral=True)


COMMAND_HANDLERS = {
    ADD_CHAL_COMMAND["name"]: handle_add_challenge,
    SOLVED_COMMAND["name"]: handle_solved,
    UNSOLVED_COMMAND["name"]: handle_unsolved,
    RENAME_CHAL_COMMAND["name"]: handle_rename_challenge,
    NEW_VOICE_CHANNEL_COMMAND["name"]: handle_add_voice_channel,
}


def handle_interaction(interaction, client):
    """
    Dispatches a verified interaction.

    Args:
        interaction (dict): The parsed interaction payload.
        client (DiscordClient): Used for any channel lookups or changes.

    Returns:
        tuple: (response body, HTTP status).
    """
    if interaction.get("type") == PING:
        logging.info("Responding to PING.")
        return handle_ping(), 200

    if not interaction.get("guild_id"):
        logging.warning(f"Interaction without a guild in channel {interaction.get('channel_id')}")
        return message("Command not available here.", ephemeral=True), 200

    if interaction.get("type") != APPLICATION_COMMAND:
        return unknown_type()

    command_name = ((interaction.get("data") or {}).get("name") or "").lower()
    handler = COMMAND_HANDLERS.get(command_name)
    if handler is None:
        # Unlike every other failure this is not an in-protocol reply.
        logging.warning(f"Unknown command: {command_name}")
        return unknown_type()

    return handler(interaction, client), 200
