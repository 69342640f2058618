import logging

import requests

from chalbot.naming import MAX_CHANNEL_NAME_LENGTH, clamp_length

TEXT_CHANNEL = 0
VOICE_CHANNEL = 2


class DiscordAPIError(Exception):
    """A non-success response from the Discord REST API."""

    def __init__(self, status, body, url=None, reason=None):
        super().__init__(f"Discord API returned {status}: {body}")
        self.status = status
        self.body = body
        self.url = url
        self.reason = reason


def _response_body(response):
    try:
        return response.json()
    except ValueError:
        return response.text


class DiscordClient:
    """
    Makes the bot's REST calls against Discord.

    Every call is a single request with the bot token; nothing is retried.
    """

    def __init__(self, token, api_base="https://discord.com/api/v10"):
        self.token = token
        self.api_base = api_base.rstrip("/")

    def _headers(self):
        return {
            "Authorization": f"Bot {self.token}",
            "Content-Type": "application/json",
        }

    def fetch_channel(self, channel_id):
        """
        Fetches a channel by id.

        Args:
            channel_id (str): The channel to look up.

        Returns:
            dict: The channel object, or None if it could not be fetched.
        """
        url = f"{self.api_base}/channels/{channel_id}"
        try:
            response = requests.get(url, headers=self._headers())
        except requests.RequestException as e:
            logging.error(f"Network error fetching channel {channel_id}: {e}")
            return None

        if not response.ok:
            logging.error(f"Error fetching channel {channel_id}: {response.status_code} {response.text}")
            return None

        try:
            return response.json()
        except ValueError:
            logging.error(f"Unreadable channel {channel_id} response: {response.text}")
            return None

    def rename_channel(self, channel_id, new_name):
        """
        Renames a channel. Names over the length limit are truncated.

        Args:
            channel_id (str): The channel to rename.
            new_name (str): The desired name.

        Returns:
            bool: True if Discord accepted the change.
        """
        if len(new_name) > MAX_CHANNEL_NAME_LENGTH:
            logging.warning(f"New channel name exceeds limit ({len(new_name)} > {MAX_CHANNEL_NAME_LENGTH}). Truncating.")
            new_name = clamp_length(new_name)

        url = f"{self.api_base}/channels/{channel_id}"
        try:
            response = requests.patch(url, json={"name": new_name}, headers=self._headers())
        except requests.RequestException as e:
            logging.error(f"Network error updating name for channel {channel_id}: {e}")
            return False

        if not response.ok:
            # 50013 in the body means the bot lacks Manage Channels.
            logging.error(f"Error updating name for channel {channel_id} ({response.status_code}): {response.text}")
            return False

        logging.info(f"Successfully updated name for channel {channel_id} to \"{new_name}\"")
        return True

    def create_channel(self, guild_id, name, kind, parent_id=None):
        """
        Creates a channel in a guild.

        Args:
            guild_id (str): The guild to create the channel in.
            name (str): The channel name.
            kind (int): TEXT_CHANNEL or VOICE_CHANNEL.
            parent_id (str, optional): Category to place the channel under.

        Returns:
            dict: The created channel object.

        Raises:
            DiscordAPIError: If Discord rejects the request.
            requests.RequestException: On network failure.
        """
        url = f"{self.api_base}/guilds/{guild_id}/channels"
        payload = {"name": name, "type": kind, "parent_id": parent_id}

        response = requests.post(url, json=payload, headers=self._headers())
        if not response.ok:
            body = _response_body(response)
            logging.error(f"Discord API Error ({response.status_code}): {body}")
            raise DiscordAPIError(response.status_code, body)

        channel = response.json()
        logging.info(f"Successfully created channel: {channel.get('name')} ({channel.get('id')})")
        return channel

    def register_commands(self, application_id, commands):
        """
        Replaces the application's global slash commands.

        Returns:
            The JSON Discord sends back.

        Raises:
            DiscordAPIError: If Discord rejects the request. The body is the raw text.
        """
        url = f"{self.api_base}/applications/{application_id}/commands"
        response = requests.put(url, json=commands, headers=self._headers())
        if not response.ok:
            logging.error(f"Error registering commands: {response.status_code} {response.text}")
            raise DiscordAPIError(response.status_code, response.text, url=response.url, reason=response.reason)

        logging.info("Registered all commands")
        return response.json()
