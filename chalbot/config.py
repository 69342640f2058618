import os

PORT = int(os.getenv("PORT", 8080))

DEFAULT_API_BASE = "https://discord.com/api/v10"

REQUIRED_KEYS = ("DISCORD_APPLICATION_ID", "DISCORD_TOKEN", "DISCORD_PUBLIC_KEY")


def load_config(environ=None):
    """
    Reads the bot's settings from the environment.

    Args:
        environ (Mapping, optional): Source of values. Defaults to os.environ.

    Returns:
        dict: Keys suitable for Flask's app.config.
    """
    if environ is None:
        environ = os.environ

    return {
        "DISCORD_APPLICATION_ID": environ.get("DISCORD_APPLICATION_ID", ""),
        "DISCORD_TOKEN": environ.get("DISCORD_TOKEN", ""),
        "DISCORD_PUBLIC_KEY": environ.get("DISCORD_PUBLIC_KEY", ""),
        "DISCORD_API_BASE": environ.get("DISCORD_API_BASE", DEFAULT_API_BASE),
        "LOG_LEVEL": environ.get("LOG_LEVEL", "INFO"),
    }


def missing_keys(config):
    return [key for key in REQUIRED_KEYS if not config.get(key)]
