SOLVED_MARKER = "✅-solved-"
UNSOLVED_MARKER = "❓-pending-"

# Checked in this order; only the first match is stripped.
MARKERS = (SOLVED_MARKER, UNSOLVED_MARKER)

MAX_CHANNEL_NAME_LENGTH = 100


def strip_marker(name):
    """
    Splits a channel name into its status marker and base name.

    Only one leading marker is removed, even if another one follows it.

    Args:
        name (str): The channel's current name.

    Returns:
        tuple: (marker or None, base name).
    """
    for marker in MARKERS:
        if name.startswith(marker):
            return marker, name[len(marker):]
    return None, name


def apply_marker(marker, base):
    return (marker or "") + base


def clamp_length(name, max_length=MAX_CHANNEL_NAME_LENGTH):
    if len(name) > max_length:
        return name[:max_length]
    return name


def normalize_name(value):
    """
    Normalizes a user-supplied channel name.

    Replaces the first space with a hyphen, lowercases and trims. Later spaces
    are left alone.

    Args:
        value (str): Raw option value, may be None.

    Returns:
        str: The normalized name, empty if nothing usable was supplied.
    """
    if not value:
        return ""
    return value.replace(" ", "-", 1).lower().strip()
