STRING_OPTION = 3

ADD_CHAL_COMMAND = {
    "name": "addchal",
    "description": "Add a new challenge channel",
    "options": [
        {
            "type": STRING_OPTION,
            "name": "name",
            "description": "The name of the new challenge",
            "required": True,
        }
    ],
}

SOLVED_COMMAND = {
    "name": "solved",
    "description": "Mark a challenge as solved",
}

UNSOLVED_COMMAND = {
    "name": "unsolved",
    "description": "Mark a challenge as unsolved",
}

RENAME_CHAL_COMMAND = {
    "name": "renamechal",
    "description": "Rename a challenge channel",
    "options": [
        {
            "type": STRING_OPTION,
            "name": "newname",
            "description": "The new name for the channel",
            "required": True,
        }
    ],
}

NEW_VOICE_CHANNEL_COMMAND = {
    "name": "newvoicechannel",
    "description": "Add a new voice channel",
    "options": [
        {
            "type": STRING_OPTION,
            "name": "name",
            "description": "The name of the new voice channel",
            "required": True,
        }
    ],
}

ALL_COMMANDS = [
    ADD_CHAL_COMMAND,
    SOLVED_COMMAND,
    UNSOLVED_COMMAND,
    RENAME_CHAL_COMMAND,
    NEW_VOICE_CHANNEL_COMMAND,
]


def get_string_option(data, name):
    """Returns the value of a STRING option from interaction data, or None."""
    for option in data.get("options") or []:
        if option.get("name") == name and option.get("type") == STRING_OPTION:
            return option.get("value")
    return None
