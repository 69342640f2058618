import logging

import requests
from flask import Blueprint, current_app, jsonify, request

from chalbot.commands import ALL_COMMANDS
from chalbot.discord_api import DiscordAPIError, DiscordClient
from chalbot.discord_handler import handle_interaction, unknown_type
from chalbot.utils import verify_signature

routes = Blueprint("routes", __name__)


def get_client():
    return DiscordClient(current_app.config["DISCORD_TOKEN"], current_app.config["DISCORD_API_BASE"])


@routes.route("/", methods=["POST"])
def interaction_handler():
    body = request.get_data()
    if not verify_signature(
        body,
        request.headers.get("X-Signature-Ed25519"),
        request.headers.get("X-Signature-Timestamp"),
        current_app.config["DISCORD_PUBLIC_KEY"],
    ):
        return "Bad request signature.", 401, {"Content-Type": "text/plain"}

    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        error, status = unknown_type()
        return jsonify(error), status
    logging.info(f"Received interaction: {data}")

    reply, status = handle_interaction(data, get_client())
    return jsonify(reply), status


@routes.route("/", methods=["GET"])
def greeting():
    return f"👋 {current_app.config['DISCORD_APPLICATION_ID']}", 200, {"Content-Type": "text/plain; charset=utf-8"}


@routes.route("/register", methods=["GET"])
def register_commands():
    """
    Replaces the registered slash commands with the bot's current set.
    """
    try:
        data = get_client().register_commands(current_app.config["DISCORD_APPLICATION_ID"], ALL_COMMANDS)
    except DiscordAPIError as e:
        error_text = f"Error registering commands \n {e.url}: {e.status} {e.reason}"
        if e.body:
            error_text = f"{error_text} \n\n {e.body}"
        return error_text, 400, {"Content-Type": "text/plain; charset=utf-8"}
    except requests.RequestException as e:
        logging.error(f"Error registering commands: {e}")
        return f"Error registering commands \n {e}", 502, {"Content-Type": "text/plain; charset=utf-8"}
    return jsonify(data)


@routes.route("/healthz", methods=["GET", "HEAD"])
def health_check():
    return "OK", 200
