import logging

from flask import Flask

from chalbot.config import load_config, missing_keys


def create_app(config=None):
    """
    Builds the Flask application.

    Args:
        config (dict, optional): Overrides for the values read from the environment.

    Returns:
        Flask: The configured application with the interaction routes registered.
    """
    from chalbot.routes import routes

    settings = load_config()
    if config:
        settings.update(config)

    # Logging setup
    logging.basicConfig(
        level=settings["LOG_LEVEL"],
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )

    app = Flask(__name__)
    app.config.update(settings)

    for key in missing_keys(settings):
        logging.warning(f"{key} is not set; requests needing it will fail.")

    app.register_blueprint(routes)
    return app
