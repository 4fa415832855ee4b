"""Django settings for the ticketeer catalog project."""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"

INSTALLED_APPS = [
    "catalog",
]

USE_TZ = True

# Dotted path to a zero-argument callable returning a uuid.UUID.
TICKETEER_ID_FACTORY = os.environ.get("TICKETEER_ID_FACTORY", "uuid.uuid4")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "catalog": {
            "handlers": ["console"],
            "level": os.environ.get("TICKETEER_LOG_LEVEL", "INFO"),
        },
    },
}
