"""Django settings for the academy content API.

Everything that differs between environments is read from environment
variables; see academy/database.py and academy/server.py.
"""

from pathlib import Path

from academy.database import database_config
from academy.env import Env
from academy.server import server_config

BASE_DIR = Path(__file__).resolve().parent.parent

env = Env()

SERVER = server_config(env)

# The first key signs; the rest are still accepted so keys can be rotated.
SECRET_KEY = SERVER.app_keys[0]
SECRET_KEY_FALLBACKS = list(SERVER.app_keys[1:])

DEBUG = env.bool("DEBUG", False)

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", ["*"])

if SERVER.proxy:
    USE_X_FORWARDED_HOST = True
    SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.staticfiles",
    "rest_framework",
    "content",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "academy.urls"

WSGI_APPLICATION = "academy.wsgi.application"

DATABASES = {"default": database_config(env)}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "static"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Read-only public API: no sessions, no auth.
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
}

# CMS connection
STRAPI_URL = env("STRAPI_URL", "http://localhost:1337")
STRAPI_API_TOKEN = env("STRAPI_API_TOKEN", "")
STRAPI_TIMEOUT = env.int("STRAPI_TIMEOUT", 10)

LOG_LEVEL = env("LOG_LEVEL", "INFO").upper()

DATABASE_DEBUG = env.bool("DATABASE_DEBUG", False)

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "content": {"level": LOG_LEVEL},
        "django.db.backends": {
            "handlers": ["console"],
            "level": "DEBUG" if DATABASE_DEBUG else "WARNING",
            "propagate": False,
        },
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
}
