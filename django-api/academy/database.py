"""Database connection settings built from DATABASE_* variables.

``DATABASE_CLIENT`` picks the backend. sqlite uses a local file; the other
clients read a connection string from ``DATABASE_URL`` and may add SSL
options, pool sizing and a connection timeout.
"""

from typing import Any

import dj_database_url
from django.core.exceptions import ImproperlyConfigured

from academy.env import Env

ENGINES = {
    "sqlite": "django.db.backends.sqlite3",
    "postgres": "django.db.backends.postgresql",
    "mysql": "django.db.backends.mysql",
}


def _postgres_ssl(env: Env) -> dict[str, Any]:
    verify = env.bool("DATABASE_SSL_REJECT_UNAUTHORIZED", True)
    options = {"sslmode": "verify-full" if verify else "require"}
    for option, name in (
        ("sslkey", "DATABASE_SSL_KEY"),
        ("sslcert", "DATABASE_SSL_CERT"),
        ("sslrootcert", "DATABASE_SSL_CA"),
    ):
        if env(name):
            options[option] = env(name)
    return options


def _mysql_ssl(env: Env) -> dict[str, Any]:
    verify = env.bool("DATABASE_SSL_REJECT_UNAUTHORIZED", True)
    ssl = {
        key: env(name)
        for key, name in (
            ("key", "DATABASE_SSL_KEY"),
            ("cert", "DATABASE_SSL_CERT"),
            ("ca", "DATABASE_SSL_CA"),
        )
        if env(name)
    }
    return {"ssl_mode": "VERIFY_IDENTITY" if verify else "REQUIRED", "ssl": ssl}


def database_config(env: Env) -> dict[str, Any]:
    """Return the ``DATABASES["default"]`` entry for the environment."""
    client = env("DATABASE_CLIENT", "sqlite")
    if client not in ENGINES:
        raise ImproperlyConfigured(
            f"DATABASE_CLIENT must be one of {', '.join(ENGINES)}, got {client!r}"
        )

    if client == "sqlite":
        return {"ENGINE": ENGINES[client], "NAME": env("DATABASE_FILENAME", ".tmp/data.db")}

    url = env("DATABASE_URL")
    if not url:
        raise ImproperlyConfigured(f"DATABASE_URL is required when DATABASE_CLIENT is {client}")
    config = dj_database_url.parse(url, engine=ENGINES[client])
    options = config.setdefault("OPTIONS", {})

    if env.bool("DATABASE_SSL", False):
        options.update(_postgres_ssl(env) if client == "postgres" else _mysql_ssl(env))

    # milliseconds in the environment, seconds for the drivers
    timeout = env.int("DATABASE_CONNECTION_TIMEOUT", 60000) / 1000
    if client == "postgres":
        pool_min = env.int("DATABASE_POOL_MIN", 2)
        pool_max = env.int("DATABASE_POOL_MAX", 10)
        if not 0 <= pool_min <= pool_max:
            raise ImproperlyConfigured("DATABASE_POOL_MIN must be between 0 and DATABASE_POOL_MAX")
        options["pool"] = {"min_size": pool_min, "max_size": pool_max, "timeout": timeout}
    else:
        options["connect_timeout"] = int(timeout)
    return config
