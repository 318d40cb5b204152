"""HTTP server settings built from HOST, PORT, APP_KEYS, URL and PROXY."""

from dataclasses import dataclass
from urllib.parse import urlparse

from django.core.exceptions import ImproperlyConfigured

from academy.env import Env

DEFAULT_APP_KEYS = ("toBeModified1", "toBeModified2")


@dataclass(frozen=True)
class ServerConfig:
    host: str
    port: int
    app_keys: tuple[str, ...]
    url: str
    proxy: bool

    @property
    def public_host(self) -> str:
        """Host name of the public URL, or "" when no URL is configured."""
        if not self.url:
            return ""
        parsed = urlparse(self.url if "//" in self.url else f"//{self.url}")
        return parsed.hostname or ""


def server_config(env: Env) -> ServerConfig:
    app_keys = tuple(env.list("APP_KEYS", DEFAULT_APP_KEYS))
    if not app_keys:
        raise ImproperlyConfigured("APP_KEYS must contain at least one key")
    port = env.int("PORT", 1337)
    if not 0 < port < 65536:
        raise ImproperlyConfigured(f"PORT out of range: {port}")
    return ServerConfig(
        host=env("HOST", "0.0.0.0"),
        port=port,
        app_keys=app_keys,
        url=env("URL", env("RAILWAY_STATIC_URL", "")),
        proxy=env.bool("PROXY", True),
    )
