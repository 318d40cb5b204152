"""Resolution of media descriptors to directly usable URLs."""

from django.conf import settings

from content.domain.models import Media


class MediaResolver:
    """Join relative media paths onto the configured CMS host."""

    def __init__(self, host: str) -> None:
        self.host = host.rstrip("/")

    def resolve(self, media: Media | None) -> str:
        """Return an absolute URL for ``media``, or "" when there is none."""
        if media is None or not media.url:
            return ""
        if media.url.startswith("http"):
            return media.url
        return f"{self.host}{media.url}"


def build_media_resolver() -> MediaResolver:
    return MediaResolver(settings.STRAPI_URL)
