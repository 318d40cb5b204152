"""Unit tests for media URL resolution."""

from content.domain.models import Media
from content.services.media import MediaResolver, build_media_resolver


class TestMediaResolver:
    def setup_method(self):
        self.resolver = MediaResolver("https://cms.example.com")

    def test_absent_media_resolves_to_empty_string(self):
        assert self.resolver.resolve(None) == ""

    def test_media_without_url_resolves_to_empty_string(self):
        assert self.resolver.resolve(Media(id=1, url="")) == ""

    def test_absolute_url_is_returned_unchanged(self):
        media = Media(id=1, url="http://x/y.png")

        assert self.resolver.resolve(media) == "http://x/y.png"

    def test_relative_url_is_joined_to_host(self):
        media = Media(id=1, url="/up/y.png")

        assert self.resolver.resolve(media) == "https://cms.example.com/up/y.png"

    def test_trailing_slash_on_host_is_ignored(self):
        resolver = MediaResolver("https://cms.example.com/")

        assert resolver.resolve(Media(id=1, url="/up/y.png")) == "https://cms.example.com/up/y.png"

    def test_build_uses_configured_cms_url(self, settings):
        settings.STRAPI_URL = "http://localhost:1337"

        resolver = build_media_resolver()

        assert resolver.resolve(Media(id=1, url="/up/y.png")) == "http://localhost:1337/up/y.png"
