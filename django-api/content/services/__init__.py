from content.services.blog_service import BlogService
from content.services.homepage_service import HomepageService
from content.services.media import MediaResolver

__all__ = ["BlogService", "HomepageService", "MediaResolver"]
