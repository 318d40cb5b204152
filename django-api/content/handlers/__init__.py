from content.handlers.views import (
    BlogPageView,
    BlogPostDetailView,
    BlogScopedListView,
    EventDetailView,
    EventListView,
    GalleryView,
    HealthView,
    HeroSectionView,
    ReviewsView,
)

__all__ = [
    "BlogPageView",
    "BlogPostDetailView",
    "BlogScopedListView",
    "EventDetailView",
    "EventListView",
    "GalleryView",
    "HealthView",
    "HeroSectionView",
    "ReviewsView",
]
