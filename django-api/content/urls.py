from django.urls import path, re_path

from content.handlers import (
    BlogPageView,
    BlogPostDetailView,
    BlogScopedListView,
    EventDetailView,
    EventListView,
    GalleryView,
    HeroSectionView,
    ReviewsView,
)

urlpatterns = [
    path("blog", BlogPageView.as_view(), name="blog-page"),
    path("blog/posts/<slug:slug>", BlogPostDetailView.as_view(), name="blog-post-detail"),
    re_path(
        r"^blog/(?P<scope>category|author|tag)/(?P<slug>[-\w]+)$",
        BlogScopedListView.as_view(),
        name="blog-scoped-list",
    ),
    path("hero", HeroSectionView.as_view(), name="hero-section"),
    path("reviews", ReviewsView.as_view(), name="reviews"),
    path("gallery", GalleryView.as_view(), name="gallery"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<slug:slug>", EventDetailView.as_view(), name="event-detail"),
]
