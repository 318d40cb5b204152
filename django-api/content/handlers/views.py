"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse and validate query parameters
- Call services through the resource loader
- Fall back to static content, or map domain errors to HTTP responses
- Never expose internal error details
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from content.domain.errors import ContentNotFoundError, DomainError, ErrorCode
from content.handlers import serializers as s
from content.handlers.fallbacks import FALLBACK_GALLERY_ITEMS, FALLBACK_HERO, FALLBACK_TESTIMONIALS
from content.handlers.gallery import GalleryModal
from content.handlers.resources import Resource, ResourceSpec, load_resource, load_resources
from content.services import BlogService, HomepageService
from content.services import display
from content.services.media import build_media_resolver
from content.services.page import Page
from content.transport.http_client import build_client

logger = logging.getLogger(__name__)

S = TypeVar("S", BlogService, HomepageService)
T = TypeVar("T")

ERROR_STATUS = {
    ErrorCode.CONTENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TRANSPORT_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.MALFORMED_RESPONSE: status.HTTP_502_BAD_GATEWAY,
}


def _fetching(service_class: type[S], call: Callable[[S], T]) -> Callable[[], T]:
    """Run ``call`` on a service with a client of its own, closed afterwards."""

    def fetch() -> T:
        with build_client() as client:
            return call(service_class(client))

    return fetch


def _resource_payload(resource: Resource, data: Any) -> dict:
    return {"state": resource.state.value, "error": resource.error, "data": data}


def _error_response(exc: DomainError) -> Response:
    if isinstance(exc, ContentNotFoundError):
        logger.info("%s: %s", exc, exc.slug)
    else:
        logger.error("Content request failed: %s", exc)
    return Response(
        {"code": exc.code.value, "message": exc.message},
        status=ERROR_STATUS[exc.code],
    )


class HealthView(APIView):
    """Handler for GET /"""

    def get(self, request: Request) -> Response:
        return Response({"status": "ok", "message": "Academy content API is running"})


class BlogPageView(APIView):
    """Handler for GET /api/blog

    Posts, categories, authors and tags are fetched concurrently and each
    reports its own state and error.
    """

    def get(self, request: Request) -> Response:
        params = s.BlogPageQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        page = params.validated_data.get("page")
        page_size = params.validated_data["page_size"]

        media = build_media_resolver()
        resources = load_resources(
            {
                "posts": ResourceSpec(
                    fetch=_fetching(
                        BlogService,
                        lambda service: service.get_posts_page(page=page, page_size=page_size),
                    ),
                    error_message="Failed to load blog posts",
                    fallback=Page(items=[]),
                ),
                "categories": ResourceSpec(
                    _fetching(BlogService, BlogService.get_categories),
                    "Failed to load categories",
                    [],
                ),
                "authors": ResourceSpec(
                    _fetching(BlogService, BlogService.get_authors),
                    "Failed to load authors",
                    [],
                ),
                "tags": ResourceSpec(
                    _fetching(BlogService, BlogService.get_tags),
                    "Failed to load tags",
                    [],
                ),
            }
        )

        posts = resources["posts"]
        pagination = posts.data.pagination
        return Response(
            {
                "posts": {
                    **_resource_payload(
                        posts,
                        s.BlogPostDisplaySerializer(
                            [display.format_blog_post(p, media) for p in posts.data.items],
                            many=True,
                        ).data,
                    ),
                    "pagination": s.PaginationSerializer(pagination).data if pagination else None,
                },
                "categories": _resource_payload(
                    resources["categories"],
                    s.CategoryDisplaySerializer(
                        [display.format_category(c) for c in resources["categories"].data],
                        many=True,
                    ).data,
                ),
                "authors": _resource_payload(
                    resources["authors"],
                    s.AuthorDisplaySerializer(
                        [display.format_author(a, media) for a in resources["authors"].data],
                        many=True,
                    ).data,
                ),
                "tags": _resource_payload(
                    resources["tags"],
                    s.TagDisplaySerializer(
                        [display.format_tag(t) for t in resources["tags"].data],
                        many=True,
                    ).data,
                ),
            }
        )


class BlogScopedListView(APIView):
    """Handler for GET /api/blog/{category|author|tag}/{slug}"""

    scopes = {
        "category": BlogService.get_posts_by_category,
        "author": BlogService.get_posts_by_author,
        "tag": BlogService.get_posts_by_tag,
    }

    def get(self, request: Request, scope: str, slug: str) -> Response:
        params = s.BlogPageQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        fetch = self.scopes[scope]
        posts = load_resource(
            "posts",
            ResourceSpec(
                fetch=_fetching(
                    BlogService,
                    lambda service: fetch(
                        service,
                        slug,
                        page=params.validated_data.get("page"),
                        page_size=params.validated_data["page_size"],
                    ),
                ),
                error_message="Failed to load blog posts",
                fallback=[],
            ),
        )
        media = build_media_resolver()
        return Response(
            {
                "scope": scope,
                "slug": slug,
                "posts": _resource_payload(
                    posts,
                    s.BlogPostDisplaySerializer(
                        [display.format_blog_post(p, media) for p in posts.data], many=True
                    ).data,
                ),
            }
        )


class BlogPostDetailView(APIView):
    """Handler for GET /api/blog/posts/{slug}"""

    def get(self, request: Request, slug: str) -> Response:
        try:
            with build_client() as client:
                post = BlogService(client).get_post_by_slug(slug)
            if post is None:
                raise ContentNotFoundError("Blog post", slug)
        except DomainError as exc:
            return _error_response(exc)

        related = load_resource(
            "related",
            ResourceSpec(
                fetch=_fetching(
                    BlogService,
                    lambda service: (
                        service.get_related_posts(post.id, post.category.slug)
                        if post.category
                        else []
                    ),
                ),
                error_message="Failed to load related posts",
                fallback=[],
            ),
        )
        media = build_media_resolver()
        return Response(
            {
                "post": s.BlogPostDisplaySerializer(display.format_blog_post(post, media)).data,
                "related": _resource_payload(
                    related,
                    s.BlogPostDisplaySerializer(
                        [display.format_blog_post(p, media) for p in related.data], many=True
                    ).data,
                ),
            }
        )


class HeroSectionView(APIView):
    """Handler for GET /api/hero

    ``sample`` is true whenever the sample hero is shown, whether the CMS
    failed or simply has no hero section set.
    """

    def get(self, request: Request) -> Response:
        hero = load_resource(
            "hero",
            ResourceSpec(
                _fetching(HomepageService, HomepageService.get_hero_section),
                "Failed to load hero section",
                FALLBACK_HERO,
            ),
        )
        sample = hero.failed or hero.data is None
        section = FALLBACK_HERO if sample else hero.data
        payload = _resource_payload(
            hero,
            s.HeroSectionDisplaySerializer(
                display.format_hero_section(section, build_media_resolver())
            ).data,
        )
        payload["sample"] = sample
        return Response(payload)


class ReviewsView(APIView):
    """Handler for GET /api/reviews"""

    def get(self, request: Request) -> Response:
        reviews = load_resource(
            "testimonials",
            ResourceSpec(
                _fetching(HomepageService, HomepageService.get_featured_testimonials),
                "Failed to load testimonials",
                list(FALLBACK_TESTIMONIALS),
            ),
        )
        media = build_media_resolver()
        return Response(
            _resource_payload(
                reviews,
                s.TestimonialDisplaySerializer(
                    [display.format_testimonial(t, media) for t in reviews.data], many=True
                ).data,
            )
        )


class GalleryView(APIView):
    """Handler for GET /api/gallery

    ``open`` selects the image shown full screen and ``step`` moves the modal
    to the next or previous image, wrapping at both ends.
    """

    def get(self, request: Request) -> Response:
        params = s.GalleryQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        gallery = load_resource(
            "gallery",
            ResourceSpec(
                _fetching(HomepageService, HomepageService.get_featured_gallery_items),
                "Failed to load gallery",
                list(FALLBACK_GALLERY_ITEMS),
            ),
        )
        media = build_media_resolver()
        items = [display.format_gallery_item(item, media) for item in gallery.data]
        payload = _resource_payload(
            gallery, s.GalleryItemDisplaySerializer(items, many=True).data
        )

        payload["modal"] = None
        if "open" in params.validated_data:
            modal = GalleryModal(items)
            try:
                modal.open(params.validated_data["open"])
            except IndexError as exc:
                return Response({"open": [str(exc)]}, status=status.HTTP_400_BAD_REQUEST)
            step = params.validated_data.get("step")
            if step == "next":
                modal.next()
            elif step == "previous":
                modal.previous()
            payload["modal"] = {
                "index": modal.index,
                "counter": modal.counter,
                "has_navigation": modal.has_navigation,
                "item": s.GalleryItemDisplaySerializer(modal.current).data,
            }
        return Response(payload)


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        params = s.EventQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        query = params.validated_data

        events = load_resource(
            "events",
            ResourceSpec(
                fetch=_fetching(
                    HomepageService,
                    lambda service: service.get_events(
                        featured=query["featured"],
                        upcoming=query["upcoming"],
                        event_type=query.get("type"),
                        limit=query.get("limit"),
                    ),
                ),
                error_message="Failed to load events",
                fallback=[],
            ),
        )
        media = build_media_resolver()
        return Response(
            _resource_payload(
                events,
                s.EventDisplaySerializer(
                    [display.format_event(e, media) for e in events.data], many=True
                ).data,
            )
        )


class EventDetailView(APIView):
    """Handler for GET /api/events/{slug}"""

    def get(self, request: Request, slug: str) -> Response:
        try:
            with build_client() as client:
                event = HomepageService(client).get_event_by_slug(slug)
            if event is None:
                raise ContentNotFoundError("Event", slug)
        except DomainError as exc:
            return _error_response(exc)
        return Response(
            s.EventDisplaySerializer(display.format_event(event, build_media_resolver())).data
        )
