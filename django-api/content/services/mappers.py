"""Mapping of normalized CMS records onto typed domain records.

This is where optional fields are made explicit: a present field keeps its
value, an absent (or null) one takes the declared default. Values that break
a domain invariant are reported as MalformedResponseError.
"""

import functools
from collections.abc import Callable, Mapping
from datetime import datetime, time
from datetime import timezone as dt_timezone
from typing import Any, TypeVar

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from content.domain.errors import MalformedResponseError
from content.domain.models import (
    SEO,
    Author,
    BlogPost,
    Button,
    Category,
    Event,
    GalleryItem,
    HeroSection,
    Media,
    Tag,
    Testimonial,
)
from content.domain.value_objects import (
    ButtonSize,
    ButtonVariant,
    EventType,
    GalleryCategory,
    Money,
    Order,
    Rating,
)
from content.transport.normalizer import Record, unwrap_relation

T = TypeVar("T")


def _validates(kind: str) -> Callable[[Callable[[Record], T]], Callable[[Record], T]]:
    def decorator(func: Callable[[Record], T]) -> Callable[[Record], T]:
        @functools.wraps(func)
        def wrapper(record: Record) -> T:
            try:
                return func(record)
            except (AttributeError, KeyError, TypeError, ValueError) as exc:
                raise MalformedResponseError(f"Invalid {kind} record: {exc!r}") from exc

        return wrapper

    return decorator


def _whole(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"expected a whole number, got {value!r}")
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"expected a whole number, got {value!r}")
    return int(number)


def _text(record: Mapping[str, Any], key: str) -> str:
    value = record.get(key)
    return "" if value is None else str(value)


def _datetime(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    parsed = parse_datetime(str(value))
    if parsed is None:
        day = parse_date(str(value))
        if day is None:
            raise ValueError(f"Not a date: {value!r}")
        parsed = datetime.combine(day, time.min)
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, dt_timezone.utc)
    return parsed


def _single(value: Any) -> Record | None:
    unwrapped = unwrap_relation(value)
    if isinstance(unwrapped, list):
        return unwrapped[0] if unwrapped else None
    return unwrapped


def _many(value: Any) -> list[Record]:
    unwrapped = unwrap_relation(value)
    if unwrapped is None:
        return []
    if isinstance(unwrapped, list):
        return unwrapped
    return [unwrapped]


def _count_or_posts(value: Any) -> tuple[int | None, tuple[BlogPost, ...]]:
    """Split a back-reference into (count, posts); only one is ever set."""
    if value is None:
        return None, ()
    if isinstance(value, int) and not isinstance(value, bool):
        return value, ()
    if isinstance(value, Mapping):
        if "count" in value:
            return int(value["count"]), ()
        data = value.get("data")
        if isinstance(data, Mapping) and "id" not in data:
            attributes = data.get("attributes") or {}
            if "count" in attributes:
                return int(attributes["count"]), ()
    return None, tuple(to_blog_post(post) for post in _many(value))


def to_media(value: Any) -> Media | None:
    record = _single(value)
    if record is None:
        return None
    return _media(record)


def to_media_list(value: Any) -> tuple[Media, ...]:
    return tuple(_media(record) for record in _many(value))


@_validates("media")
def _media(record: Record) -> Media:
    return Media(
        id=int(record["id"]),
        url=_text(record, "url"),
        name=_text(record, "name"),
        alternative_text=_text(record, "alternativeText"),
        caption=_text(record, "caption"),
        width=record.get("width"),
        height=record.get("height"),
        formats=dict(record.get("formats") or {}),
        hash=_text(record, "hash"),
        ext=_text(record, "ext"),
        mime=_text(record, "mime"),
        size=record.get("size"),
        preview_url=_text(record, "previewUrl"),
        provider=_text(record, "provider"),
        created_at=_datetime(record.get("createdAt")),
        updated_at=_datetime(record.get("updatedAt")),
    )


@_validates("category")
def to_category(record: Record) -> Category:
    count, posts = _count_or_posts(record.get("blog_posts"))
    return Category(
        id=int(record["id"]),
        name=record["name"],
        slug=record["slug"],
        color=_text(record, "color"),
        description=_text(record, "description"),
        post_count=count,
        posts=posts,
    )


@_validates("tag")
def to_tag(record: Record) -> Tag:
    count, posts = _count_or_posts(record.get("blog_posts"))
    return Tag(
        id=int(record["id"]),
        name=record["name"],
        slug=record["slug"],
        color=_text(record, "color"),
        post_count=count,
        posts=posts,
    )


@_validates("author")
def to_author(record: Record) -> Author:
    count, posts = _count_or_posts(record.get("blog_posts"))
    return Author(
        id=int(record["id"]),
        name=record["name"],
        slug=record["slug"],
        bio=_text(record, "bio"),
        avatar=to_media(record.get("avatar")),
        email=_text(record, "email"),
        social_links={str(k): str(v) for k, v in (record.get("socialLinks") or {}).items()},
        post_count=count,
        posts=posts,
    )


def _seo(value: Any) -> SEO | None:
    if not value:
        return None
    return SEO(
        meta_title=_text(value, "metaTitle"),
        meta_description=_text(value, "metaDescription"),
        keywords=_text(value, "keywords"),
        canonical_url=_text(value, "canonicalUrl"),
        og_image=to_media(value.get("ogImage")),
    )


@_validates("blog post")
def to_blog_post(record: Record) -> BlogPost:
    category = _single(record.get("category"))
    author = _single(record.get("author"))
    return BlogPost(
        id=int(record["id"]),
        title=record["title"],
        slug=record["slug"],
        excerpt=_text(record, "excerpt"),
        content=_text(record, "content"),
        read_time=_text(record, "readTime"),
        publish_date=_datetime(record.get("publishDate")),
        featured_image=to_media(record.get("featuredImage")),
        category=to_category(category) if category else None,
        author=to_author(author) if author else None,
        tags=tuple(to_tag(tag) for tag in _many(record.get("tags"))),
        seo=_seo(record.get("seo")),
    )


def _button(value: Any) -> Button | None:
    if not value:
        return None
    return Button(
        text=value["text"],
        url=_text(value, "url"),
        variant=ButtonVariant(value.get("variant") or ButtonVariant.PRIMARY.value),
        size=ButtonSize(value.get("size") or ButtonSize.MD.value),
        open_in_new_tab=bool(value.get("openInNewTab", False)),
    )


def _features(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(item["text"] if isinstance(item, Mapping) else str(item) for item in value)


@_validates("hero section")
def to_hero_section(record: Record) -> HeroSection:
    return HeroSection(
        id=int(record["id"]),
        title=record["title"],
        subtitle=_text(record, "subtitle"),
        background_image=to_media(record.get("backgroundImage")),
        background_video=to_media(record.get("backgroundVideo")),
        primary_button=_button(record.get("primaryButton")),
        secondary_button=_button(record.get("secondaryButton")),
        features=_features(record.get("features")),
    )


@_validates("testimonial")
def to_testimonial(record: Record) -> Testimonial:
    return Testimonial(
        id=int(record["id"]),
        name=record["name"],
        role=_text(record, "role"),
        content=_text(record, "content"),
        rating=Rating(_whole(record["rating"])),
        avatar=to_media(record.get("avatar")),
        featured=bool(record.get("featured", False)),
        order=Order(_whole(record.get("order") or 0)),
        created_at=_datetime(record.get("createdAt")),
    )


@_validates("event")
def to_event(record: Record) -> Event:
    price = record.get("price")
    start_date = _datetime(record["startDate"])
    if start_date is None:
        raise ValueError("event has no start date")
    return Event(
        id=int(record["id"]),
        title=record["title"],
        slug=record["slug"],
        description=_text(record, "description"),
        start_date=start_date,
        event_type=EventType(record.get("eventType") or EventType.OTHER.value),
        short_description=_text(record, "shortDescription"),
        end_date=_datetime(record.get("endDate")),
        location=_text(record, "location"),
        featured_image=to_media(record.get("featuredImage")),
        gallery=to_media_list(record.get("gallery")),
        price=Money.from_number(price) if price is not None else None,
        registration_url=_text(record, "registrationUrl"),
        featured=bool(record.get("featured", False)),
    )


def _tags(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return tuple(tag.strip() for tag in value.split(",") if tag.strip())
    return tuple(str(tag) for tag in value)


@_validates("gallery item")
def to_gallery_item(record: Record) -> GalleryItem:
    image = to_media(record.get("image"))
    if image is None:
        raise ValueError("gallery item has no image")
    return GalleryItem(
        id=int(record["id"]),
        title=record["title"],
        image=image,
        category=GalleryCategory(record.get("category") or GalleryCategory.OTHER.value),
        description=_text(record, "description"),
        featured=bool(record.get("featured", False)),
        order=Order(_whole(record.get("order") or 0)),
        tags=_tags(record.get("tags")),
        created_at=_datetime(record.get("createdAt")),
    )
