"""Domain models representing CMS-managed content.

These are pure, read-only snapshots of what the CMS returned. Mapping from
normalized CMS records lives in services/mappers.py.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from content.domain.value_objects import (
    ButtonSize,
    ButtonVariant,
    EventType,
    GalleryCategory,
    Money,
    Order,
    Rating,
)


@dataclass(frozen=True)
class Media:
    """Descriptor of a stored asset. Never owned by this service."""

    id: int
    url: str
    name: str = ""
    alternative_text: str = ""
    caption: str = ""
    width: int | None = None
    height: int | None = None
    formats: dict[str, Any] = field(default_factory=dict)
    hash: str = ""
    ext: str = ""
    mime: str = ""
    size: float | None = None
    preview_url: str = ""
    provider: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class SEO:
    meta_title: str = ""
    meta_description: str = ""
    keywords: str = ""
    canonical_url: str = ""
    og_image: Media | None = None


@dataclass(frozen=True)
class Category:
    """Blog category.

    ``post_count`` is filled when the query asked for a count of related
    posts, ``posts`` when it asked for the posts themselves.
    """

    id: int
    name: str
    slug: str
    color: str = ""
    description: str = ""
    post_count: int | None = None
    posts: tuple["BlogPost", ...] = ()


@dataclass(frozen=True)
class Tag:
    id: int
    name: str
    slug: str
    color: str = ""
    post_count: int | None = None
    posts: tuple["BlogPost", ...] = ()


@dataclass(frozen=True)
class Author:
    id: int
    name: str
    slug: str
    bio: str = ""
    avatar: Media | None = None
    email: str = ""
    social_links: dict[str, str] = field(default_factory=dict)
    post_count: int | None = None
    posts: tuple["BlogPost", ...] = ()


@dataclass(frozen=True)
class BlogPost:
    id: int
    title: str
    slug: str
    excerpt: str = ""
    content: str = ""
    read_time: str = ""
    publish_date: datetime | None = None
    featured_image: Media | None = None
    category: Category | None = None
    author: Author | None = None
    tags: tuple[Tag, ...] = ()
    seo: SEO | None = None


@dataclass(frozen=True)
class Button:
    """Call-to-action button on the hero section."""

    text: str
    url: str = ""
    variant: ButtonVariant = ButtonVariant.PRIMARY
    size: ButtonSize = ButtonSize.MD
    open_in_new_tab: bool = False


@dataclass(frozen=True)
class HeroSection:
    """Singleton hero block shown at the top of the homepage."""

    id: int
    title: str
    subtitle: str = ""
    background_image: Media | None = None
    background_video: Media | None = None
    primary_button: Button | None = None
    secondary_button: Button | None = None
    features: tuple[str, ...] = ()


@dataclass(frozen=True)
class Testimonial:
    id: int
    name: str
    role: str
    content: str
    rating: Rating
    avatar: Media | None = None
    featured: bool = False
    order: Order = Order(0)
    created_at: datetime | None = None


@dataclass(frozen=True)
class Event:
    id: int
    title: str
    slug: str
    description: str
    start_date: datetime
    event_type: EventType = EventType.OTHER
    short_description: str = ""
    end_date: datetime | None = None
    location: str = ""
    featured_image: Media | None = None
    gallery: tuple[Media, ...] = ()
    price: Money | None = None
    registration_url: str = ""
    featured: bool = False


@dataclass(frozen=True)
class GalleryItem:
    id: int
    title: str
    image: Media
    category: GalleryCategory = GalleryCategory.OTHER
    description: str = ""
    featured: bool = False
    order: Order = Order(0)
    tags: tuple[str, ...] = ()
    created_at: datetime | None = None
