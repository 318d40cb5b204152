"""Display adapters: domain records to the minimal shapes a page renders.

Adapters are pure. Media descriptors become resolved URLs, nested records
become their names, and missing optional values become "" or ().
"""

from dataclasses import dataclass
from datetime import datetime

from content.domain.models import (
    Author,
    BlogPost,
    Button,
    Category,
    Event,
    GalleryItem,
    HeroSection,
    Tag,
    Testimonial,
)
from content.services.media import MediaResolver


def _date(value: datetime | None) -> str:
    return value.isoformat() if value else ""


@dataclass(frozen=True)
class BlogPostDisplay:
    id: int
    slug: str
    title: str
    excerpt: str
    content: str
    author: str
    date: str
    read_time: str
    category: str
    category_slug: str
    tags: tuple[str, ...]
    image: str


@dataclass(frozen=True)
class CategoryDisplay:
    id: int
    name: str
    slug: str
    color: str
    post_count: int


@dataclass(frozen=True)
class AuthorDisplay:
    id: int
    name: str
    slug: str
    bio: str
    avatar: str
    post_count: int


@dataclass(frozen=True)
class TagDisplay:
    id: int
    name: str
    slug: str
    color: str


@dataclass(frozen=True)
class TestimonialDisplay:
    id: int
    name: str
    role: str
    content: str
    rating: int
    avatar: str


@dataclass(frozen=True)
class EventDisplay:
    id: int
    slug: str
    title: str
    description: str
    short_description: str
    start_date: str
    end_date: str
    location: str
    event_type: str
    price: str
    registration_url: str
    image: str
    gallery: tuple[str, ...]


@dataclass(frozen=True)
class GalleryItemDisplay:
    id: int
    title: str
    description: str
    category: str
    image: str
    tags: tuple[str, ...]


@dataclass(frozen=True)
class ButtonDisplay:
    text: str
    url: str
    variant: str
    size: str
    open_in_new_tab: bool


@dataclass(frozen=True)
class HeroSectionDisplay:
    title: str
    subtitle: str
    background_image: str
    background_video: str
    buttons: tuple[ButtonDisplay, ...]
    features: tuple[str, ...]


def format_blog_post(post: BlogPost, media: MediaResolver) -> BlogPostDisplay:
    return BlogPostDisplay(
        id=post.id,
        slug=post.slug,
        title=post.title,
        excerpt=post.excerpt,
        content=post.content,
        author=post.author.name if post.author else "",
        date=_date(post.publish_date),
        read_time=post.read_time,
        category=post.category.name if post.category else "",
        category_slug=post.category.slug if post.category else "",
        tags=tuple(tag.name for tag in post.tags),
        image=media.resolve(post.featured_image),
    )


def _post_count(count: int | None, posts: tuple) -> int:
    # Counted relations win; a populated list is counted here.
    return count if count is not None else len(posts)


def format_category(category: Category) -> CategoryDisplay:
    return CategoryDisplay(
        id=category.id,
        name=category.name,
        slug=category.slug,
        color=category.color,
        post_count=_post_count(category.post_count, category.posts),
    )


def format_author(author: Author, media: MediaResolver) -> AuthorDisplay:
    return AuthorDisplay(
        id=author.id,
        name=author.name,
        slug=author.slug,
        bio=author.bio,
        avatar=media.resolve(author.avatar),
        post_count=_post_count(author.post_count, author.posts),
    )


def format_tag(tag: Tag) -> TagDisplay:
    return TagDisplay(id=tag.id, name=tag.name, slug=tag.slug, color=tag.color)


def format_testimonial(testimonial: Testimonial, media: MediaResolver) -> TestimonialDisplay:
    return TestimonialDisplay(
        id=testimonial.id,
        name=testimonial.name,
        role=testimonial.role,
        content=testimonial.content,
        rating=testimonial.rating.value,
        avatar=media.resolve(testimonial.avatar),
    )


def format_event(event: Event, media: MediaResolver) -> EventDisplay:
    return EventDisplay(
        id=event.id,
        slug=event.slug,
        title=event.title,
        description=event.description,
        short_description=event.short_description,
        start_date=_date(event.start_date),
        end_date=_date(event.end_date),
        location=event.location,
        event_type=event.event_type.value,
        price=str(event.price) if event.price is not None else "",
        registration_url=event.registration_url,
        image=media.resolve(event.featured_image),
        gallery=tuple(media.resolve(image) for image in event.gallery),
    )


def format_gallery_item(item: GalleryItem, media: MediaResolver) -> GalleryItemDisplay:
    return GalleryItemDisplay(
        id=item.id,
        title=item.title,
        description=item.description,
        category=item.category.value,
        image=media.resolve(item.image),
        tags=item.tags,
    )


def format_button(button: Button) -> ButtonDisplay:
    return ButtonDisplay(
        text=button.text,
        url=button.url,
        variant=button.variant.value,
        size=button.size.value,
        open_in_new_tab=button.open_in_new_tab,
    )


def format_hero_section(hero: HeroSection, media: MediaResolver) -> HeroSectionDisplay:
    buttons = (hero.primary_button, hero.secondary_button)
    return HeroSectionDisplay(
        title=hero.title,
        subtitle=hero.subtitle,
        background_image=media.resolve(hero.background_image),
        background_video=media.resolve(hero.background_video),
        buttons=tuple(format_button(button) for button in buttons if button is not None),
        features=hero.features,
    )
