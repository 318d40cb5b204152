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
    Pagination,
    Rating,
)

__all__ = [
    "Author",
    "BlogPost",
    "Button",
    "Category",
    "Event",
    "GalleryItem",
    "HeroSection",
    "Media",
    "SEO",
    "Tag",
    "Testimonial",
    "ButtonSize",
    "ButtonVariant",
    "EventType",
    "GalleryCategory",
    "Money",
    "Order",
    "Pagination",
    "Rating",
]
