"""Static sample content shown when the CMS cannot be reached."""

from content.domain.models import Button, GalleryItem, HeroSection, Media, Testimonial
from content.domain.value_objects import ButtonVariant, GalleryCategory, Order, Rating


def _upload(media_id: int, path: str, name: str) -> Media:
    return Media(
        id=media_id,
        url=path,
        name=name,
        width=800,
        height=600,
        hash=f"hash{media_id}",
        ext=".png",
        mime="image/png",
        size=100,
        provider="local",
    )


FALLBACK_GALLERY_ITEMS: tuple[GalleryItem, ...] = (
    GalleryItem(
        id=1,
        title="Melbourne Dance Exchange 2023",
        image=_upload(1, "/lovable-uploads/08117ced-f7b0-4045-9bd4-3e5bd0309238.png", "dance1.png"),
        category=GalleryCategory.PERFORMANCE,
        featured=True,
        order=Order(1),
    ),
    GalleryItem(
        id=2,
        title="Ballet Class Excellence",
        image=_upload(2, "/lovable-uploads/f07ceee7-3742-4ddb-829b-9abae14d5a11.png", "dance2.png"),
        category=GalleryCategory.CLASS,
        featured=True,
        order=Order(2),
    ),
)

FALLBACK_TESTIMONIALS: tuple[Testimonial, ...] = (
    Testimonial(
        id=1,
        name="Sarah Chen",
        role="Parent of Emma, Age 8",
        content=(
            "The Academy of Dance has transformed my shy daughter into a confident performer. "
            "The teachers are exceptional and truly care about each child's progress."
        ),
        rating=Rating(5),
        featured=True,
        order=Order(1),
    ),
    Testimonial(
        id=2,
        name="Michael Tan",
        role="Parent of Lucas, Age 12",
        content=(
            "Outstanding instruction and facilities. My son has developed incredible discipline "
            "and artistry. The recitals are professionally produced and showcase real talent."
        ),
        rating=Rating(5),
        featured=True,
        order=Order(2),
    ),
    Testimonial(
        id=3,
        name="Priya Patel",
        role="Parent of Aria, Age 6",
        content=(
            "We've tried several dance schools, but none compare to the quality and care here. "
            "The trial class sold us immediately - it's worth every dollar."
        ),
        rating=Rating(5),
        featured=True,
        order=Order(3),
    ),
)

FALLBACK_HERO = HeroSection(
    id=0,
    title="The Academy of Dance",
    subtitle="Ballet, jazz and contemporary classes for every age and level.",
    primary_button=Button(text="Book a Trial Class", url="#contact"),
    secondary_button=Button(text="View Gallery", url="#gallery", variant=ButtonVariant.OUTLINE),
)
