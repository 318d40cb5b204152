"""Homepage service - hero section, testimonials, events and gallery."""

from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from content.domain.models import Event, GalleryItem, HeroSection, Testimonial
from content.domain.value_objects import EventType, GalleryCategory
from content.services import mappers
from content.transport.interfaces import Transport
from content.transport.normalizer import normalize_collection, normalize_single
from content.transport.query import FilterOperator, Query, SortDirection


class HomepageService:
    """Service for homepage sections."""

    def __init__(self, transport: Transport, clock: Callable[[], datetime] = timezone.now) -> None:
        self._transport = transport
        self._clock = clock

    def get_hero_section(self) -> HeroSection | None:
        query = (
            Query()
            .populate("backgroundImage")
            .populate("backgroundVideo")
            .populate("primaryButton")
            .populate("secondaryButton")
        )
        record = normalize_single(self._transport.get("hero-section", query.params()))
        return mappers.to_hero_section(record) if record else None

    def get_testimonials(self, featured: bool = False) -> list[Testimonial]:
        """Return testimonials in manual order, newest first on ties."""
        query = Query().populate("avatar")
        if featured:
            query.where("featured", value=True)
        query.sort("order").sort("createdAt", SortDirection.DESC)
        response = self._transport.get("testimonials", query.params())
        return [mappers.to_testimonial(record) for record in normalize_collection(response)]

    def _event_query(self) -> Query:
        return Query().populate("featuredImage").populate("gallery")

    def get_events(
        self,
        featured: bool = False,
        upcoming: bool = False,
        event_type: EventType | str | None = None,
        limit: int | None = None,
    ) -> list[Event]:
        """Return events ordered by start date."""
        query = self._event_query()
        if featured:
            query.where("featured", value=True)
        if upcoming:
            query.where("startDate", op=FilterOperator.GTE, value=self._clock())
        if event_type:
            query.where("eventType", value=EventType(event_type))
        query.paginate(page_size=limit)
        query.sort("startDate")
        response = self._transport.get("events", query.params())
        return [mappers.to_event(record) for record in normalize_collection(response)]

    def get_event_by_slug(self, slug: str) -> Event | None:
        query = self._event_query().where("slug", value=slug)
        records = normalize_collection(self._transport.get("events", query.params()))
        return mappers.to_event(records[0]) if records else None

    def get_gallery_items(
        self,
        featured: bool = False,
        category: GalleryCategory | str | None = None,
        limit: int | None = None,
    ) -> list[GalleryItem]:
        query = Query().populate("image")
        if featured:
            query.where("featured", value=True)
        if category:
            query.where("category", value=GalleryCategory(category))
        query.paginate(page_size=limit)
        query.sort("order").sort("createdAt", SortDirection.DESC)
        response = self._transport.get("gallery-items", query.params())
        return [mappers.to_gallery_item(record) for record in normalize_collection(response)]

    def get_upcoming_events(self, limit: int = 3) -> list[Event]:
        return self.get_events(upcoming=True, limit=limit)

    def get_featured_events(self, limit: int = 6) -> list[Event]:
        return self.get_events(featured=True, limit=limit)

    def get_featured_gallery_items(self, limit: int = 6) -> list[GalleryItem]:
        return self.get_gallery_items(featured=True, limit=limit)

    def get_featured_testimonials(self) -> list[Testimonial]:
        return self.get_testimonials(featured=True)
