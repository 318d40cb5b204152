"""Serializers for query parameters and display records."""

from rest_framework import serializers

from content.domain.value_objects import EventType


class BlogPageQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=1, required=False)
    page_size = serializers.IntegerField(min_value=1, max_value=100, default=10)


class GalleryQuerySerializer(serializers.Serializer):
    open = serializers.IntegerField(min_value=0, required=False)
    step = serializers.ChoiceField(choices=["next", "previous"], required=False)


class EventQuerySerializer(serializers.Serializer):
    upcoming = serializers.BooleanField(default=False)
    featured = serializers.BooleanField(default=False)
    type = serializers.ChoiceField(choices=[t.value for t in EventType], required=False)
    limit = serializers.IntegerField(min_value=1, max_value=100, required=False)


class PaginationSerializer(serializers.Serializer):
    page = serializers.IntegerField()
    page_size = serializers.IntegerField()
    page_count = serializers.IntegerField()
    total = serializers.IntegerField()


class BlogPostDisplaySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    slug = serializers.CharField()
    title = serializers.CharField()
    excerpt = serializers.CharField()
    content = serializers.CharField()
    author = serializers.CharField()
    date = serializers.CharField()
    read_time = serializers.CharField()
    category = serializers.CharField()
    category_slug = serializers.CharField()
    tags = serializers.ListField(child=serializers.CharField())
    image = serializers.CharField()


class CategoryDisplaySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    slug = serializers.CharField()
    color = serializers.CharField()
    post_count = serializers.IntegerField()


class AuthorDisplaySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    slug = serializers.CharField()
    bio = serializers.CharField()
    avatar = serializers.CharField()
    post_count = serializers.IntegerField()


class TagDisplaySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    slug = serializers.CharField()
    color = serializers.CharField()


class TestimonialDisplaySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    role = serializers.CharField()
    content = serializers.CharField()
    rating = serializers.IntegerField()
    avatar = serializers.CharField()


class EventDisplaySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    slug = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    short_description = serializers.CharField()
    start_date = serializers.CharField()
    end_date = serializers.CharField()
    location = serializers.CharField()
    event_type = serializers.CharField()
    price = serializers.CharField()
    registration_url = serializers.CharField()
    image = serializers.CharField()
    gallery = serializers.ListField(child=serializers.CharField())


class GalleryItemDisplaySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField()
    description = serializers.CharField()
    category = serializers.CharField()
    image = serializers.CharField()
    tags = serializers.ListField(child=serializers.CharField())


class ButtonDisplaySerializer(serializers.Serializer):
    text = serializers.CharField()
    url = serializers.CharField()
    variant = serializers.CharField()
    size = serializers.CharField()
    open_in_new_tab = serializers.BooleanField()


class HeroSectionDisplaySerializer(serializers.Serializer):
    title = serializers.CharField()
    subtitle = serializers.CharField()
    background_image = serializers.CharField()
    background_video = serializers.CharField()
    buttons = ButtonDisplaySerializer(many=True)
    features = serializers.ListField(child=serializers.CharField())
