"""Blog service - queries for posts, categories, authors and tags.

Services:
- Depend only on the Transport interface
- Build queries, never catch transport errors
- Return typed domain models
"""

from content.domain.models import Author, BlogPost, Category, Tag
from content.services import mappers
from content.services.page import Page
from content.transport.interfaces import Transport
from content.transport.normalizer import normalize_collection, pagination_from_meta
from content.transport.query import FilterOperator, Query, SortDirection

POSTS_PATH = "blog-posts"


class BlogService:
    """Service for blog content."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _post_query(self) -> Query:
        return (
            Query()
            .populate("featuredImage")
            .populate("category")
            .populate("author", "avatar")
            .populate("tags")
            .populate("seo", "ogImage")
        )

    def _fetch_posts(self, query: Query) -> Page[BlogPost]:
        response = self._transport.get(POSTS_PATH, query.params())
        return Page(
            items=[mappers.to_blog_post(record) for record in normalize_collection(response)],
            pagination=pagination_from_meta(response),
        )

    def get_posts_page(
        self,
        page: int | None = None,
        page_size: int | None = None,
        category: str | None = None,
        author: str | None = None,
        tag: str | None = None,
        featured: bool | None = None,
        slug: str | None = None,
    ) -> Page[BlogPost]:
        """Return one page of posts, newest first.

        ``category``, ``author`` and ``tag`` are slugs of the related record.
        """
        query = self._post_query().paginate(page, page_size)
        if slug is not None:
            query.where("slug", value=slug)
        if category:
            query.where("category", "slug", value=category)
        if author:
            query.where("author", "slug", value=author)
        if tag:
            query.where("tags", "slug", value=tag)
        if featured is not None:
            query.where("featured", value=featured)
        query.sort("publishDate", SortDirection.DESC)
        return self._fetch_posts(query)

    def get_all_posts(self, **params) -> list[BlogPost]:
        return self.get_posts_page(**params).items

    def get_post_by_slug(self, slug: str) -> BlogPost | None:
        """Return the post with ``slug``, or None when nothing matches."""
        posts = self.get_all_posts(slug=slug)
        return posts[0] if posts else None

    def get_categories(self) -> list[Category]:
        query = Query().populate_count("blog_posts").sort("name")
        response = self._transport.get("categories", query.params())
        return [mappers.to_category(record) for record in normalize_collection(response)]

    def get_authors(self) -> list[Author]:
        query = Query().populate("avatar").populate_count("blog_posts").sort("name")
        response = self._transport.get("authors", query.params())
        return [mappers.to_author(record) for record in normalize_collection(response)]

    def get_tags(self) -> list[Tag]:
        query = Query().populate_count("blog_posts").sort("name")
        response = self._transport.get("tags", query.params())
        return [mappers.to_tag(record) for record in normalize_collection(response)]

    def get_posts_by_category(
        self, category_slug: str, page: int | None = None, page_size: int | None = None
    ) -> list[BlogPost]:
        return self.get_all_posts(category=category_slug, page=page, page_size=page_size)

    def get_posts_by_author(
        self, author_slug: str, page: int | None = None, page_size: int | None = None
    ) -> list[BlogPost]:
        return self.get_all_posts(author=author_slug, page=page, page_size=page_size)

    def get_posts_by_tag(
        self, tag_slug: str, page: int | None = None, page_size: int | None = None
    ) -> list[BlogPost]:
        return self.get_all_posts(tag=tag_slug, page=page, page_size=page_size)

    def get_related_posts(self, post_id: int, category_slug: str, limit: int = 3) -> list[BlogPost]:
        """Return up to ``limit`` other posts from the same category."""
        query = (
            Query()
            .where("category", "slug", value=category_slug)
            .where("id", op=FilterOperator.NE, value=post_id)
            .paginate(page_size=limit)
            .populate("featuredImage")
            .populate("category")
            .populate("author")
            .sort("publishDate", SortDirection.DESC)
        )
        return self._fetch_posts(query).items
