"""Integration tests for the page endpoints.

The CMS is replaced by a fake transport; each test checks what a page
receives when sources succeed, fail, or match nothing.
Run with: pytest tests/test_views.py -v
"""

import requests
from payloads import blog_post, collection, entity, event, gallery_item, review_entity, single
from rest_framework.test import APIClient

from content.domain.errors import TransportError

HOST = "https://cms.example.com"


class TestHealth:
    def test_health_check(self, api_client: APIClient):
        response = api_client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestBlogPage:
    """Tests for GET /api/blog"""

    def test_all_sources_loaded(self, api_client: APIClient, cms):
        cms.responses.update(
            {
                "blog-posts": collection(
                    blog_post(1, "first-steps"),
                    pagination={"page": 1, "pageSize": 10, "pageCount": 1, "total": 1},
                ),
                "categories": collection(
                    entity(1, name="Technique", slug="technique", color="#a00", blog_posts=3)
                ),
                "authors": collection(entity(2, name="Jane Doe", slug="jane-doe")),
                "tags": collection(entity(3, name="Ballet", slug="ballet", color="#000")),
            }
        )

        body = api_client.get("/api/blog").json()

        post = body["posts"]["data"][0]
        assert body["posts"]["state"] == "success"
        assert body["posts"]["pagination"]["total"] == 1
        assert post["author"] == "Jane Doe"
        assert post["image"] == f"{HOST}/uploads/post1.jpg"
        assert post["tags"] == ["Ballet", "Tips"]
        assert body["categories"]["data"][0]["post_count"] == 3
        assert body["authors"]["data"][0]["avatar"] == ""
        assert body["tags"]["data"][0]["slug"] == "ballet"
        assert ("pagination[pageSize]", "10") in cms.params_for("blog-posts")

    def test_one_failed_source_only_flags_itself(self, api_client: APIClient, cms):
        cms.responses.update(
            {
                "blog-posts": collection(blog_post(1, "first-steps")),
                "categories": collection(entity(1, name="Technique", slug="technique")),
                "authors": TransportError("CMS returned 500", status=500),
                "tags": collection(entity(3, name="Ballet", slug="ballet")),
            }
        )

        response = api_client.get("/api/blog")

        body = response.json()
        assert response.status_code == 200
        assert body["authors"] == {"state": "failure", "error": "Failed to load authors", "data": []}
        for name in ("posts", "categories", "tags"):
            assert body[name]["state"] == "success"
            assert body[name]["error"] is None
            assert len(body[name]["data"]) == 1

    def test_every_cms_session_is_closed(self, api_client: APIClient, monkeypatch, settings):
        settings.STRAPI_URL = HOST
        sessions = []

        class RefusingSession:
            def __init__(self):
                self.headers = {}
                self.closed = False
                sessions.append(self)

            def get(self, url, params=None, timeout=None):
                raise requests.ConnectionError("refused")

            def close(self):
                self.closed = True

        monkeypatch.setattr("content.transport.http_client.requests.Session", RefusingSession)

        body = api_client.get("/api/blog").json()

        assert body["posts"]["state"] == "failure"
        assert len(sessions) == 4
        assert all(session.closed for session in sessions)

    def test_each_source_gets_its_own_client(self, api_client: APIClient, cms):
        api_client.get("/api/blog")

        assert len(cms.calls) == 4
        assert cms.closed == 4

    def test_invalid_page_size(self, api_client: APIClient, cms):
        response = api_client.get("/api/blog", {"page_size": 0})

        assert response.status_code == 400


class TestBlogScopedList:
    def test_posts_by_category(self, api_client: APIClient, cms):
        cms.responses["blog-posts"] = collection(blog_post(1, "first-steps"))

        body = api_client.get("/api/blog/category/technique").json()

        assert body["scope"] == "category"
        assert [p["slug"] for p in body["posts"]["data"]] == ["first-steps"]
        assert ("filters[category][slug][$eq]", "technique") in cms.params_for("blog-posts")

    def test_unknown_scope_is_not_routed(self, api_client: APIClient, cms):
        assert api_client.get("/api/blog/series/intro").status_code == 404


class TestBlogPostDetail:
    """Tests for GET /api/blog/posts/{slug}"""

    def test_post_with_related_posts(self, api_client: APIClient, cms):
        cms.responses["blog-posts"] = collection(blog_post(1, "first-steps"))

        body = api_client.get("/api/blog/posts/first-steps").json()

        assert body["post"]["slug"] == "first-steps"
        assert body["related"]["state"] == "success"
        assert ("filters[id][$ne]", "1") in cms.params_for("blog-posts")

    def test_post_not_found(self, api_client: APIClient, cms):
        cms.responses["blog-posts"] = collection()

        response = api_client.get("/api/blog/posts/my-post")

        assert response.status_code == 404
        assert response.json()["code"] == "CONTENT_NOT_FOUND"

    def test_fetch_failure_is_distinct_from_not_found(self, api_client: APIClient, cms):
        cms.responses["blog-posts"] = TransportError("timeout")

        response = api_client.get("/api/blog/posts/my-post")

        assert response.status_code == 502
        assert response.json() == {
            "code": "TRANSPORT_ERROR",
            "message": "Content server unavailable",
        }


class TestReviews:
    def test_featured_testimonials(self, api_client: APIClient, cms):
        cms.responses["testimonials"] = collection(review_entity(1, order=1))

        body = api_client.get("/api/reviews").json()

        assert body["state"] == "success"
        assert [t["name"] for t in body["data"]] == ["Parent 1"]

    def test_fallback_reviews(self, api_client: APIClient, cms):
        body = api_client.get("/api/reviews").json()

        assert body["state"] == "failure"
        assert body["error"] == "Failed to load testimonials"
        assert [t["name"] for t in body["data"]] == ["Sarah Chen", "Michael Tan", "Priya Patel"]


class TestGallery:
    """Tests for GET /api/gallery"""

    def test_featured_gallery(self, api_client: APIClient, cms):
        cms.responses["gallery-items"] = collection(
            gallery_item(1, order=1), gallery_item(2, order=2, url="https://img.example.com/2.jpg")
        )

        body = api_client.get("/api/gallery").json()

        assert [i["image"] for i in body["data"]] == [
            f"{HOST}/uploads/photo1.jpg",
            "https://img.example.com/2.jpg",
        ]
        assert body["modal"] is None

    def test_fallback_gallery(self, api_client: APIClient, cms):
        body = api_client.get("/api/gallery").json()

        assert body["error"] == "Failed to load gallery"
        assert [i["title"] for i in body["data"]] == [
            "Melbourne Dance Exchange 2023",
            "Ballet Class Excellence",
        ]

    def test_modal_next_wraps_over_fallback(self, api_client: APIClient, cms):
        body = api_client.get("/api/gallery", {"open": 1, "step": "next"}).json()

        assert body["modal"]["index"] == 0
        assert body["modal"]["counter"] == "1 / 2"
        assert body["modal"]["item"]["title"] == "Melbourne Dance Exchange 2023"
        assert body["modal"]["has_navigation"] is True

    def test_modal_previous_wraps_over_fallback(self, api_client: APIClient, cms):
        body = api_client.get("/api/gallery", {"open": 0, "step": "previous"}).json()

        assert body["modal"]["index"] == 1
        assert body["modal"]["item"]["title"] == "Ballet Class Excellence"

    def test_modal_open_out_of_range(self, api_client: APIClient, cms):
        assert api_client.get("/api/gallery", {"open": 5}).status_code == 400


class TestHero:
    def test_hero_section(self, api_client: APIClient, cms):
        cms.responses["hero-section"] = single(
            entity(1, title="Dance with us", primaryButton={"id": 1, "text": "Book"})
        )

        body = api_client.get("/api/hero").json()

        assert body["data"]["title"] == "Dance with us"
        assert [b["text"] for b in body["data"]["buttons"]] == ["Book"]
        assert body["sample"] is False

    def test_fallback_hero(self, api_client: APIClient, cms):
        body = api_client.get("/api/hero").json()

        assert body["state"] == "failure"
        assert body["data"]["title"] == "The Academy of Dance"
        assert body["sample"] is True

    def test_unset_hero_is_reported_as_sample(self, api_client: APIClient, cms):
        cms.responses["hero-section"] = single(None)

        body = api_client.get("/api/hero").json()

        assert body["state"] == "success"
        assert body["error"] is None
        assert body["sample"] is True
        assert body["data"]["title"] == "The Academy of Dance"


class TestEvents:
    """Tests for GET /api/events"""

    def test_upcoming_events(self, api_client: APIClient, cms):
        cms.responses["events"] = collection(event(1, "gala", price=20))

        body = api_client.get("/api/events", {"upcoming": "true", "limit": 3}).json()

        params = cms.params_for("events")
        assert any(key == "filters[startDate][$gte]" for key, _ in params)
        assert ("pagination[pageSize]", "3") in params
        assert body["data"][0]["price"] == "20.00"
        assert body["data"][0]["event_type"] == "recital"

    def test_invalid_event_type(self, api_client: APIClient, cms):
        assert api_client.get("/api/events", {"type": "rave"}).status_code == 400

    def test_event_failure_falls_back_to_empty_list(self, api_client: APIClient, cms):
        body = api_client.get("/api/events").json()

        assert body == {"state": "failure", "error": "Failed to load events", "data": []}

    def test_event_detail(self, api_client: APIClient, cms):
        cms.responses["events"] = collection(event(1, "gala"))

        body = api_client.get("/api/events/gala").json()

        assert body["slug"] == "gala"
        assert body["start_date"] == "2030-06-01T18:00:00+00:00"

    def test_event_detail_not_found(self, api_client: APIClient, cms):
        cms.responses["events"] = collection()

        assert api_client.get("/api/events/nope").status_code == 404
