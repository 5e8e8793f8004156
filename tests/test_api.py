"""
HTTP tests: the FastAPI app with its real lifespan (seed catalog, optional fake Redis).
"""
import pytest
from fastapi.testclient import TestClient

from shopassist.core.config import get_settings
from shopassist.db import redis as redis_db


@pytest.fixture
def no_redis_env(monkeypatch):
    monkeypatch.setenv("REDIS_URL", "")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client(no_redis_env):
    from shopassist.main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture
def client_with_redis(no_redis_env, monkeypatch, fake_redis):
    from shopassist.main import app

    async def _connect(url):
        redis_db.redis_client = fake_redis
        return fake_redis

    monkeypatch.setattr(redis_db, "connect", _connect)
    with TestClient(app) as c:
        yield c, fake_redis


def ids(payload):
    return [p["product_id"] for p in payload["items"]]


class TestHealth:

    def test_health_without_redis(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        body = r.json()
        assert body["status"] == "ok"
        assert body["checks"]["catalog"] == "ok"
        assert body["checks"]["catalog_size"] == 58
        assert body["checks"]["catalog_source"] == "seed"
        assert body["checks"]["redis"] == "skipped"

    def test_health_with_redis(self, client_with_redis):
        client, fake = client_with_redis
        body = client.get("/health").json()
        assert body["checks"]["redis"] == "ok"
        # seed was written back to the cache on startup
        assert get_settings().catalog_cache_key in fake.data

    def test_health_reports_redis_errors(self, client_with_redis):
        client, fake = client_with_redis
        fake.fail_on.add("ping")
        body = client.get("/health").json()
        assert body["status"] == "error"
        assert body["checks"]["redis"].startswith("error")

    def test_malformed_redis_url_falls_back_to_seed(self, monkeypatch, no_redis_env):
        monkeypatch.setenv("REDIS_URL", "not-a-redis-url")
        get_settings.cache_clear()
        from shopassist.main import app
        with TestClient(app) as client:
            body = client.get("/health").json()
        assert body["status"] == "ok"
        assert body["checks"]["catalog_source"] == "seed"
        assert body["checks"]["redis"] == "skipped"


class TestProducts:

    def test_list_all_sorted_by_id(self, client):
        body = client.get("/api/products").json()
        assert body["count"] == 58
        assert ids(body) == sorted(ids(body))

    def test_category_and_tags(self, client):
        r = client.get("/api/products", params={"category": "Clothing", "tag": ["Comfortable", "running"]})
        # tags are matched exactly against lowercase stored tags
        assert ids(r.json()) == []
        r = client.get("/api/products", params={"category": "Clothing", "tag": ["comfortable", "running"]})
        assert ids(r.json()) == ["clothing_003", "clothing_013"]

    def test_search_overrides_category(self, client):
        r = client.get("/api/products", params={"category": "Home", "q": "running shoes"})
        assert ids(r.json()) == ["clothing_003", "clothing_013", "sports_001", "sports_010"]

    def test_columns(self, client):
        body = client.get("/api/products", params={"category": "Electronics", "columns": True}).json()
        assert body["count"] == 10
        assert len(body["left"]) == 5 and len(body["right"]) == 5
        assert body["left"][0]["product_id"] == "electronics_001"
        assert body["right"][0]["product_id"] == "electronics_002"

    def test_get_product(self, client):
        r = client.get("/api/products/beauty_004")
        assert r.status_code == 200
        assert r.json()["tags"] == ["lipstick", "long-wearing", "creamy", "color"]

    def test_get_product_404(self, client):
        assert client.get("/api/products/nope").status_code == 404

    def test_categories(self, client):
        items = client.get("/api/categories").json()["items"]
        assert items[0] == {"name": "All", "count": 58}
        assert [i["name"] for i in items[1:]] == ["Beauty", "Clothing", "Electronics", "Home", "Sports"]

    def test_tags(self, client):
        body = client.get("/api/tags").json()
        assert body["items"] == sorted(body["items"])
        assert "lipstick" in body["items"]

    def test_classify(self, client):
        body = client.get("/api/classify", params={"label": "Women's Running Shoes"}).json()
        assert body == {"label": "Women's Running Shoes", "category": "Shoes", "gender": "Women", "is_clothing": True}

    def test_classify_requires_label(self, client):
        assert client.get("/api/classify").status_code == 422


class TestRecommendations:

    def test_top_rated(self, client):
        body = client.get("/api/recommendations/top-rated", params={"limit": 3}).json()
        assert ids(body) == ["electronics_002", "home_010", "sports_004"]
        assert client.get("/api/recommendations/top-rated").json()["count"] == 10

    def test_best_sellers(self, client):
        body = client.get("/api/recommendations/best-sellers", params={"category": "Beauty"}).json()
        assert ids(body) == ["beauty_006", "beauty_013", "beauty_005", "beauty_010", "beauty_007"]

    def test_discounted_not_truncated(self, client):
        assert client.get("/api/recommendations/discounted").json()["count"] == 58

    def test_on_sale(self, client):
        assert client.get("/api/recommendations/on-sale").json()["count"] == 58

    def test_delivery_and_pickup(self, client):
        delivery = client.get("/api/recommendations/delivery").json()
        pickup = client.get("/api/recommendations/pickup").json()
        assert delivery["count"] == 58
        assert pickup["count"] == 40

    def test_categorized_by_category(self, client):
        body = client.get("/api/recommendations/categorized", params={"category": "Clothing"}).json()
        assert body["category"] == "Clothing"
        trending = [p["product_id"] for p in body["buckets"]["trending_now"]]
        assert trending == ["clothing_002", "clothing_001", "clothing_004"]

    def test_categorized_by_query(self, client):
        body = client.get("/api/recommendations/categorized", params={"q": "tech gadgets"}).json()
        assert body["category"] == "Electronics"
        gems = [p["product_id"] for p in body["buckets"]["hidden_gems"]]
        assert gems == ["electronics_002", "electronics_001", "electronics_004"]

    def test_relevant(self, client):
        body = client.get("/api/recommendations/relevant", params={"q": "ultraboost"}).json()
        assert ids(body) == ["clothing_003", "sports_010"]

    def test_ask_category_question(self, client):
        body = client.get("/api/recommendations/ask", params={"q": "show me fashion"}).json()
        assert body["products"] is None
        assert body["categorized"]["category"] == "Clothing"
        assert body["categorized"]["titles"]["value_vault"] == "Value Vault"
        assert len(body["categorized"]["buckets"]["trending_now"]) == 3

    def test_ask_flat_list(self, client):
        body = client.get("/api/recommendations/ask", params={"q": "ultraboost"}).json()
        assert body["categorized"] is None
        assert [p["product_id"] for p in body["products"]] == ["clothing_003", "sports_010"]


class TestChat:

    def test_suggestions(self, client):
        assert "Show me today's deals" in client.get("/api/chat/suggestions").json()["items"]

    def test_scripted_flow(self, client):
        r = client.post("/api/chat/s1/messages", json={"text": "show me today's deals"})
        assert r.status_code == 200
        body = r.json()
        assert body["step"] == 0
        assert len(body["products"]) == 5

        body = client.post("/api/chat/s1/messages", json={"text": "clothing"}).json()
        assert body["step"] == 1
        assert body["products"] is None
        assert len(body["categorized"]["hidden_gems"]) == 3

        history = client.get("/api/chat/s1/history").json()
        assert history["step"] == 2
        assert len(history["messages"]) == 5

    def test_sessions_are_isolated(self, client):
        client.post("/api/chat/a/messages", json={"text": "hello"})
        # session b is still at step 0, so the deals keyword matches
        body = client.post("/api/chat/b/messages", json={"text": "today's deals"}).json()
        assert body["products"]

    def test_reset(self, client):
        client.post("/api/chat/s2/messages", json={"text": "hello"})
        body = client.post("/api/chat/s2/reset").json()
        assert body["step"] == 0
        assert len(body["messages"]) == 1

    def test_history_of_unknown_session_is_read_only(self, client):
        for i in range(20):
            body = client.get(f"/api/chat/s{i}/history").json()
            assert body["step"] == 0
            assert len(body["messages"]) == 1
        client.post("/api/chat/ghost/reset")
        assert len(client.app.state.sessions) == 0

    def test_session_cap_from_settings(self, monkeypatch, no_redis_env):
        monkeypatch.setenv("chat_max_sessions", "3")
        get_settings.cache_clear()
        from shopassist.main import app
        with TestClient(app) as client:
            for i in range(5):
                client.post(f"/api/chat/u{i}/messages", json={"text": "hello"})
            sessions = client.app.state.sessions
            assert len(sessions) == 3
            assert "u0" not in sessions and "u4" in sessions

    def test_message_validation(self, client):
        assert client.post("/api/chat/s3/messages", json={}).status_code == 422
        assert client.post("/api/chat/s3/messages", json={"text": "x" * 2001}).status_code == 422


class TestCatalogCache:

    def test_clear_without_redis(self, client):
        assert client.post("/api/catalog/cache/clear").json() == {"cleared": False}

    def test_clear_with_redis(self, client_with_redis):
        client, fake = client_with_redis
        assert client.post("/api/catalog/cache/clear").json() == {"cleared": True}
        assert fake.data == {}
