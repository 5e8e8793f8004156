"""
Unit tests for the step-indexed shopping assistant conversation.
"""
import asyncio

import pytest

from shopassist.domain.services.conversation import (
    FALLBACK_TEXT,
    STEP_RULES,
    WELCOME_TEXT,
    ConversationRouter,
    ConversationSessions,
    StepRule,
)
from shopassist.domain.repositories.product_store import ProductStore
from shopassist.domain.services.recommend_svc import categorize_query

DEALS = "show me today's deals"


@pytest.fixture
def router(seed_store):
    return ConversationRouter(seed_store)


class TestStepTable:

    def test_step_zero_deals(self, router):
        reply = router.send(DEALS)
        assert reply.step == 0
        assert reply.has_results
        assert reply.text == STEP_RULES[0].text
        assert [p.product_id for p in reply.products] == [
            "beauty_001", "beauty_002", "beauty_003", "beauty_004", "beauty_005",
        ]
        assert reply.categorized is None
        assert router.step == 1

    def test_step_one_clothing_buckets(self, router):
        router.send(DEALS)
        reply = router.send("any clothing?")
        assert reply.products is None
        assert [p.product_id for p in reply.categorized.trending_now] == [
            "clothing_002", "clothing_001", "clothing_004",
        ]
        assert router.step == 2

    def test_step_two_lipsticks(self, router):
        router.send(DEALS)
        router.send("fashion please")
        reply = router.send("lipstick")
        assert [p.product_id for p in reply.products] == ["beauty_004", "beauty_010"]

    def test_keywords_are_per_step(self, router):
        # a step-1 keyword at step 0 does not match
        reply = router.send("clothing")
        assert reply.text == FALLBACK_TEXT
        assert not reply.has_results
        # the step still advanced, so the same word now matches
        assert router.send("clothing").has_results

    def test_unmatched_message_still_advances(self, router):
        router.send("hello")
        assert router.step == 1

    def test_beyond_table_is_fallback_only(self, seed_store):
        router = ConversationRouter(seed_store, step=5)
        reply = router.send(DEALS)
        assert reply.text == FALLBACK_TEXT
        assert reply.products is None and reply.categorized is None
        assert router.step == 6

    def test_step_zero_vs_step_five(self, seed_store):
        assert ConversationRouter(seed_store).respond(0, DEALS).has_results
        assert not ConversationRouter(seed_store).respond(5, DEALS).has_results

    def test_case_insensitive_keywords(self, router):
        assert router.send("TODAY'S OFFERS").has_results

    def test_result_limit(self, seed_store):
        router = ConversationRouter(seed_store, result_limit=2)
        assert len(router.send(DEALS).products) == 2

    def test_custom_rules(self, seed_store, make_product):
        item = make_product("only")
        rules = {0: StepRule(keywords=("ping",), text="pong", handler=lambda store, limit: ([item], None))}
        router = ConversationRouter(seed_store, rules=rules)
        reply = router.send("ping")
        assert reply.text == "pong"
        assert reply.products == [item]


class TestHistory:

    def test_starts_with_welcome(self, router):
        assert len(router.history) == 1
        assert router.history[0].text == WELCOME_TEXT
        assert not router.history[0].is_user

    def test_records_user_and_bot_messages(self, router):
        router.send(DEALS)
        assert [m.is_user for m in router.history] == [False, True, False]
        assert router.history[1].text == DEALS
        assert router.history[2].products

    @pytest.mark.parametrize("message", ["", "   ", "\n"])
    def test_blank_message_is_ignored(self, router, message):
        reply = router.send(message)
        assert reply.text == FALLBACK_TEXT
        assert router.step == 0
        assert len(router.history) == 1

    def test_reset(self, router):
        router.send(DEALS)
        router.send("clothes")
        router.reset()
        assert router.step == 0
        assert len(router.history) == 1
        assert router.send(DEALS).has_results


class TestSessions:

    def test_sessions_are_independent(self, seed_store):
        sessions = ConversationSessions(seed_store)
        sessions.get("a").send(DEALS)
        assert sessions.get("a").step == 1
        assert sessions.get("b").step == 0
        assert len(sessions) == 2

    def test_reset_and_drop(self, seed_store):
        sessions = ConversationSessions(seed_store, result_limit=3)
        sessions.get("a").send("hi")
        assert sessions.reset("a").step == 0
        assert sessions.get("a").result_limit == 3
        assert sessions.drop("a") is True
        assert sessions.drop("a") is False
        assert len(sessions) == 0

    def test_lookups_do_not_register(self, seed_store):
        sessions = ConversationSessions(seed_store)
        assert sessions.peek("ghost").history[0].text == WELCOME_TEXT
        assert sessions.reset("ghost").step == 0
        assert "ghost" not in sessions
        assert len(sessions) == 0

    def test_peek_returns_live_session(self, seed_store):
        sessions = ConversationSessions(seed_store)
        sessions.get("a").send(DEALS)
        assert sessions.peek("a").step == 1

    def test_least_recently_used_is_evicted(self, seed_store):
        sessions = ConversationSessions(seed_store, max_sessions=2)
        sessions.get("a").send(DEALS)
        sessions.get("b")
        sessions.get("a")  # touch: "b" is now the oldest
        sessions.get("c")
        assert len(sessions) == 2
        assert "b" not in sessions
        assert "a" in sessions and "c" in sessions
        assert sessions.peek("a").step == 1

    def test_cap_must_be_positive(self, seed_store):
        with pytest.raises(ValueError):
            ConversationSessions(seed_store, max_sessions=0)


class TestClothingStep:

    def test_exact_category_like_categorize_query(self):
        seed = [
            {"product_id": "shirt", "title": "Tee", "brand": "B", "price": "$10", "category": "Clothing",
             "categories": ["Clothing", "Tops"], "rating": 4.0, "review_count": 60},
            # lives under the clothing path but is categorized as Shoes
            {"product_id": "sneaker", "title": "Runner", "brand": "B", "price": "$90", "category": "Shoes",
             "categories": ["Clothing", "Footwear"], "rating": 4.9, "review_count": 900},
        ]
        store = ProductStore(seed)
        asyncio.run(store.load())

        reply = ConversationRouter(store, step=1).send("clothing")
        assert [p.product_id for p in reply.categorized.trending_now] == ["shirt"]
        assert reply.categorized == categorize_query(store, "clothing")
