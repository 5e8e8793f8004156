"""
Scripted shopping-assistant conversation.

This is a quiz-like flow, not intent detection: each step expects its own
keywords, so the same message can produce different results depending only on
how many turns came before it. Steps without a rule always get the fallback
reply; the counter is never clamped or wrapped.
"""
from __future__ import annotations
import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from shopassist.domain.models.product import CategorizedProducts, ChatMessage, Product, RouterReply
from shopassist.domain.repositories.product_store import ProductStore
from shopassist.domain.services.ranking_svc import categorize, discounted

logger = logging.getLogger(__name__)

WELCOME_TEXT = (
    "Hi! I'm your shopping assistant. I can help you find products, get recommendations, "
    "and answer questions about our inventory. What are you looking for today?"
)
FALLBACK_TEXT = (
    "I'm here to help you find great products! Try asking about specific categories like "
    "clothing, beauty, electronics, or today's deals."
)

Results = Tuple[Optional[List[Product]], Optional[CategorizedProducts]]
Handler = Callable[[ProductStore, int], Results]


@dataclass(frozen=True)
class StepRule:
    keywords: Tuple[str, ...]
    text: str
    handler: Handler

    def matches(self, message: str) -> bool:
        s = message.lower()
        return any(k in s for k in self.keywords)


def _todays_deals(store: ProductStore, limit: int) -> Results:
    return discounted(store.all())[:limit], None


def _clothing_buckets(store: ProductStore, limit: int) -> Results:
    # exact category, same candidate set as categorize_query("clothing")
    return None, categorize([p for p in store.all() if p.category == "Clothing"])


def _lipsticks(store: ProductStore, limit: int) -> Results:
    return [p for p in store.all() if "lipstick" in p.title.lower()][:limit], None


STEP_RULES: Dict[int, StepRule] = {
    0: StepRule(
        keywords=("deal", "best", "today", "offer"),
        text=(
            "Here are today's best deals! I've found some amazing offers just for you. These are our "
            "top picks with the biggest savings and highest customer satisfaction."
        ),
        handler=_todays_deals,
    ),
    1: StepRule(
        keywords=("clothing", "clothes", "fashion", "apparel"),
        text=(
            "Great choice! I've organized our clothing collection into three categories to help you find "
            "exactly what you're looking for. Check out our hidden gems, value vault deals, and trending styles!"
        ),
        handler=_clothing_buckets,
    ),
    2: StepRule(
        keywords=("lipstick", "beauty", "makeup"),
        text=(
            "Perfect! Here are some amazing lipstick options for you. I've selected the best-rated and most "
            "popular lipsticks with great reviews and competitive prices."
        ),
        handler=_lipsticks,
    ),
}

QUICK_SUGGESTIONS = (
    "Show me today's deals",
    "Best deals",
    "Today's offers",
    "Clothing products",
    "Fashion items",
    "Lipstick options",
    "Beauty products",
)


class ConversationRouter:
    """
    Step-indexed state machine over STEP_RULES.

    respond() is the pure transition (step, message) -> reply; send() applies
    it to this conversation, records history and advances the step by one.
    """

    def __init__(
        self,
        store: ProductStore,
        *,
        rules: Optional[Dict[int, StepRule]] = None,
        result_limit: int = 5,
        step: int = 0,
    ):
        self.store = store
        self.rules = STEP_RULES if rules is None else rules
        self.result_limit = result_limit
        self.step = step
        self.history: List[ChatMessage] = []
        self._welcome()

    def _welcome(self) -> None:
        self.history = [ChatMessage(text=WELCOME_TEXT, is_user=False)]

    def respond(self, step: int, message: str) -> RouterReply:
        rule = self.rules.get(step)
        if rule is None or not message or not rule.matches(message):
            return RouterReply(text=FALLBACK_TEXT, step=step)
        products, categorized = rule.handler(self.store, self.result_limit)
        return RouterReply(text=rule.text, step=step, products=products, categorized=categorized)

    def send(self, message: str) -> RouterReply:
        """
        Handle one user message. Blank messages are ignored: they get the
        fallback text but are not recorded and do not advance the step.
        """
        if not message or not message.strip():
            return RouterReply(text=FALLBACK_TEXT, step=self.step)

        reply = self.respond(self.step, message)
        self.history.append(ChatMessage(text=message, is_user=True))
        self.history.append(
            ChatMessage(text=reply.text, is_user=False, products=reply.products, categorized=reply.categorized)
        )
        logger.info("chat step=%s matched=%s next_step=%s", self.step, reply.has_results, self.step + 1)
        self.step += 1
        return reply

    def reset(self) -> None:
        self.step = 0
        self._welcome()
        logger.info("chat reset")


class ConversationSessions:
    """
    In-memory registry of conversations keyed by session id.

    Bounded LRU: sending a message touches the session, and once more than
    `max_sessions` exist the least recently used one is evicted. Read-only
    lookups (peek) never create or touch a session.
    """

    def __init__(self, store: ProductStore, result_limit: int = 5, max_sessions: int = 1000):
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1")
        self.store = store
        self.result_limit = result_limit
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, ConversationRouter] = OrderedDict()

    def _new_router(self) -> ConversationRouter:
        return ConversationRouter(self.store, result_limit=self.result_limit)

    def get(self, session_id: str) -> ConversationRouter:
        """Existing session (marked as recently used) or a newly registered one."""
        router = self._sessions.get(session_id)
        if router is not None:
            self._sessions.move_to_end(session_id)
            return router

        router = self._new_router()
        self._sessions[session_id] = router
        logger.debug("chat session created id=%s", session_id)
        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("chat session evicted id=%s max_sessions=%s", evicted, self.max_sessions)
        return router

    def peek(self, session_id: str) -> ConversationRouter:
        """Existing session, or an unregistered router in the welcome state."""
        router = self._sessions.get(session_id)
        return router if router is not None else self._new_router()

    def reset(self, session_id: str) -> ConversationRouter:
        router = self._sessions.get(session_id)
        if router is None:
            return self._new_router()
        router.reset()
        return router

    def drop(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
