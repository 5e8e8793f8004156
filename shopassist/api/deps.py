# shopassist/api/deps.py
from fastapi import Request
from shopassist.db.redis import get_redis
from shopassist.domain.repositories.product_store import ProductStore
from shopassist.domain.services.conversation import ConversationSessions

# Dependency for injecting the loaded product store into endpoints/services
def catalog_dep(request: Request) -> ProductStore:
    return request.app.state.catalog

# Dependency for injecting the chat session registry
def sessions_dep(request: Request) -> ConversationSessions:
    return request.app.state.sessions

# Dependency for injecting the Redis client into endpoints/services
def redis_dep():
    return get_redis()
