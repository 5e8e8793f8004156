from fastapi import FastAPI
from shopassist.core.config import get_settings
from shopassist.core.lifespan import lifespan
from shopassist.api.v1.routers.products import router as products_router
from shopassist.api.v1.routers.health import router as health_router
from shopassist.api.v1.routers.recommendations import router as recommendations_router
from shopassist.api.v1.routers.chat import router as chat_router
from shopassist.api.v1.routers.catalog import router as catalog_router
from shopassist.core.logging import configure_logging

from fastapi.middleware.cors import CORSMiddleware
import logging, os

settings = get_settings()
configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# ------- CORS -------
# ALLOWED_ORIGINS is a CSV list, e.g. "https://shop.example.com,https://m.shop.example.com"
allowed_origins_env = os.getenv("ALLOWED_ORIGINS", "")
allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=86400,
)

# ------- Routes -------
app.include_router(health_router)
app.include_router(products_router, prefix=settings.api_prefix)          # browse, search, categories, tags
app.include_router(recommendations_router, prefix=settings.api_prefix)   # top rated, buckets, deals
app.include_router(chat_router, prefix=settings.api_prefix)              # scripted assistant
app.include_router(catalog_router, prefix=settings.api_prefix)           # cache maintenance
