"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
import os
from functools import lru_cache
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from supabase import create_client

from backend.settings import Settings, get_settings
from services.gear_catalog import GearDefinitionCache

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    app = FastAPI(
        title="Adaptive Workout Engine",
        description="Adaptive exercise selection and skill progression API",
        version="1.0.0",
    )

    app.state.settings = settings
    app.state.gear_cache = _build_gear_cache(settings)

    _configure_cors(app)
    _include_routers(app)
    _log_feature_flags(settings)

    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
            profiles_sample_rate=0.1,
        )
        logger.info("Sentry initialized for workout-engine")


def _build_gear_cache(settings: Settings) -> GearDefinitionCache:
    """
    Build the process-wide gear cache.

    Without database credentials the cache loads empty lists, and gear
    labels fall back to built-in keyword labels.
    """
    if not settings.supabase_url or not settings.supabase_key:
        logger.warning("Supabase not configured, gear cache will stay empty")
        return GearDefinitionCache(
            load_gear_definitions=list,
            load_gym_equipment=list,
            ttl_seconds=settings.gear_cache_ttl_seconds,
        )

    from infrastructure.db import SupabaseGearRepository

    # Client is created on first cache load, not at startup
    @lru_cache(maxsize=1)
    def gear_repo() -> SupabaseGearRepository:
        return SupabaseGearRepository(
            create_client(settings.supabase_url, settings.supabase_key)
        )

    return GearDefinitionCache(
        load_gear_definitions=lambda: gear_repo().get_all_gear_definitions(),
        load_gym_equipment=lambda: gear_repo().get_all_gym_equipment(),
        ttl_seconds=settings.gear_cache_ttl_seconds,
    )


def _configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:8081",
    ]
    production_origins = os.environ.get("CORS_ALLOWED_ORIGINS", "").split(",")
    trusted_origins.extend([origin.strip() for origin in production_origins if origin.strip()])

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import health_router, workouts_router

    # Health router (no prefix - /health at root)
    app.include_router(health_router)
    app.include_router(workouts_router)


def _log_feature_flags(settings: Settings) -> None:
    """Log the status of feature flags at startup."""
    if settings.verify_user_gear:
        logger.info("VERIFY_USER_GEAR is active: user gear must be owned")
    else:
        logger.info("VERIFY_USER_GEAR is disabled: any user-gear method is accepted")


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
