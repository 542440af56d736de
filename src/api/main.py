import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.api.deps import get_settings
from src.api.routes import admin_links, admin_owners, public
from src.app_shell.config import ConfigurationError, validate_ops_rules
from src.rules.loader import load_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Refuse to start on bad rules or an unusable data dir; migrate the db."""
    settings = get_settings()

    try:
        rules = load_rules(settings.rules_path)
        validate_ops_rules(rules, settings.data_dir)
    except (OSError, ValueError, ConfigurationError):
        logger.critical("Startup configuration failed", exc_info=True)
        raise
    logger.info("Rules v%s loaded from %s", rules.project.rules_version, settings.rules_path)

    applied = SQLiteMigrator(settings.db_path, settings.migrations_dir).run_migrations()
    logger.info("Database ready at %s (%d migrations applied)", settings.db_path, len(applied))

    yield


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(title="Link Hub API", version="0.1.0", lifespan=lifespan)

    application.include_router(
        admin_owners.router, prefix="/api/admin/owners", tags=["Admin Owners"]
    )
    application.include_router(admin_links.router, prefix="/api/admin/owners", tags=["Admin Links"])
    application.include_router(public.router, prefix="/api/public", tags=["Public"])

    # Dashboard frontend
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.get("/health")
    def health_check() -> dict[str, str]:
        return {"status": "ok", "service": "link-hub"}

    return application


app = create_app()
