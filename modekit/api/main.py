import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from modekit import __version__
from modekit.app_shell.config import Settings, get_settings
from modekit.components.mode_manager import InventoryResolver
from modekit.components.mode_manager.adapters import FileInventorySource

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings: Settings = app.state.settings
    if not settings.inventory_path.exists():
        logger.warning(
            "Inventory not found at %s; run `modekit build` before serving modes",
            settings.inventory_path,
        )
    else:
        logger.info("Serving modes from %s", settings.public_dir)
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="modekit",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.resolver = InventoryResolver(FileInventorySource(settings.inventory_path))

    # --- Routers ---
    from modekit.api.routes import modes

    app.include_router(modes.router, prefix="/modes", tags=["Modes"])

    # Generated CSS, inventory and client bundle.
    mount_path = "/" + settings.public_url.strip("/")
    app.mount(
        mount_path,
        StaticFiles(directory=settings.public_dir, check_dir=False),
        name="public",
    )

    @app.get("/health")
    def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "service": "modekit"}

    return app


app = create_app()
