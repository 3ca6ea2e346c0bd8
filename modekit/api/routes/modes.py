"""
Mode routes - server-side head markup and the inventory.

``GET /modes/head`` renders the link, style and script tags for the
requested preload modes (the configured default mode when none are given).
Modes missing from the inventory are omitted from the markup and listed,
percent-encoded, in the ``X-Modes-Omitted`` header. Both routes answer 503
while the inventory has not been built.
"""

import logging
from typing import Annotated, Any
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import HTMLResponse

from modekit.api.deps import get_inventory_resolver, get_mode_manager_config, get_settings
from modekit.app_shell.config import Settings
from modekit.components.mode_manager import (
    HeadTag,
    InventoryResolver,
    ModeManagerConfig,
    RenderHeadInput,
    TagKind,
    normalize_modes,
    run_render_head,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _inventory_unavailable(settings: Settings, error: OSError) -> HTTPException:
    logger.warning("inventory_missing: %s (%s)", error, settings.inventory_path)
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Inventory not available; run `modekit build`",
    )


@router.get("/head", response_class=HTMLResponse)
async def render_head(
    preload: Annotated[list[str] | None, Query()] = None,
    settings: Settings = Depends(get_settings),
    resolver: InventoryResolver = Depends(get_inventory_resolver),
    config: ModeManagerConfig = Depends(get_mode_manager_config),
) -> HTMLResponse:
    """Render head markup for SSR."""
    modes = normalize_modes(preload) or (settings.default_mode,)
    try:
        result = await run_render_head(
            RenderHeadInput(preload=modes), resolver=resolver, config=config
        )
    except OSError as e:
        raise _inventory_unavailable(settings, e) from e

    headers: dict[str, str] = {}
    omitted = [mode for mode in modes if not _has_link(result.tags, mode)]
    if omitted:
        # Header values must be latin-1; mode names may not be.
        headers["X-Modes-Omitted"] = ",".join(quote(mode, safe="") for mode in omitted)
    return HTMLResponse(content=result.markup, headers=headers)


@router.get("/inventory")
async def get_inventory(
    settings: Settings = Depends(get_settings),
    resolver: InventoryResolver = Depends(get_inventory_resolver),
) -> list[dict[str, Any]]:
    """Serialized inventory, as written by the build."""
    try:
        return await resolver.entries()
    except OSError as e:
        raise _inventory_unavailable(settings, e) from e


def _has_link(tags: tuple[HeadTag, ...], mode: str) -> bool:
    return any(tag.kind is TagKind.LINK and tag.get("title") == mode for tag in tags)
