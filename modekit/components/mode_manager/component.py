"""
Mode manager - Head markup for preloaded modes and lazy linking of the rest.

A session starts with a set of preloaded modes. In the render context it
produces markup only: a stylesheet link per resolvable preloaded mode, the
style block that makes every ``[data-mode]`` element emit an animation-end
event, and the script tag that loads the client bundle. In the interactive
context the same tags are appended to the document head and an
animation-end listener links each newly requested mode once.

Invariants:
- A mode is linked at most once per session, preloaded modes included
- Modes missing from the inventory are omitted with a warning, never raised
- The inventory is loaded at most once per resolver; concurrent lookups share
  the in-flight load
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import replace
from types import TracebackType
from typing import Any

from modekit.domain.diagnostics import BuildWarning, record_warning

from ._impl import build_link_tag, build_script_tag, build_style_tag, render_markup
from .models import (
    AnimationEndEvent,
    ExecutionContext,
    HeadTag,
    ModeManagerConfig,
    RenderHeadInput,
    RenderHeadOutput,
)
from .ports import DocumentPort, InventorySourcePort

logger = logging.getLogger(__name__)

MODE_ATTRIBUTE = "data-mode"


def normalize_modes(modes: str | Iterable[str] | None) -> tuple[str, ...]:
    """Accept one mode or many; drop blanks and duplicates, keep order."""
    if modes is None:
        return ()
    if isinstance(modes, str):
        modes = [modes]
    seen: dict[str, None] = {}
    for mode in modes:
        if mode and mode not in seen:
            seen[mode] = None
    return tuple(seen)


class InventoryResolver:
    """Resolves mode aliases to stylesheet hrefs from a lazily loaded inventory."""

    def __init__(self, source: InventorySourcePort) -> None:
        self._source = source
        self._entries: list[dict[str, Any]] | None = None
        self._pending: asyncio.Future[list[dict[str, Any]]] | None = None

    async def entries(self) -> list[dict[str, Any]]:
        if self._entries is not None:
            return self._entries

        if self._pending is None:
            self._pending = asyncio.ensure_future(self._source.load())
        pending = self._pending

        try:
            # Shielded so one cancelled caller does not cancel the shared load.
            entries = await asyncio.shield(pending)
        except Exception:
            # A failed load is not memoized; the next lookup starts a new one.
            if self._pending is pending:
                self._pending = None
            raise

        self._entries = entries
        return entries

    async def resolve(self, mode: str) -> str | None:
        for entry in await self.entries():
            if entry.get("mode") == mode:
                return entry.get("href") or None
        return None


class ModeManager:
    """
    One mode-management session for a page.

    Owns the set of loaded modes and, in the interactive context, the single
    animation-end listener. ``close()`` removes the listener.
    """

    def __init__(
        self,
        resolver: InventoryResolver,
        *,
        config: ModeManagerConfig | None = None,
        document: DocumentPort | None = None,
    ) -> None:
        self.config = config or ModeManagerConfig()
        if self.config.context is ExecutionContext.INTERACTIVE and document is None:
            raise ValueError("The interactive context requires a document")

        self._resolver = resolver
        self._document = document
        self._loaded: set[str] = set()
        self._lock = asyncio.Lock()
        self._started = False
        self._listening = False
        self.warnings: list[BuildWarning] = []

    @property
    def loaded(self) -> frozenset[str]:
        return frozenset(self._loaded)

    @property
    def is_listening(self) -> bool:
        return self._listening

    async def _links(self, modes: tuple[str, ...]) -> list[HeadTag]:
        hrefs = await asyncio.gather(*(self._resolver.resolve(mode) for mode in modes))
        links: list[HeadTag] = []
        for mode, href in zip(modes, hrefs):
            if href is None:
                record_warning(
                    self.warnings,
                    logger,
                    "unresolved_mode",
                    f"Mode '{mode}' is not in the inventory, link omitted",
                )
                continue
            links.append(build_link_tag(mode, f"{self.config.asset_base}{href}"))
        return links

    async def start(self, preload: str | Iterable[str] | None = ()) -> RenderHeadOutput:
        """
        Render the head tags for ``preload``.

        In the interactive context the tags are appended to the document head
        and the animation-end listener is installed.
        """
        if self._started:
            raise RuntimeError("Mode manager session already started")
        self._started = True

        modes = normalize_modes(preload)
        self._loaded.update(modes)
        first_warning = len(self.warnings)

        try:
            links = await self._links(modes)
        except Exception:
            # Nothing was linked; the session can be started again.
            self._loaded.difference_update(modes)
            self._started = False
            raise
        tags = (
            *links,
            build_style_tag(self.config.animation_name),
            build_script_tag(
                modes,
                src=self.config.script_src,
                inventory_url=self.config.inventory_url,
            ),
        )

        if self._document is not None and self.config.context is ExecutionContext.INTERACTIVE:
            for tag in tags:
                self._document.append_to_head(tag)
            self._document.add_event_listener(self.config.event_name, self.handle_animation_end)
            self._listening = True
            logger.debug("Listening for %s", self.config.event_name)

        return RenderHeadOutput(
            markup=render_markup(tags),
            tags=tags,
            preloaded=modes,
            warnings=self.warnings[first_warning:],
        )

    async def handle_animation_end(self, event: AnimationEndEvent) -> list[HeadTag]:
        """
        Link the modes requested by ``event.target`` that are not loaded yet.

        Events are handled one at a time so overlapping requests for the same
        mode cannot both insert a link.
        """
        async with self._lock:
            requested = normalize_modes((event.target.get_attribute(MODE_ATTRIBUTE) or "").split())
            pending = tuple(mode for mode in requested if mode not in self._loaded)
            self._loaded.update(pending)

            try:
                links = await self._links(pending)
            except Exception:
                # Unlinked modes must stay requestable by later events.
                self._loaded.difference_update(pending)
                raise
            if self._document is not None:
                for link in links:
                    self._document.insert_link(link)
            return links

    def close(self) -> None:
        if self._listening and self._document is not None:
            self._document.remove_event_listener(self.config.event_name, self.handle_animation_end)
            self._listening = False

    async def __aenter__(self) -> ModeManager:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


# --- Component Entry Points ---


async def run_render_head(
    inp: RenderHeadInput,
    *,
    resolver: InventoryResolver,
    config: ModeManagerConfig | None = None,
) -> RenderHeadOutput:
    """
    Render head markup for server-side rendering.

    Args:
        inp: Input containing the modes to preload.
        resolver: Shared inventory resolver.
        config: Asset locations; the context is always RENDER.

    Returns:
        RenderHeadOutput with markup, tags and omission warnings.
    """
    config = config or ModeManagerConfig()
    if config.context is not ExecutionContext.RENDER:
        config = replace(config, context=ExecutionContext.RENDER)
    manager = ModeManager(resolver, config=config)
    return await manager.start(inp.preload)


run = run_render_head
