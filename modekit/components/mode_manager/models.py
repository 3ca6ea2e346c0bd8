"""
Mode manager input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from modekit.domain.diagnostics import BuildWarning

if TYPE_CHECKING:
    from .ports import ElementPort

CLIENT_BUNDLE_NAME = "_mode-observer.js"


class TagKind(str, Enum):
    """Kinds of head element the manager produces."""

    LINK = "link"
    STYLE = "style"
    SCRIPT = "script"


class ExecutionContext(str, Enum):
    """
    Where the manager runs.

    RENDER only produces markup. INTERACTIVE also appends the tags to a
    document and listens for animation-end events.
    """

    RENDER = "render"
    INTERACTIVE = "interactive"


@dataclass(frozen=True)
class HeadTag:
    """A head element: its kind, ordered attributes and text content."""

    kind: TagKind
    attributes: tuple[tuple[str, str], ...] = ()
    text: str = ""

    def get(self, name: str) -> str | None:
        for key, value in self.attributes:
            if key == name:
                return value
        return None


@dataclass(frozen=True)
class ModeManagerConfig:
    """Configuration for one mode manager session."""

    context: ExecutionContext = ExecutionContext.RENDER
    # URL prefix for stylesheet hrefs, the inventory and the client bundle.
    asset_base: str = ""
    inventory_name: str = "_inventory.json"
    bundle_name: str = CLIENT_BUNDLE_NAME
    animation_name: str = "_nodeinserted_"
    event_name: str = "animationend"

    @property
    def inventory_url(self) -> str:
        return f"{self.asset_base}{self.inventory_name}"

    @property
    def script_src(self) -> str:
        return f"{self.asset_base}{self.bundle_name}"


@dataclass(frozen=True)
class AnimationEndEvent:
    """Animation-end signal raised on an element."""

    target: ElementPort
    animation_name: str = ""


@dataclass(frozen=True)
class RenderHeadInput:
    """Input for rendering head markup."""

    preload: tuple[str, ...] = ()


@dataclass(frozen=True)
class RenderHeadOutput:
    """Rendered head markup and the tags it was built from."""

    markup: str
    tags: tuple[HeadTag, ...]
    preloaded: tuple[str, ...]
    warnings: list[BuildWarning] = field(default_factory=list)
