"""
Mode manager - head markup, lazy mode linking and the client bundle.
"""

from ._impl import (
    OBSERVER_CSS,
    RENDERERS,
    build_link_tag,
    build_script_tag,
    build_style_tag,
    load_client_bundle,
    render_attributes,
    render_link,
    render_markup,
    render_script,
    render_style,
    render_tag,
)
from .component import (
    MODE_ATTRIBUTE,
    InventoryResolver,
    ModeManager,
    normalize_modes,
    run,
    run_render_head,
)
from .models import (
    CLIENT_BUNDLE_NAME,
    AnimationEndEvent,
    ExecutionContext,
    HeadTag,
    ModeManagerConfig,
    RenderHeadInput,
    RenderHeadOutput,
    TagKind,
)
from .ports import DocumentPort, ElementPort, EventHandler, InventorySourcePort

__all__ = [
    # Entry points
    "run",
    "run_render_head",
    "ModeManager",
    "InventoryResolver",
    "normalize_modes",
    # Tags
    "build_link_tag",
    "build_style_tag",
    "build_script_tag",
    "render_attributes",
    "render_link",
    "render_style",
    "render_script",
    "render_tag",
    "render_markup",
    "load_client_bundle",
    "RENDERERS",
    # Models
    "AnimationEndEvent",
    "ExecutionContext",
    "HeadTag",
    "ModeManagerConfig",
    "RenderHeadInput",
    "RenderHeadOutput",
    "TagKind",
    # Ports
    "DocumentPort",
    "ElementPort",
    "EventHandler",
    "InventorySourcePort",
    # Constants
    "CLIENT_BUNDLE_NAME",
    "MODE_ATTRIBUTE",
    "OBSERVER_CSS",
]
