"""
Head tag construction and rendering.

Each tag kind has exactly one renderer; there is no implicit
stringification of tag objects.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from html import escape
from importlib import resources

from .models import HeadTag, TagKind

_BUNDLE_RESOURCE = "static/mode-observer.js"

# Forces a detectable animation-end on every element carrying data-mode,
# including elements already present when the page is parsed.
OBSERVER_CSS = """
:where([data-mode]) {{
    visibility: hidden;
    animation: {name} .0001s linear forwards;
}}

@keyframes {name} {{
    to {{ visibility: visible }}
}}
"""


# --- Construction ---


def build_link_tag(mode: str, href: str) -> HeadTag:
    return HeadTag(
        kind=TagKind.LINK,
        attributes=(("rel", "stylesheet"), ("title", mode), ("href", href)),
    )


def build_style_tag(animation_name: str) -> HeadTag:
    return HeadTag(kind=TagKind.STYLE, text=OBSERVER_CSS.format(name=animation_name))


def build_script_tag(preloaded: Iterable[str], *, src: str, inventory_url: str) -> HeadTag:
    """Reference the client bundle; preloaded modes travel as a JSON data attribute."""
    return HeadTag(
        kind=TagKind.SCRIPT,
        attributes=(
            ("src", src),
            ("data-preload", json.dumps(list(preloaded))),
            ("data-inventory", inventory_url),
        ),
    )


# --- Rendering ---


def render_attributes(attributes: Iterable[tuple[str, str]]) -> str:
    return " ".join(f'{name}="{escape(value, quote=True)}"' for name, value in attributes)


def render_link(tag: HeadTag) -> str:
    return f"<link {render_attributes(tag.attributes)}>"


def render_style(tag: HeadTag) -> str:
    return f'<style type="text/css">{tag.text}</style>'


def render_script(tag: HeadTag) -> str:
    return f"<script {render_attributes(tag.attributes)}></script>"


RENDERERS: dict[TagKind, Callable[[HeadTag], str]] = {
    TagKind.LINK: render_link,
    TagKind.STYLE: render_style,
    TagKind.SCRIPT: render_script,
}


def render_tag(tag: HeadTag) -> str:
    return RENDERERS[tag.kind](tag)


def render_markup(tags: Iterable[HeadTag]) -> str:
    return "\n".join(render_tag(tag) for tag in tags)


def load_client_bundle() -> str:
    """Read the packaged observer script."""
    return resources.files(__package__).joinpath(_BUNDLE_RESOURCE).read_text(encoding="utf-8")
