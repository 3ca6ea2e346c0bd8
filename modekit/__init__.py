"""
modekit - build-time generator for design-token modes.

Reads intents and mode definitions, emits a JSON Schema, an SCSS interop
file, per-mode CSS and an inventory manifest, and renders the head markup
that lazily links mode stylesheets in the browser.
"""

__version__ = "0.1.0"
