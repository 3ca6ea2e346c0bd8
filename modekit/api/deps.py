from fastapi import Request

from modekit.app_shell.config import Settings
from modekit.components.mode_manager import InventoryResolver, ModeManagerConfig


# --- Settings ---
def get_settings(request: Request) -> Settings:
    settings: Settings = request.app.state.settings
    return settings


# --- Mode Manager ---
def get_inventory_resolver(request: Request) -> InventoryResolver:
    # One resolver per application, so the inventory is loaded once per process.
    resolver: InventoryResolver = request.app.state.resolver
    return resolver


def get_mode_manager_config(request: Request) -> ModeManagerConfig:
    settings = get_settings(request)
    return ModeManagerConfig(asset_base=settings.public_url)
