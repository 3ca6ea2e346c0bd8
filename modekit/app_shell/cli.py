import argparse
import asyncio
import logging
import sys

import yaml

from modekit.adapters.fs import FileSystemStore
from modekit.app_shell.config import Settings
from modekit.components.bootstrap import BootstrapModeInput, run_bootstrap
from modekit.components.build import BuildInput, run_build
from modekit.components.intents import IntentsValidationError, LoadIntentsInput, run_load
from modekit.components.inventory import ModeFileError, is_mode_file
from modekit.components.mode_manager import (
    InventoryResolver,
    ModeManagerConfig,
    RenderHeadInput,
    run_render_head,
)
from modekit.components.mode_manager.adapters import FileInventorySource
from modekit.components.schema import ValidateModeInput, run_validate

logger = logging.getLogger("modekit.cli")


def get_settings(args: argparse.Namespace) -> Settings:
    return Settings(root=args.root)


def load_intents(settings: Settings, fs: FileSystemStore) -> tuple[str, ...]:
    if not settings.intents_path.exists():
        logger.error(f"Intents file {settings.intents_path} not found.")
        sys.exit(1)
    return run_load(LoadIntentsInput(intents_path=settings.intents_path), fs=fs).intents


def handle_build(settings: Settings, args: argparse.Namespace) -> None:
    fs = FileSystemStore(settings.root)
    inp = BuildInput(
        intents_path=settings.intents_path,
        modes_dir=settings.modes_dir,
        schema_path=settings.schema_path,
        tokens_scss_path=settings.tokens_scss_path,
        public_dir=settings.public_dir,
        inventory_path=settings.inventory_path,
        write_client_bundle=not args.no_bundle,
    )
    result = run_build(inp, fs=fs)
    for path in result.written:
        print(f"Wrote {path.relative_to(settings.root)}")
    print(f"Built {len(result.inventory)} mode(s) with {len(result.warnings)} warning(s).")


def handle_bootstrap(settings: Settings, args: argparse.Namespace) -> None:
    fs = FileSystemStore(settings.root)
    if settings.newmode_path.exists() and not args.force:
        logger.error(f"{settings.newmode_path} already exists. Use --force to overwrite.")
        sys.exit(1)
    intents = load_intents(settings, fs)
    result = run_bootstrap(
        BootstrapModeInput(intents=intents, target_path=settings.newmode_path), fs=fs
    )
    print(f"Template written: {result.path.relative_to(settings.root)}")


def handle_check(settings: Settings, args: argparse.Namespace) -> None:
    fs = FileSystemStore(settings.root)
    intents = load_intents(settings, fs)

    invalid = 0
    for file_name in fs.list_dir(settings.modes_dir):
        if not is_mode_file(file_name):
            continue
        document = fs.read_yaml(settings.modes_dir / file_name)
        # Same skip rule as the build: empty files and files without a mode.
        if document is None or (isinstance(document, dict) and not document.get("mode")):
            print(f"SKIP {file_name} (no mode alias)")
            continue

        inp = ValidateModeInput(intents=intents, document=document, source=file_name)
        result = run_validate(inp)
        if result.is_valid:
            print(f"OK   {file_name}")
            continue

        invalid += 1
        print(f"FAIL {file_name}")
        for error in result.errors:
            print(f"  - [{error.code}] {error.message}")

    if invalid:
        sys.exit(1)


def handle_head(settings: Settings, args: argparse.Namespace) -> None:
    resolver = InventoryResolver(FileInventorySource(settings.inventory_path))
    config = ModeManagerConfig(asset_base=args.asset_base)
    preload = tuple(args.modes) or (settings.default_mode,)
    result = asyncio.run(
        run_render_head(RenderHeadInput(preload=preload), resolver=resolver, config=config)
    )
    print(result.markup)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Design-token mode builder")
    parser.add_argument("--root", help="Project root (default: $MODEKIT_ROOT or cwd)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # build
    build_parser = subparsers.add_parser(
        "build", help="Generate schema, interop, CSS and inventory"
    )
    build_parser.add_argument(
        "--no-bundle", action="store_true", help="Do not copy the client bundle to public/"
    )

    # bootstrap
    bootstrap_parser = subparsers.add_parser("bootstrap", help="Write a blank modes/newmode.yml")
    bootstrap_parser.add_argument("--force", action="store_true", help="Overwrite existing file")

    # check
    subparsers.add_parser("check", help="Validate mode files against the intents")

    # head
    head_parser = subparsers.add_parser("head", help="Print SSR head markup for modes")
    head_parser.add_argument("modes", nargs="*", help="Modes to preload")
    head_parser.add_argument("--asset-base", default="", help="URL prefix for generated assets")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    settings = get_settings(args)

    handlers = {
        "build": handle_build,
        "bootstrap": handle_bootstrap,
        "check": handle_check,
        "head": handle_head,
    }

    try:
        handlers[args.command](settings, args)
    except (IntentsValidationError, ModeFileError, yaml.YAMLError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
