"""Command-line entry point for inspecting and rewriting atlas descriptors."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from sprite_atlas.config import Config, load_config
from sprite_atlas.data import Atlas, Region
from sprite_atlas.diagnostics import DiagnosticsTracker, Timer
from sprite_atlas.errors import AtlasError
from sprite_atlas.io import read_atlas, write_atlas
from sprite_atlas.lookup import find_region

EXIT_NOT_FOUND = 1
EXIT_ATLAS_ERROR = 2


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Texture atlas descriptor tool")
    parser.add_argument("--config", type=Path, help="Optional JSON config path")
    parser.add_argument(
        "--profile",
        type=str,
        default="standard",
        choices=["standard", "legacy"],
        help="Compatibility profile",
    )
    parser.add_argument(
        "--legacy-page-size",
        action="store_true",
        help="Store the first page size integer as both width and height",
    )
    parser.add_argument("--profile-output", type=Path, help="Write timing data to JSON/CSV")
    parser.add_argument("--verbose", "-v", action="count", default=0, help="Increase log output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    info_parser = subparsers.add_parser("info", help="List the pages of a descriptor")
    info_parser.add_argument("atlas", type=Path, help="Path to the .atlas descriptor")

    find_parser = subparsers.add_parser("find", help="Print the first region with a name")
    find_parser.add_argument("atlas", type=Path, help="Path to the .atlas descriptor")
    find_parser.add_argument("name", help="Region name")

    rewrite_parser = subparsers.add_parser("rewrite", help="Write a descriptor back in canonical layout")
    rewrite_parser.add_argument("atlas", type=Path, help="Path to the .atlas descriptor")
    rewrite_parser.add_argument("output", type=Path, help="Destination descriptor path")

    return parser.parse_args(argv)


def _build_config(args: argparse.Namespace) -> Config:
    config = load_config(args.config, args.profile)
    if args.legacy_page_size:
        config = replace(config, legacy_page_size=True)
    if args.profile_output:
        config = replace(config, enable_profiling=True, profile_output=args.profile_output)
    return config


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _print_info(atlas: Atlas) -> None:
    print(f"Pages: {atlas.page_count}")
    for page in atlas.pages:
        print(
            f"{page.name}: {page.width}x{page.height} {page.format.value} "
            f"filter={page.min_filter.value},{page.mag_filter.value} "
            f"repeat={page.wrap.value} regions={len(page.regions)}"
        )


def _print_region(region: Region) -> None:
    page_name = region.page.name if region.page is not None else "?"
    print(f"{region.name} (page {page_name})")
    print(f"  rotate: {'true' if region.rotated else 'false'}")
    print(f"  xy: {region.x}, {region.y}")
    print(f"  size: {region.width}, {region.height}")
    if region.splits is not None:
        print(f"  split: {', '.join(str(v) for v in region.splits)}")
    if region.pads is not None:
        print(f"  pad: {', '.join(str(v) for v in region.pads)}")
    print(f"  orig: {region.original_width}, {region.original_height}")
    print(f"  offset: {region.offset_x}, {region.offset_y}")
    print(f"  index: {region.index}")


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    _configure_logging(args.verbose)
    config = _build_config(args)
    tracker = DiagnosticsTracker(
        enable_profiling=config.enable_profiling,
        profile_output=config.profile_output,
    )

    try:
        with Timer() as timer:
            atlas = read_atlas(args.atlas, config)
        tracker.track("read", args.atlas, atlas, timer.elapsed)

        if args.command == "info":
            _print_info(atlas)
        elif args.command == "find":
            region = find_region(atlas, args.name)
            if region is None:
                print(f"Region '{args.name}' not found", file=sys.stderr)
                return EXIT_NOT_FOUND
            _print_region(region)
        elif args.command == "rewrite":
            with Timer() as timer:
                write_atlas(atlas, args.output, config)
            tracker.track("write", args.output, atlas, timer.elapsed)
            print(f"Wrote {args.output}")
    except AtlasError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ATLAS_ERROR
    finally:
        tracker.export()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
