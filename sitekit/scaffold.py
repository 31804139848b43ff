#!/usr/bin/env python3
"""Create the application directory layout.

Usage: python -m sitekit.scaffold [--root DIR]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from sitekit.domain.paths import LAYOUT
from sitekit.logging_conf import get_logger

logger = get_logger("scaffold")


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the scaffold command."""
    parser = argparse.ArgumentParser(description="Create the sitekit directory layout")
    parser.add_argument(
        "--root",
        default=".",
        help="Directory to create the layout in (default: current directory)",
    )
    return parser.parse_args(argv)


def ensure_layout(root: Path) -> list[Path]:
    """Create every layout directory under `root` and return them, sorted.

    Existing directories are left alone, so running it twice is harmless.
    """
    dirs = sorted({root / suffix.strip("/") for suffix in LAYOUT.values()})
    for d in dirs:
        d.mkdir(parents=True, exist_ok=True)
    logger.info(
        "layout.ensure",
        extra={"event": "layout_ensure", "root": str(root), "count": len(dirs)},
    )
    return dirs


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    root = Path(args.root).resolve()
    dirs = ensure_layout(root)
    print("Ensured directories:")
    for d in dirs:
        print(" -", d.relative_to(root))


if __name__ == "__main__":
    main()
