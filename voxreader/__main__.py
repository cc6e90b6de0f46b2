"""Print a summary of one or more .vox files.

    python -m voxreader [-v] [--strict] [--no-check-children] LOCATOR...
"""

import argparse
import logging
import sys
from typing import Optional

import voxreader

logger = logging.getLogger("voxreader")


def summarize(locator: str, model: voxreader.VoxelModel) -> str:
    lines = [
        f"{locator}:",
        f"  version:   {model.version}",
        f"  size:      {model.size}",
        f"  voxels:    {len(model.voxels)}",
        f"  frames:    {len(model.frames)}",
        f"  materials: {len(model.materials)}",
    ]
    colors = sorted({voxel.color_index for voxel in model.voxels})
    if colors:
        lines.append(f"  colors:    {len(colors)} ({colors[0]}-{colors[-1]})")
    return "\n".join(lines)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="voxreader", description="Summarize MagicaVoxel .vox files."
    )
    parser.add_argument("locators", nargs="+", metavar="LOCATOR", help="path or URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument(
        "--strict", action="store_true", help="fail on unknown chunk IDs"
    )
    parser.add_argument(
        "--no-check-children",
        dest="check_children",
        action="store_false",
        help="ignore declared children sizes",
    )
    parser.add_argument("--timeout", type=float, default=30, help="HTTP timeout")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    status = 0
    for locator in args.locators:
        try:
            model = voxreader.load(
                locator,
                timeout=args.timeout,
                unknown_chunks="error" if args.strict else "skip",
                check_children=args.check_children,
            )
        except (voxreader.VoxError, voxreader.SourceError) as e:
            logger.error("%s: %s", locator, e)
            status = 1
            continue
        print(summarize(locator, model))

    return status


if __name__ == "__main__":
    sys.exit(main())
