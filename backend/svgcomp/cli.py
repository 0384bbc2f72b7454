"""Command-line entry point: one SVG file → component file(s)."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from svgcomp.config import settings
from svgcomp.errors import SvgComponentError
from svgcomp.generators import generate_components, get_registry, parse_frameworks
from svgcomp.svg.transformer import filename_to_component_name

logger = logging.getLogger("svgcomp.cli")


def build_parser() -> argparse.ArgumentParser:
    frameworks = ", ".join(get_registry().frameworks())
    parser = argparse.ArgumentParser(
        prog="svgcomp",
        description="Convert an SVG file into React and Vue components",
    )
    parser.add_argument("input", help="SVG file to convert")
    parser.add_argument(
        "-f", "--framework", default="react",
        help=f"Target framework(s), comma separated ({frameworks})",
    )
    parser.add_argument("-o", "--output", default="./components", help="Output directory")
    parser.add_argument("-n", "--name", help="Component name (default: derived from file name)")
    parser.add_argument(
        "--no-props", dest="props", action="store_false",
        help="Generate component without size/color props",
    )
    parser.add_argument(
        "--no-typescript", dest="typescript", action="store_false",
        help="Generate JavaScript instead of TypeScript",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, settings.svgcomp_log_level.upper(), logging.INFO),
        format="%(levelname)s %(message)s",
    )

    src = Path(args.input)
    if not src.is_file() or src.suffix.lower() != ".svg":
        logger.error("Not an SVG file: %s", src)
        return 1

    name = args.name.strip() if args.name and args.name.strip() else filename_to_component_name(src.name)

    try:
        results = generate_components(
            src.read_text(encoding="utf-8"),
            name,
            frameworks=parse_frameworks(args.framework),
            props=args.props,
            typescript=args.typescript,
        )
    except SvgComponentError as e:
        logger.error("%s: %s", src, e)
        return 1

    out_dir = Path(args.output)
    out_dir.mkdir(parents=True, exist_ok=True)
    for result in results:
        out_path = out_dir / f"{name}{result.extension}"
        out_path.write_text(result.code if result.code.endswith("\n") else result.code + "\n", encoding="utf-8")
        logger.info("  %s (%s) → %s", name, result.framework, out_path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
