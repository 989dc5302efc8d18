#!/usr/bin/env python3
"""
Recipe Converter - Convert Cooklang recipes

Reads .cook files, parses the markup into structured recipes, and writes
them out as JSON or as canonical Cooklang markup.
"""
import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from cooklang_converter import parse, serialize
from cooklang_converter.const import (
    DEFAULT_LOG_LEVEL,
    ENV_LOG_LEVEL,
    ENV_OUTPUT_DIR,
    FORMAT_COOK,
    FORMAT_JSON,
    OUTPUT_FORMATS,
)

logger = logging.getLogger(__name__)


def convert_recipe_text(text: str, output_format: str) -> str:
    """Convert Cooklang text to the requested output format.

    Args:
        text: The Cooklang source
        output_format: Either 'json' or 'cook'

    Returns:
        The converted recipe
    """
    recipe = parse(text)
    logger.info("Parsed %d steps, %d metadata entries, %d shopping list categories",
                len(recipe.steps), len(recipe.metadata), len(recipe.shopping_list))

    if output_format == FORMAT_COOK:
        return serialize(recipe)
    return recipe.to_json(indent=2) + "\n"


def convert_recipe_file(path: Path, output_format: str, output_dir: Path | None) -> bool:
    """Convert a single recipe file and write or print the result.

    Args:
        path: The .cook file to convert
        output_format: Either 'json' or 'cook'
        output_dir: Directory to write the result into, or None for stdout

    Returns:
        True if successful, False otherwise
    """
    logger.info("Converting recipe: %s", path)

    try:
        text = path.read_text(encoding="utf-8")
        result = convert_recipe_text(text, output_format)

        if output_dir is None:
            sys.stdout.write(result)
            return True

        output_dir.mkdir(parents=True, exist_ok=True)
        output_file = output_dir / f"{path.stem}.{output_format}"
        logger.info("Saving converted recipe to: %s", output_file)
        output_file.write_text(result, encoding="utf-8")
        return True

    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error converting recipe %s: %s", path, e, exc_info=True)
        return False


def resolve_log_level(value: str | None) -> int | None:
    """Map a level name such as 'info' to its logging constant.

    Returns None when the name is not a known logging level.
    """
    level = logging.getLevelName((value or DEFAULT_LOG_LEVEL).strip().upper())
    return level if isinstance(level, int) else None


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the recipe converter."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Convert Cooklang recipes into structured JSON or canonical Cooklang"
    )
    parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Cooklang (.cook) files to convert"
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=FORMAT_JSON,
        help="Output format (default: json)"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help=f"Directory to save output files (can also be set via {ENV_OUTPUT_DIR} env var; default: stdout)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help=f"Enable debug logging (default level comes from {ENV_LOG_LEVEL})"
    )

    args = parser.parse_args(argv)

    configured_level = os.getenv(ENV_LOG_LEVEL)
    level = resolve_log_level(configured_level)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else (DEFAULT_LOG_LEVEL if level is None else level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if level is None:
        logger.warning("Unknown log level %r in %s, using %s",
                       configured_level, ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)

    output_dir = args.output_dir
    if output_dir is None and os.getenv(ENV_OUTPUT_DIR):
        output_dir = Path(os.environ[ENV_OUTPUT_DIR])

    results = [convert_recipe_file(path, args.format, output_dir) for path in args.files]
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
