#!/usr/bin/env python3
"""Render the RICS store items table from the command line."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

logger = logging.getLogger("rics_store")


def configure_logging(level: str, log_file: Path | None) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the RICS store items table.")
    parser.add_argument("--search", default="", help="Filter items by name, category, mod or id")
    parser.add_argument(
        "--sort",
        action="append",
        default=[],
        metavar="KEY",
        help="Header click to apply (name, price, category, weight, quantityLimit); repeat to toggle",
    )
    parser.add_argument("--output", type=Path, help="Write the table body here instead of stdout")
    return parser.parse_args(argv)


async def build_table(args: argparse.Namespace, settings) -> str:
    from rics_store.loader import CatalogLoader, default_sources
    from rics_store.page import StorePage
    from rics_store.render import BufferTarget

    target = BufferTarget()
    page = StorePage(CatalogLoader(default_sources(settings)), target)
    await page.start()
    for key in args.sort:
        page.on_header_click(key)
    if args.search:
        page.on_search_input(args.search)
    return target.markup


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    from rics_store.config import get_settings

    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging("INFO", None)
        for error in e.errors():
            logger.error("Config error: %s: %s", ".".join(map(str, error["loc"])), error["msg"])
        logger.error("Please check your .env file")
        return 1

    configure_logging(settings.log_level, settings.log_file)
    logger.info("Data root: %s", settings.data_root)
    if settings.base_url:
        logger.info("Base URL: %s", settings.base_url)

    markup = asyncio.run(build_table(args, settings))
    if args.output:
        args.output.write_text(markup + "\n", encoding="utf-8")
        logger.info("Wrote table to %s", args.output)
    else:
        print(markup)
    return 0


if __name__ == "__main__":
    sys.exit(main())
