from __future__ import annotations

import argparse
from dataclasses import replace
import logging
from pathlib import Path
import sys
from typing import Sequence

from lxml import etree

from .html_source import find_elements, load_document
from .runtime_checks import ensure_supported_python
from .synthesis import synthesize
from .ui_state import CONFIG_DIR, load_session_state, parse_viewport, save_session_state

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def _build_logger(level: str) -> logging.Logger:
    logger = logging.getLogger("hoverlocator")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    logger.propagate = False
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(stream_handler)
    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(CONFIG_DIR / "session.log", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
    except OSError as exc:
        logger.warning("File logging disabled: %s", exc)
    return logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hoverlocator",
        description="Point at an element, get Cypress, Playwright and Selenium locators.",
    )
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    commands = parser.add_subparsers(dest="command", required=True)

    inspect_cmd = commands.add_parser("inspect", help="Open a page and show locators on hover.")
    inspect_cmd.add_argument("url", nargs="?", help="Page to open; defaults to the last one.")
    inspect_cmd.add_argument("--viewport", type=parse_viewport, help="Viewport size, e.g. 1280x720.")
    inspect_cmd.add_argument(
        "--headless",
        action=argparse.BooleanOptionalAction,
        help="Run Chromium without a window (this run only).",
    )
    inspect_cmd.add_argument(
        "--active",
        action=argparse.BooleanOptionalAction,
        help="Start with the inspector turned on (this run only).",
    )

    locate_cmd = commands.add_parser("locate", help="Print locators for elements of a saved HTML file.")
    locate_cmd.add_argument("file", type=Path, help="HTML file to read.")
    locate_cmd.add_argument("xpath", help="lxml XPath query selecting the elements to describe.")
    return parser


def _run_inspect(args: argparse.Namespace, logger: logging.Logger) -> int:
    from .browser_manager import BrowserManager

    state = load_session_state()
    if args.url:
        state.url = args.url
    if args.viewport:
        state.viewport_width, state.viewport_height = args.viewport

    saved, message = save_session_state(state)
    if not saved:
        logger.warning("Failed to persist session state: %s", message)

    # --headless and --active apply to this run only; the saved values are
    # the defaults when a flag is omitted.
    run_state = replace(state)
    if args.headless is not None:
        run_state.headless = args.headless
    if args.active is not None:
        run_state.start_active = args.active
    return BrowserManager(run_state).run()


def _run_locate(args: argparse.Namespace, logger: logging.Logger) -> int:
    try:
        root = load_document(args.file)
        matches = find_elements(root, args.xpath)
    except OSError as exc:
        logger.error("Could not read %s: %s", args.file, exc)
        return 1
    except etree.ParserError as exc:
        logger.error("Could not parse %s: %s", args.file, exc)
        return 1
    except etree.XPathError as exc:
        logger.error("Invalid XPath %r: %s", args.xpath, exc)
        return 1

    if not matches:
        logger.error("No element matches %s", args.xpath)
        return 1

    for position, element in enumerate(matches, start=1):
        result = synthesize(element)
        if result is None:
            continue
        print(f"[{position}] <{element.tag_name}>")
        print(f"  Cypress:    {result.css_scheme}")
        print(f"  Playwright: {result.role_scheme}")
        print(f"  Selenium:   {result.xpath_scheme}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    ensure_supported_python()
    args = _build_parser().parse_args(argv)
    logger = _build_logger(args.log_level).getChild("cli")

    if args.command == "locate":
        return _run_locate(args, logger)
    try:
        return _run_inspect(args, logger)
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        return 130


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
