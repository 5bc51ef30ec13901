from __future__ import annotations

import sys

MIN_PYTHON = (3, 11)

_MISSING_BROWSER_ERROR_HINTS = (
    "executable doesn't exist",
    "executable does not exist",
    "download new browsers",
    "playwright install",
    "could not find browser",
    "failed to launch chromium because executable",
)

_CLOSED_TARGET_HINTS = (
    "has been closed",
    "target page, context or browser has been closed",
    "browser has been closed",
    "target closed",
)

MISSING_BROWSER_MESSAGE = "Chromium not installed. Run: python -m playwright install chromium"


def is_missing_browser_error(exc: Exception) -> bool:
    message = str(exc).lower()
    return any(hint in message for hint in _MISSING_BROWSER_ERROR_HINTS)


def is_closed_target_error(exc: Exception) -> bool:
    message = str(exc).lower()
    return any(hint in message for hint in _CLOSED_TARGET_HINTS)


def ensure_supported_python(version_info: tuple[int, ...] | None = None) -> None:
    current = tuple(version_info or sys.version_info[:3])
    if current[:2] < MIN_PYTHON:
        raise SystemExit(
            "hoverlocator requires Python 3.11+. "
            f"Current interpreter: {sys.executable} (Python {'.'.join(str(part) for part in current)})"
        )
