from __future__ import annotations

from dataclasses import asdict, dataclass
import json
from pathlib import Path
import tempfile

CONFIG_DIR = Path.home() / ".hoverlocator"
CONFIG_PATH = CONFIG_DIR / "config.json"

DEFAULT_URL = "https://example.com"
DEFAULT_VIEWPORT = (1280, 720)


@dataclass(slots=True)
class SessionState:
    url: str = DEFAULT_URL
    viewport_width: int = DEFAULT_VIEWPORT[0]
    viewport_height: int = DEFAULT_VIEWPORT[1]
    start_active: bool = False
    headless: bool = False


def normalize_viewport_size(
    width: int | float | str | None,
    height: int | float | str | None,
    *,
    default_width: int = DEFAULT_VIEWPORT[0],
    default_height: int = DEFAULT_VIEWPORT[1],
) -> tuple[int, int]:
    try:
        resolved_width = int(width) if width is not None else default_width
    except (TypeError, ValueError):
        resolved_width = default_width
    try:
        resolved_height = int(height) if height is not None else default_height
    except (TypeError, ValueError):
        resolved_height = default_height

    return max(320, resolved_width), max(240, resolved_height)


def parse_viewport(raw: str) -> tuple[int, int]:
    """Parse ``WIDTHxHEIGHT``; raises ``ValueError`` on anything else."""
    parts = raw.lower().replace(" ", "").split("x")
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise ValueError(f"Viewport must look like 1280x720, got {raw!r}")
    return normalize_viewport_size(parts[0], parts[1])


def load_session_state(config_path: Path | None = None) -> SessionState:
    path = config_path or CONFIG_PATH
    if not path.exists() or not path.is_file():
        return SessionState()

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, TypeError):
        return SessionState()

    if not isinstance(payload, dict):
        return SessionState()

    width, height = normalize_viewport_size(payload.get("viewport_width"), payload.get("viewport_height"))
    return SessionState(
        url=str(payload.get("url", DEFAULT_URL) or DEFAULT_URL),
        viewport_width=width,
        viewport_height=height,
        start_active=bool(payload.get("start_active", False)),
        headless=bool(payload.get("headless", False)),
    )


def save_session_state(state: SessionState, config_path: Path | None = None) -> tuple[bool, str | None]:
    path = config_path or CONFIG_PATH

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return False, f"Could not create config folder: {exc}"

    payload = json.dumps(asdict(state), ensure_ascii=True, indent=2, sort_keys=True)
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=str(path.parent),
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            handle.write(payload)
            handle.flush()
            temp_path = Path(handle.name)

        temp_path.replace(path)
    except OSError as exc:
        if temp_path and temp_path.exists():
            temp_path.unlink(missing_ok=True)
        return False, f"Could not write session state: {exc}"

    return True, None


def normalize_url(raw_url: str) -> str:
    url = (raw_url or "").strip()
    if not url:
        return ""
    if url.startswith(("http://", "https://", "file://", "about:")):
        return url
    return f"https://{url}"
