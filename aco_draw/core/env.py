"""Configuration from the environment and .env files.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Settings read by aco-draw:
  ACO_DRAW_CANVAS   default grid, <columns>x<rows>  (25x12)
  ACO_DRAW_CELL     default cell, <width>x<height>  (10x10)
"""

import os
from pathlib import Path

from aco_draw.core.render import parse_size

CANVAS_VAR = 'ACO_DRAW_CANVAS'
CELL_VAR = 'ACO_DRAW_CELL'

DEFAULT_CANVAS = (25, 12)
DEFAULT_CELL = (10, 10)


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value, KEY="value" and `export KEY=value`."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export ') :].strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)

    return path


def size_setting(name: str, default: tuple[int, int]) -> tuple[int, int]:
    """Read an <a>x<b> size from the environment.

    Raises ValueError naming the variable when the value is malformed.
    """
    raw = os.environ.get(name, '').strip()
    if not raw:
        return default
    try:
        return parse_size(raw)
    except ValueError as e:
        raise ValueError(f'{name}: {e}') from e
