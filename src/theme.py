"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Supports palette overrides via environment or project .env file.
"""
from __future__ import annotations
import logging
import os, re, sys
from pathlib import Path

logger = logging.getLogger(__name__)

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    """Convert a hex color code to an RGB tuple."""
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"

def _from_hex(hex_code: str) -> str:
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return _fg_truecolor(r, g, b)
    return _fg_256(r, g, b)

def _valid_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')
REVERSE = _code('7')

# Default palette: xterm 202 for done items, green cursor
HEX_CHECKED_DEFAULT = '#FF5F00'
HEX_CURSOR_DEFAULT = '#04B575'
PALETTE_KEYS = ('TODO_CHECKED', 'TODO_CURSOR')

# Load overrides from optional .env file at the project root
_ENV_OVERRIDES: dict[str, str] = {}
_env_path = Path(__file__).resolve().parent.parent / '.env'
if _env_path.exists():
    try:
        for line in _env_path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith('#') or '=' not in line:
                continue
            k,v = line.split('=',1)
            k = k.strip()
            v = v.strip()
            if k in PALETTE_KEYS and _valid_hex(v):
                _ENV_OVERRIDES[k] = '#' + v.lstrip('#')
    except OSError as exc:
        logger.warning("Ignoring unreadable %s: %s", _env_path, exc)

def _resolve(key: str, default: str) -> str:
    """Real env var > .env override > default. Malformed env values fall through."""
    env_value = os.environ.get(key)
    if env_value and _valid_hex(env_value):
        return '#' + env_value.lstrip('#')
    return _ENV_OVERRIDES.get(key, default)

HEX_CHECKED = _resolve('TODO_CHECKED', HEX_CHECKED_DEFAULT)
HEX_CURSOR = _resolve('TODO_CURSOR', HEX_CURSOR_DEFAULT)

CHECKED_COLOR = _from_hex(HEX_CHECKED)
CURSOR_COLOR = _from_hex(HEX_CURSOR)

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

def visible(text: str) -> str:
    """Text with every ANSI escape removed."""
    return ANSI_RE.sub('', text)

__all__ = ['color','visible','RESET','BOLD','DIM','REVERSE','CHECKED_COLOR','CURSOR_COLOR']
