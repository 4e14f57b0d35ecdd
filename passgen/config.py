# passgen/config.py
"""
Settings persistence for passgen.
Settings saved as JSON in %APPDATA%/Passgen/config.json (Windows) or ~/.passgen/config.json (fallback).
PASSGEN_CONFIG points at a different file.
"""

import os
import json
import logging
from typing import Dict, Any, Optional

from .charsets import AMBIGUOUS_CHARS, DEFAULT_SYMBOLS
from .policy import MAX_LENGTH

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "default_length": 16,
    "max_length": MAX_LENGTH,
    "symbols": DEFAULT_SYMBOLS,
    "ambiguous_chars": AMBIGUOUS_CHARS,
    "passphrase_words": 4,
    "batch_workers": 1,
    "log_level": "WARNING",
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "Passgen")
    return os.path.join(os.path.expanduser("~"), ".passgen")

def config_path() -> str:
    return os.getenv("PASSGEN_CONFIG") or os.path.join(_appdata_dir(), "config.json")

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level must be an object", p)
        return DEFAULTS.copy()
    unknown = set(data) - set(DEFAULTS)
    if unknown:
        logger.warning("unknown config keys in %s: %s", p, ", ".join(sorted(unknown)))
    # merge defaults
    out = DEFAULTS.copy()
    out.update({k: v for k, v in data.items() if k in DEFAULTS})
    return out

def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    return p
