"""Configuration management for ikilog.

Three-layer config resolution (highest priority wins):
  1. Overrides — CLI flags or keyword arguments to init_logger()
  2. Project config — .ikilog.json in the project directory (or a parent)
  3. Global config — ~/.ikilog/config.json

Anything left unset falls back to the LoggerConfig defaults. A project
can silence old debugging output for everyone by committing a
.ikilog.json with a newer suppress_before_date.
"""

import json
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from .dates import DEFAULT_SUPPRESS_BEFORE_DATE

PROJECT_CONFIG_NAME = ".ikilog.json"


@dataclass
class LoggerConfig:
    """Settings read by TaggedLogger on every call.

    Attributes:
        enabled: Master switch; False silences every tag.
        suppress_before_date: Cutoff (yyyy-MMM-dd); non-critical events
            dated on or before it are dropped.
        prefix: Text put in front of every record, handy for filtering.
        use_color: Include the tag glyph in records.
        crash_reporting_active: Send records to the crash-reporting sink.
        crash_reporting_mirror_console: With crash reporting active, also
            write to the console (debug builds). False sends records to
            the crash reporter only (release builds).
        console: Select the console sink.
        log_undated: Emit events that carry no date instead of dropping them.
    """
    enabled: bool = True
    suppress_before_date: str = DEFAULT_SUPPRESS_BEFORE_DATE
    prefix: str = "ikiApps"
    use_color: bool = False
    crash_reporting_active: bool = False
    crash_reporting_mirror_console: bool = True
    console: bool = True
    log_undated: bool = False

    def replace(self, **changes):
        """Return a copy with the given fields changed (unknown keys ignored)."""
        data = asdict(self)
        data.update(normalize_config(changes))
        return LoggerConfig(**data)

    def to_dict(self):
        return asdict(self)


_FIELD_TYPES = {f.name: f.type for f in fields(LoggerConfig)}

# camelCase spellings used by earlier releases
_ALIASES = {
    "suppressbeforedate": "suppress_before_date",
    "usecolor": "use_color",
    "usecrashlytics": "crash_reporting_active",
    "crashreportingactive": "crash_reporting_active",
    "crashreportingmirrorconsole": "crash_reporting_mirror_console",
    "logundated": "log_undated",
}

_FALSE_STRINGS = {"0", "false", "no", "off", ""}


def _canonical_key(key):
    """Map snake_case, kebab-case and camelCase keys to field names."""
    key = str(key).replace("-", "_")
    if key in _FIELD_TYPES:
        return key
    return _ALIASES.get(key.replace("_", "").lower())


def _coerce(name, value):
    if _FIELD_TYPES[name] in (bool, "bool"):
        if isinstance(value, str):
            return value.strip().lower() not in _FALSE_STRINGS
        return bool(value)
    return str(value)


def normalize_config(data):
    """Canonicalize keys and coerce values; drop unknown keys and None."""
    result = {}
    for key, value in (data or {}).items():
        name = _canonical_key(key)
        if name is None or value is None:
            continue
        result[name] = _coerce(name, value)
    return result


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.ikilog/)."""
    return Path.home() / ".ikilog"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .ikilog.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from a file, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):  # ValueError covers JSON and UTF-8 errors
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config():
    """Load the global config file."""
    return load_json(get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .ikilog.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(overrides=None, start_dir=None):
    """Resolve a LoggerConfig using three-layer precedence.

    Args:
        overrides: Mapping of explicit settings; None values are treated
                   as unset so argparse defaults fall through.
        start_dir: Directory to start the .ikilog.json search from.

    Returns:
        LoggerConfig with the resolved values.
    """
    project_cfg, _ = load_project_config(start_dir)

    resolved = {}
    for layer in (load_global_config(), project_cfg, overrides or {}):
        resolved.update(normalize_config(layer))
    return LoggerConfig(**resolved)


# ---------------------------------------------------------------------------
# Config writing
# ---------------------------------------------------------------------------
def save_project_config(config, project_dir=None):
    """Write .ikilog.json to the project directory."""
    data = config.to_dict() if isinstance(config, LoggerConfig) else config
    target = Path(project_dir or os.getcwd()) / PROJECT_CONFIG_NAME
    with open(target, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return target


def save_global_config(config):
    """Write the global config file."""
    data = config.to_dict() if isinstance(config, LoggerConfig) else config
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = get_global_config_path()
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return config_path
