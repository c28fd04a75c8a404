"""Configuration management for helpreg.

Layered config resolution (highest priority wins):
  1. CLI flags — explicit on the command line
  2. Project config — .helpreg.json in or above the working directory
  3. Global config — ~/.helpreg/config.json (or --config PATH)
  4. Built-in defaults

Keys:
  heading_level  Top heading level for HTML trees (1-6)
  title          HTML document title
  encoding       Encoding for written HTML files
  escape         HTML-escape documentation text
  extensions     Reflection backend modules to enable (enable_type_info)
"""

import json
import os
from pathlib import Path

from helpreg.lib.log_lib import get_output


PROJECT_CONFIG_NAME = ".helpreg.json"

DEFAULTS = {
    "heading_level": 1,
    "title": None,
    "encoding": "utf-8",
    "escape": True,
    "extensions": [],
}


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.helpreg/)."""
    return Path.home() / ".helpreg"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .helpreg.json.

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
    """Load a JSON object from path, returning an empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config(path=None):
    """Load the global config file (or an explicit --config file)."""
    return load_json(path or get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .helpreg.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(args=None, start_dir=None):
    """Resolve every config key using layered precedence.

    Args:
        args: argparse namespace (or None); attributes named like the
            keys override the files. ``args.config`` selects the global file.
        start_dir: Directory to start the project config search from

    Returns:
        Dict with a value for every key in DEFAULTS
    """
    out = get_output()
    global_cfg = load_global_config(getattr(args, "config", None))
    project_cfg, project_path = load_project_config(start_dir)
    if project_path:
        out.emit(2, "config: using project config {path}",
                 channel='config', path=project_path)

    resolved = {}
    for key, default in DEFAULTS.items():
        json_alt = key.replace("_", "-")
        cli_val = getattr(args, key, None)
        if cli_val is not None:
            resolved[key] = cli_val
        elif key in project_cfg or json_alt in project_cfg:
            resolved[key] = project_cfg.get(key, project_cfg.get(json_alt))
        elif key in global_cfg or json_alt in global_cfg:
            resolved[key] = global_cfg.get(key, global_cfg.get(json_alt))
        else:
            resolved[key] = default
        out.emit(3, "config: {key} = {value!r}", channel='config',
                 key=key, value=resolved[key])
    return resolved
