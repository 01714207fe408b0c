"""Configuration management for x86-64-level.

Three-layer config resolution (highest priority wins):
  1. CLI flags: explicit on the command line
  2. Project config: .x86-64-level.json in the current directory or a parent
  3. Global config: ~/.x86-64-level/config.json (or the --config file)

A project that ships binaries built for, say, x86-64-v3 can commit
``{"assert": 3}`` in .x86-64-level.json so a bare ``x86-64-level`` run
inside the checkout checks the host against that level.
"""

import json
import os
from pathlib import Path

from x86_64_level.levels import MAX_LEVEL


PROJECT_CONFIG_NAME = ".x86-64-level.json"
CONFIG_KEYS = ["assert", "cpuinfo"]


class ConfigError(Exception):
    """A config file holds a value that cannot be used."""


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.x86-64-level/)."""
    return Path.home() / ".x86-64-level"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .x86-64-level.json.

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
    """Load a JSON object from a file, returning {} on any read error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config(path=None):
    """Load the global config file (or an explicit --config file)."""
    return load_json(path or get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest project config walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
def parse_assert_level(value):
    """Convert an --assert value to an int in 1..MAX_LEVEL.

    Accepts 3, "3", "v3" and "x86-64-v3".

    Raises:
        ValueError: The value is not an integer in range.
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"invalid level: {value!r}")
    if isinstance(value, str):
        value = value.strip().lower()
        value = value[len("x86-64-"):] if value.startswith("x86-64-") else value
        value = value[1:] if value.startswith("v") else value
    try:
        level = int(value)
    except ValueError:
        raise ValueError(f"invalid level: {value!r}") from None
    if not 1 <= level <= MAX_LEVEL:
        raise ValueError(
            f"level must be between 1 and {MAX_LEVEL}, got {level}")
    return level


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(args, keys=None, start_dir=None):
    """Resolve config values using three-layer precedence.

    For each key, checks (in order):
      1. CLI args (argparse namespace; 'assert' maps to args.assert_level)
      2. Project .x86-64-level.json
      3. Global config (args.config if given, else ~/.x86-64-level/config.json)

    Returns:
        (resolved, sources): values by key, and where each value came from
        ('cli', a config file path, or None).

    Raises:
        ConfigError: A config file holds a bad 'assert' or 'cpuinfo' value.
    """
    if keys is None:
        keys = CONFIG_KEYS

    project_cfg, project_path = load_project_config(start_dir)
    global_path = getattr(args, "config", None) or get_global_config_path()
    global_cfg = load_global_config(global_path)

    resolved = {}
    sources = {}
    for key in keys:
        arg_key = "assert_level" if key == "assert" else key.replace("-", "_")

        cli_val = getattr(args, arg_key, None)
        if cli_val is not None:
            resolved[key], sources[key] = cli_val, "cli"
            continue

        if project_cfg.get(key) is not None:
            resolved[key], sources[key] = project_cfg[key], str(project_path)
        elif global_cfg.get(key) is not None:
            resolved[key], sources[key] = global_cfg[key], str(global_path)
        else:
            resolved[key], sources[key] = None, None
            continue

        if key == "assert":
            try:
                resolved[key] = parse_assert_level(resolved[key])
            except ValueError as e:
                raise ConfigError(
                    f"Invalid 'assert' value in {sources[key]}: {e}") from None
        elif key == "cpuinfo":
            if not isinstance(resolved[key], str):
                raise ConfigError(
                    f"Invalid 'cpuinfo' value in {sources[key]}: "
                    f"expected a path, got {resolved[key]!r}")
            # Relative paths in a config file are relative to that file
            resolved[key] = str(Path(sources[key]).parent / resolved[key])

    return resolved, sources


# ---------------------------------------------------------------------------
# Config writing
# ---------------------------------------------------------------------------
def save_project_config(data, project_dir=None):
    """Write .x86-64-level.json to the project directory."""
    target = Path(project_dir or os.getcwd()) / PROJECT_CONFIG_NAME
    with open(target, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return target


def update_project_config(updates, project_dir=None):
    """Merge `updates` into the project directory's config file.

    Existing keys not named in `updates` are kept.
    """
    target = Path(project_dir or os.getcwd()) / PROJECT_CONFIG_NAME
    data = load_json(target)
    data.update(updates)
    return save_project_config(data, project_dir)
