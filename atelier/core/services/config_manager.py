"""
config_manager.py
-----------------
Room layout and settings loader.

Features:
- Reads .yaml/.yml (PyYAML safe_load), .json and .py (DEFAULT_CONFIG) files
- Bare names ("room", "room.yaml") resolve through a file index built once
- Loaded data is merged recursively over caller defaults
- '_notes' keys are documentation only and never reach callers
"""

import copy
import importlib.util
import json
import os

import yaml

from atelier.core.debug.debug_logger import DebugLogger


# ===========================================================
# Search Paths
# ===========================================================

PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
CONFIG_ROOT = os.path.join(PACKAGE_ROOT, "config")

# (directory, recursive); earlier entries win on name clashes
SEARCH_DIRS = [
    (".", False),
    (CONFIG_ROOT, True),
]

NOTES_KEY = "_notes"

_FILE_INDEX = None


# ===========================================================
# File Readers
# ===========================================================

def _read_yaml(handle):
    return yaml.safe_load(handle) or {}


def _read_json(handle):
    return json.load(handle)


def _read_python(path):
    """Execute a .py layout and return its DEFAULT_CONFIG (or {})."""
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    module_spec = importlib.util.spec_from_file_location("atelier_layout", path)
    module = importlib.util.module_from_spec(module_spec)
    try:
        module_spec.loader.exec_module(module)
    except (ImportError, SyntaxError) as e:
        DebugLogger.warn(f"Python layout {path} failed to import: {e}", category="loading")
        return {}
    return getattr(module, "DEFAULT_CONFIG", {})


TEXT_READERS = {
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".json": _read_json,
}

CONFIG_EXTENSIONS = tuple(TEXT_READERS) + (".py",)


def _read_file(path):
    ext = os.path.splitext(path)[1].lower()
    if ext == ".py":
        data = _read_python(path)
    else:
        reader = TEXT_READERS.get(ext, _read_json)
        with open(path, "r", encoding="utf-8") as handle:
            data = reader(handle)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a layout file and merge it over defaults.

    Args:
        filename: Existing path, or a bare name looked up in the index
        default_dict: Values used for anything the file leaves out
        strict: Raise FileNotFoundError instead of falling back to defaults

    Returns:
        dict: New merged dict; default_dict is never mutated
    """
    defaults = default_dict or {}
    path = filename if os.path.exists(filename) else _lookup(filename)

    try:
        data = _read_file(path)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found or unreadable: {filename}") from e
        DebugLogger.warn(f"Could not read {filename} ({e}); using defaults", category="loading")
        return merge_config(defaults, {})

    if not isinstance(data, dict):
        DebugLogger.warn(f"{os.path.basename(path)} is not a mapping; using defaults", category="loading")
        data = {}
    return merge_config(defaults, data)


def merge_config(default_dict, override):
    """Merge an in-memory config over defaults, same rules as load_config."""
    return _merge_dicts(default_dict or {}, override or {})


# ===========================================================
# File Index
# ===========================================================

def build_file_index():
    """Map file name -> path for every config file under SEARCH_DIRS."""
    global _FILE_INDEX
    index = {}

    for directory, recursive in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        if recursive:
            walk = ((root, files) for root, _, files in os.walk(directory))
        else:
            walk = [(directory, os.listdir(directory))]
        for root, files in walk:
            for name in files:
                if name.endswith(CONFIG_EXTENSIONS):
                    index.setdefault(name, os.path.join(root, name))

    _FILE_INDEX = index
    DebugLogger.init(f"Config index: {len(index)} files", category="loading")


def rebuild_file_index():
    """Forget the cached index and scan again."""
    global _FILE_INDEX
    _FILE_INDEX = None
    build_file_index()


def get_indexed_files():
    if _FILE_INDEX is None:
        build_file_index()
    return dict(_FILE_INDEX)


def _lookup(filename):
    """Indexed path for filename, trying known extensions; filename itself if absent."""
    if _FILE_INDEX is None:
        build_file_index()

    name = filename.replace("\\", "/").lstrip("/")
    for candidate in (name,) + tuple(name + ext for ext in CONFIG_EXTENSIONS):
        if candidate in _FILE_INDEX:
            return _FILE_INDEX[candidate]
    return name


# ===========================================================
# Merge
# ===========================================================

def _merge_dicts(default, override):
    """Recursive merge; dicts merge key by key, everything else is replaced."""
    merged = {k: copy.deepcopy(v) for k, v in default.items() if k != NOTES_KEY}
    for key, value in override.items():
        if key == NOTES_KEY:
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged
