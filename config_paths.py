import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "wardgrid")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
PAGE_SIZE_DEFAULT = 10
PAGE_SIZE_OPTIONS_DEFAULT = [10, 50, 100]
UNDO_MAX_DEPTH_DEFAULT = 50
PRUNE_STALE_SELECTION_DEFAULT = False


def _positive_int(value):
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def load_config():
    cfg = {
        "PAGE_SIZE": PAGE_SIZE_DEFAULT,
        "PAGE_SIZE_OPTIONS": list(PAGE_SIZE_OPTIONS_DEFAULT),
        "UNDO_MAX_DEPTH": UNDO_MAX_DEPTH_DEFAULT,
        "PRUNE_STALE_SELECTION": PRUNE_STALE_SELECTION_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg
    if not isinstance(data, dict):
        return cfg

    pagination = data.get("pagination")
    if isinstance(pagination, dict):
        options = pagination.get("page_size_options")
        if isinstance(options, list) and options and all(
            _positive_int(x) for x in options
        ):
            cfg["PAGE_SIZE_OPTIONS"] = list(options)
        page_size = pagination.get("page_size")
        if _positive_int(page_size):
            cfg["PAGE_SIZE"] = page_size

    editable = data.get("editable")
    if isinstance(editable, dict):
        depth = editable.get("undo_max_depth")
        if _positive_int(depth):
            cfg["UNDO_MAX_DEPTH"] = depth

    selection = data.get("selection")
    if isinstance(selection, dict):
        prune = selection.get("prune_stale")
        if isinstance(prune, bool):
            cfg["PRUNE_STALE_SELECTION"] = prune

    return cfg
