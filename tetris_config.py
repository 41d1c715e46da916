
import os

CONFIG = {
    "CELL_SIZE": 32,
    "DAS_MS": 150,
    "ARR_MS": 50,
    "SEED": None,
    "RANDOMIZER": "uniform",
    "STATS_PATH": os.path.join("~", ".tetris", "stats.json"),
    "LOG_LEVEL": "INFO",
}

ENV_PREFIX = "TETRIS_"


def _coerce(default, raw: str):
    if default is None:
        return int(raw)
    if isinstance(default, bool):
        return raw.lower() in ("1", "true", "yes", "on")
    return type(default)(raw)


def load_env(environ=None):
    """Override CONFIG keys from TETRIS_<KEY> environment variables."""
    environ = os.environ if environ is None else environ
    for key, default in list(CONFIG.items()):
        raw = environ.get(ENV_PREFIX + key)
        if raw is None or raw == "":
            continue
        CONFIG[key] = _coerce(default, raw)
    return CONFIG
