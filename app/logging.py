import logging
import threading

_LOCK = threading.Lock()
_LEVEL = logging.INFO
_FORMAT = "[api] %(asctime)s %(levelname)s %(name)s %(message)s"


def configure(level_name):
    global _LEVEL
    with _LOCK:
        _LEVEL = getattr(logging, level_name.upper(), logging.INFO)
        logging.getLogger("api").setLevel(_LEVEL)


def get_logger(name="api"):
    # everything hangs off the "api" logger, which owns the one handler
    if name != "api" and not name.startswith("api."):
        name = f"api.{name}"
    with _LOCK:
        root = logging.getLogger("api")
        if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(_FORMAT))
            root.addHandler(handler)
            root.setLevel(_LEVEL)
        return logging.getLogger(name)
