import logging
from pathlib import Path
from typing import Optional


LOGGER_NAME = "arnav_core"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Desligado por padrão: o output do CLI não pode ser poluído por log.
_root = logging.getLogger(LOGGER_NAME)
_root.addHandler(logging.NullHandler())

_file_handler: Optional[logging.Handler] = None


def enable_file(path: str | Path, level: int = logging.DEBUG) -> None:
    """
    Liga o log em arquivo (append). Chamadas repetidas trocam o arquivo.
    """
    global _file_handler

    disable()

    log_path = Path(path).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    _root.addHandler(handler)
    _root.setLevel(level)
    _file_handler = handler


def disable() -> None:
    global _file_handler

    if _file_handler is None:
        return

    _root.removeHandler(_file_handler)
    _file_handler.close()
    _file_handler = None
    _root.setLevel(logging.NOTSET)


def is_enabled() -> bool:
    return _file_handler is not None
