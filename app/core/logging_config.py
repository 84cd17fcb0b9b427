"""
Logging de la aplicación.

``setup_logging`` deja en el logger raíz un handler de consola y, si
``settings.log_file`` está definido, uno de archivo.  Los handlers llevan
nombre, así que llamar de nuevo (``create_app`` en los tests) no los
duplica.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CONSOLE_HANDLER_NAME = "katlasport.console"
FILE_HANDLER_NAME = "katlasport.file"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure the root logger for the API process.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back to
        ``INFO``.
    log_file : Optional[str]
        Also write records to this file, appending.  Parent directories
        are created.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    installed = {handler.get_name() for handler in root.handlers}

    if CONSOLE_HANDLER_NAME not in installed:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if log_file and FILE_HANDLER_NAME not in installed:
        path = Path(log_file).resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
