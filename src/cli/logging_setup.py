"""Logging de la CLI.

Por qué Rich:
- Los logs van a stderr con el mismo estilo que el resto de la salida,
  sin mezclarse con la respuesta que se imprime en stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", *, verbose: bool = False) -> None:
    resolved = logging.getLevelName(level.upper())
    # getLevelName devuelve "Level X" (str) para nombres desconocidos.
    log_level = resolved if isinstance(resolved, int) else logging.WARNING
    if verbose:
        log_level = logging.DEBUG
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # httpx/httpcore son muy ruidosos en DEBUG.
    for noisy in ("httpcore", "hpack"):
        logging.getLogger(noisy).setLevel(max(log_level, logging.INFO))
