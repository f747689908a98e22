# --------------------------------------------------------------
# File: console.py
# Description: Envoltorios del sistema para la consola del cliente.
# --------------------------------------------------------------
"""Utilidades de E/S de consola usadas por el cliente del vault."""

from __future__ import annotations

import getpass
import os
import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, TextIO, Tuple

COMMANDS: Tuple[str, ...] = (
    "get",
    "roster",
    "revoke",
    "confirm",
    "list",
    "insert",
    "delete",
    "view",
    "edit",
    "status",
    "rollback",
    "timemachine",
)


def find_command(text: str) -> Tuple[str, bool]:
    """Busca el primer comando del vocabulario contenido en la entrada.

    Args:
        text (str): Línea introducida por el usuario.

    Returns:
        Tuple[str, bool]: Comando encontrado e indicador de éxito; `("", False)`
        si no aparece ninguno.

    """

    for command in COMMANDS:
        if command in text:
            return command, True
    return "", False


def is_flag_passed(name: str, argv: Optional[Sequence[str]] = None) -> bool:
    """Indica si la opción `-name` o `--name` aparece en la línea de comandos.

    Se aceptan las formas `--name=valor`. Como en el parser de opciones del
    cliente, la búsqueda termina en el primer argumento posicional, en `-` o en
    `--`. Sin definición de opciones no se sabe si `-name valor` consume el
    valor, así que `valor` también detiene la búsqueda.
    """

    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    for arg in args:
        if arg in ("-", "--") or not arg.startswith("-"):
            break
        stripped = arg.lstrip("-")
        if len(arg) - len(stripped) > 2:
            break
        if stripped.split("=", 1)[0] == name:
            return True
    return False


def file_exists(path: str) -> bool:
    """Comprueba si la ruta existe en el sistema de archivos."""

    return os.path.exists(path)


def read_secret(prompt: str) -> str:
    """Lee un secreto de la terminal sin mostrar lo que se escribe.

    Args:
        prompt (str): Mensaje mostrado antes de la lectura.

    Returns:
        str: Secreto introducido.

    Raises:
        OSError: Si la entrada estándar no es una terminal; `getpass` leería
            entonces con eco.

    """

    if not sys.stdin.isatty():
        raise OSError("La entrada estándar no es una terminal.")
    return getpass.getpass(prompt)


@contextmanager
def terminal_state(stream: Optional[TextIO] = None) -> Iterator[Optional[list]]:
    """Guarda los atributos de la terminal y los restaura al salir.

    La restauración se ejecuta en cualquier salida del bloque, también ante
    excepciones. Si el flujo no es una TTY no se hace nada y se cede `None`.

    Args:
        stream (Optional[TextIO]): Flujo de la terminal; por defecto `sys.stdin`.

    Returns:
        Iterator[Optional[list]]: Atributos guardados durante el bloque.

    """

    stream = stream or sys.stdin
    if not stream.isatty():
        yield None
        return

    import termios

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    try:
        yield saved
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
