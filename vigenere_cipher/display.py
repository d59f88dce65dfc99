"""
Display helpers for the Vigenère engine.

Render values the engine has already computed. Nothing here touches
engine state; the table is only read.
"""

import sys
from typing import Optional, TextIO

from .cipher import Table, generate_table


def format_table(table: Optional[Table] = None) -> str:
    """Letters space-separated, one table row per line."""
    if table is None:
        table = generate_table()
    return "\n".join(" ".join(row) for row in table)


def _emit(text: str, file: Optional[TextIO]) -> None:
    print(text, file=file if file is not None else sys.stdout)


def print_table(table: Optional[Table] = None, file: Optional[TextIO] = None) -> None:
    _emit(format_table(table), file)


def print_key(key: str, file: Optional[TextIO] = None) -> None:
    _emit(key, file)


def print_message(text: str, file: Optional[TextIO] = None) -> None:
    _emit(text, file)


def print_cipher(text: str, file: Optional[TextIO] = None) -> None:
    _emit(text, file)
