"""
vigenere_cipher — Classical Vigenère Cipher Engine
==================================================
Repeating-keyword polyalphabetic substitution over A-Z.

    generate_key   — stretch a keyword to an exact length
    encrypt        — (plain + key) mod 26
    decrypt        — (cipher - key + 26) mod 26
    generate_table — the 26x26 Vigenère square (memoized, read-only)

Not secure. Falls to frequency analysis; kept for teaching and tests.

License: Apache 2.0
"""

__version__  = "1.0.0"

from .cipher  import (
    ALPHA,
    NUMBER_CHARS,
    VigenereCipher,
    decrypt,
    encrypt,
    generate_key,
    generate_table,
    table_lookup,
)
from .display import format_table, print_cipher, print_key, print_message, print_table
from .demo    import DemoResult, run_demo

__all__ = [
    "ALPHA",
    "NUMBER_CHARS",
    "VigenereCipher",
    "generate_key",
    "generate_table",
    "encrypt",
    "decrypt",
    "table_lookup",
    "format_table",
    "print_table",
    "print_key",
    "print_message",
    "print_cipher",
    "DemoResult",
    "run_demo",
]
