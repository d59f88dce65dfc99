"""
vigenere_cipher — Demonstration Run
===================================
Run:  python -m vigenere_cipher

Builds a key from a fixed keyword, encrypts a fixed message, decrypts
the result and prints the table, message, key, cipher text and
decrypted text.
"""

import logging
from typing import NamedTuple

from .cipher import decrypt, encrypt, generate_key, generate_table
from .display import print_cipher, print_key, print_message, print_table

logger = logging.getLogger(__name__)

DEMO_KEYWORD = "HOUGHTON"
DEMO_MESSAGE = "MICHIGANTECHNOLOGICALUNIVERSITY"

LINE = "═" * 70


class DemoResult(NamedTuple):
    message: str
    key: str
    cipher_text: str
    decrypted: str

    @property
    def round_trip_ok(self) -> bool:
        return self.decrypted == self.message.upper()


def run_demo(keyword: str = DEMO_KEYWORD, message: str = DEMO_MESSAGE) -> DemoResult:
    key = generate_key(keyword, len(message))
    cipher_text = encrypt(key, message)
    decrypted = decrypt(key, cipher_text)
    return DemoResult(message, key, cipher_text, decrypted)


def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    result = run_demo()

    header("Vigenère table")
    print_table(generate_table())

    header(f"Keyword: {DEMO_KEYWORD}")
    print_message(result.message)
    print_key(result.key)
    print_cipher(result.cipher_text)
    print_message(result.decrypted)

    print(LINE)
    if result.round_trip_ok:
        print("  ✓  Round trip matches")
    else:
        logger.error("Round trip mismatch: decrypted text differs from message")
        print("  ✗  Round trip FAILED")
    print(LINE + "\n")
    return 0 if result.round_trip_ok else 1
