"""
Cipher Engine — Vigenère Polyalphabetic Cipher
==============================================
Classical repeating-key Vigenère over the 26 uppercase Latin letters.

    key       = keyword repeated and truncated to the text length
    encrypt   = (plain + key) mod 26
    decrypt   = (cipher - key + 26) mod 26

Letters are numbered from A=0 to Z=25. ASCII letters of either case are
accepted and output is uppercase; anything else raises ValueError.

Historical note: Blaise de Vigenère, 1553. Broken by Kasiski (1863) and
by plain frequency analysis. No confidentiality guarantee of any kind.
"""

import logging
from functools import lru_cache
from typing import Tuple

logger = logging.getLogger(__name__)

ALPHA        = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBER_CHARS = len(ALPHA)   # modulus for all arithmetic

_INDEX = {ch: i for i, ch in enumerate(ALPHA)}
_INDEX.update({ch.lower(): i for ch, i in _INDEX.items()})

Table = Tuple[Tuple[str, ...], ...]


@lru_cache(maxsize=None)
def generate_table() -> Table:
    """
    Build the 26x26 Vigenère square: table[i][j] == ALPHA[(i + j) % 26].

    Built once and cached. The nested tuples are read-only, so the same
    object can be handed to any number of callers.
    """
    table = tuple(
        tuple(ALPHA[(i + j) % NUMBER_CHARS] for j in range(NUMBER_CHARS))
        for i in range(NUMBER_CHARS)
    )
    logger.info(f"Vigenère table built: {NUMBER_CHARS}x{NUMBER_CHARS}")
    return table


def generate_key(keyword: str, key_length: int) -> str:
    """
    Repeat `keyword` until the key is exactly `key_length` characters.

    The last repetition is truncated, never padded. Case is left as given.

    Raises:
        TypeError  : key_length is not an int
        ValueError : key_length is negative, or keyword is empty
    """
    if isinstance(key_length, bool) or not isinstance(key_length, int):
        raise TypeError(f"Key length must be an int, got {type(key_length).__name__}.")
    if key_length < 0:
        raise ValueError(f"Key length must be non-negative, got {key_length}.")
    if not keyword:
        raise ValueError("Keyword must not be empty.")

    repeats = -(-key_length // len(keyword))
    key = (keyword * repeats)[:key_length]
    logger.debug(f"Key: keyword={len(keyword)} chars -> key={len(key)} chars")
    return key


def _indices(text: str, label: str) -> list:
    """Map ASCII letters (either case) to 0-25, rejecting anything else."""
    out = []
    for pos, ch in enumerate(text):
        idx = _INDEX.get(ch)
        if idx is None:
            raise ValueError(
                f"{label} must contain only letters A-Z; "
                f"got {ch!r} at position {pos}."
            )
        out.append(idx)
    return out


def _normalize_key(key: str) -> list:
    if not key:
        raise ValueError("Key must not be empty.")
    return _indices(key, "Key")


def encrypt(key: str, plain_text: str) -> str:
    """
    Encrypt `plain_text` under `key`.

    The key cycles if it is shorter than the text. Returns uppercase
    letters, same length as the input.
    """
    shifts = _normalize_key(key)
    letters = _indices(plain_text, "Plain text")
    period = len(shifts)
    result = [
        ALPHA[(p + shifts[i % period]) % NUMBER_CHARS]
        for i, p in enumerate(letters)
    ]
    logger.debug(f"Encrypt: text={len(letters)} chars key={period} chars")
    return "".join(result)


def decrypt(key: str, cipher_text: str) -> str:
    """Decrypt `cipher_text` under `key`. Exact inverse of encrypt()."""
    shifts = _normalize_key(key)
    letters = _indices(cipher_text, "Cipher text")
    period = len(shifts)
    result = [
        ALPHA[(c - shifts[i % period] + NUMBER_CHARS) % NUMBER_CHARS]
        for i, c in enumerate(letters)
    ]
    logger.debug(f"Decrypt: text={len(letters)} chars key={period} chars")
    return "".join(result)


def table_lookup(row_letter: str, column_letter: str) -> str:
    """Return the table cell at (row_letter, column_letter), case-insensitive."""
    if len(row_letter) != 1 or len(column_letter) != 1:
        raise ValueError("Table lookup takes exactly one letter per axis.")
    row, col = _indices(row_letter + column_letter, "Table coordinate")
    return generate_table()[row][col]


class VigenereCipher:
    """
    Keyword-bound Vigenère cipher.

    Each call derives a fresh key of the text's length from the stored
    keyword, so an instance carries no state beyond the keyword itself.
    """

    ALPHA = ALPHA

    def __init__(self, keyword: str):
        if not keyword or not keyword.isalpha():
            raise ValueError("Vigenère keyword must be alphabetic.")
        _indices(keyword, "Keyword")
        self._keyword = keyword.upper()

    @property
    def keyword(self) -> str:
        return self._keyword

    @property
    def table(self) -> Table:
        return generate_table()

    def key_for(self, length: int) -> str:
        return generate_key(self._keyword, length)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext string. Only letters A-Z are accepted."""
        if not plaintext:
            return ""
        return encrypt(self.key_for(len(plaintext)), plaintext)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext string."""
        if not ciphertext:
            return ""
        return decrypt(self.key_for(len(ciphertext)), ciphertext)

    def __repr__(self):
        return f"VigenereCipher(keyword={len(self._keyword)} letters)"
