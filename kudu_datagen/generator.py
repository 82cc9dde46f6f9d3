"""
Synthetic row generation.

Keys are assigned sequentially from a start key; values are random
alphanumeric strings. Pass a seeded `random.Random` for reproducible values.
"""

from __future__ import annotations

import random
import string
from typing import Iterator, Optional

from kudu_datagen.domain.models import INT32_MAX, GeneratedRow

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


class KeyRangeExhausted(RuntimeError):
    """Raised when the next key would overflow the INT32 key column."""


def random_value(length: int, rng: Optional[random.Random] = None) -> str:
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    rng = rng or random.Random()
    return "".join(rng.choice(ALPHABET) for _ in range(length))


class RowGenerator:
    """
    Infinite, monotonically keyed stream of `GeneratedRow`.

    Iteration stops with `KeyRangeExhausted` once `INT32_MAX` has been
    produced, since the key column cannot hold anything larger.
    """

    def __init__(
        self,
        start_key: int = 1,
        value_length: int = 5,
        seed: Optional[int] = None,
    ) -> None:
        if value_length <= 0:
            raise ValueError(f"value_length must be positive, got {value_length}")
        self.next_key = start_key
        self.value_length = value_length
        self._rng = random.Random(seed)

    def __iter__(self) -> Iterator[GeneratedRow]:
        return self

    def __next__(self) -> GeneratedRow:
        if self.next_key > INT32_MAX:
            raise KeyRangeExhausted(
                f"key {self.next_key} does not fit the INT32 key column"
            )
        row = GeneratedRow(
            key=self.next_key, value=random_value(self.value_length, self._rng)
        )
        self.next_key += 1
        return row


__all__ = ["ALPHABET", "KeyRangeExhausted", "RowGenerator", "random_value"]
