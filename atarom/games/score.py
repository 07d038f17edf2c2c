# Copyright 2026 Achronus
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================

"""Packed-decimal (BCD) score decoding."""

from dataclasses import dataclass
from typing import Sequence

import jax.numpy as jnp

from atarom.core.memory import MemoryAccessor
from atarom.errors import ScoreDecodeError

MAX_SCORE_BYTES: int = 3


@dataclass(frozen=True)
class ScoreLayout:
    """
    Where a title keeps its score.

    Parameters
    ----------
    addresses : tuple[int, ...]
        RAM offsets of the packed-decimal bytes, most significant digit pair
        first.
    scale : int (optional)
        Multiplier for digits the title never stores (e.g. `100` when the
        score always ends in `00`). Default is `1`.
    """

    addresses: tuple[int, ...]
    scale: int = 1


def decode_bcd(packed: Sequence[int], scale: int = 1) -> int:
    """
    Decode packed-decimal bytes into an integer.

    Each byte holds two decimal digits, high nibble first.  Digit pairs are
    concatenated in the given order and the result is multiplied by `scale`.

    Parameters
    ----------
    packed : Sequence[int]
        1-3 byte values, most significant digit pair first.
    scale : int (optional)
        Positive multiplier. Default is `1`.

    Returns
    -------
    score : int
        Non-negative decoded value.

    Raises
    ------
    ScoreDecodeError
        If the byte count is out of range, a value is not a byte, or a
        nibble is not a decimal digit.
    ValueError
        If `scale` is not positive.

    Examples
    --------
    >>> decode_bcd([0x12, 0x34])
    1234
    >>> decode_bcd([0x09], scale=10)
    90
    """
    values = [int(b) for b in packed]
    if not 1 <= len(values) <= MAX_SCORE_BYTES:
        raise ScoreDecodeError(
            f"Expected 1 to {MAX_SCORE_BYTES} score bytes, got {len(values)}."
        )
    if scale < 1:
        raise ValueError(f"scale must be a positive integer, got {scale!r}.")
    if any(not 0 <= b <= 0xFF for b in values):
        raise ScoreDecodeError(f"Score bytes must be in [0, 255], got {values}.")

    data = jnp.asarray(values, dtype=jnp.int32)
    hi = data >> 4
    lo = data & 0xF
    if bool(jnp.any((hi > 9) | (lo > 9))):
        raise ScoreDecodeError(
            "Score bytes are not packed decimal: "
            + " ".join(f"0x{b:02X}" for b in values)
        )

    weights = 100 ** jnp.arange(len(values) - 1, -1, -1, dtype=jnp.int32)
    return int(jnp.sum((hi * 10 + lo) * weights)) * scale


def read_score(memory: MemoryAccessor, layout: ScoreLayout) -> int:
    """Read and decode the score bytes described by `layout`."""
    return decode_bcd(
        [memory.read_byte(addr) for addr in layout.addresses], layout.scale
    )
