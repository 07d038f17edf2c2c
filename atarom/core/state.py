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

"""GameState pytree and the flat record format used to checkpoint it."""

from typing import Sequence

import chex
import jax
import jax.numpy as jnp

from atarom.errors import StateFormatError

INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1


@chex.dataclass(frozen=True)
class GameState:
    """
    Derived game-outcome state owned by one adapter.

    Instances are immutable; every update produces a new record, so copies
    of an adapter never observe each other's steps.

    Parameters
    ----------
    reward : jax.Array
        int32 — Score delta observed during the most recent step.
    score : jax.Array
        int32 — Score decoded at the most recent step.
    terminal : jax.Array
        bool — True when the title's end condition held at the last step.
    lives : jax.Array
        int32 — Lives remaining (title-specific semantics).
    """

    reward: jax.Array
    score: jax.Array
    terminal: jax.Array
    lives: jax.Array


def new_game_state(score: int = 0, lives: int = 1) -> GameState:
    """
    Return a non-terminal state with zero reward.

    Parameters
    ----------
    score : int (optional)
        Baseline score. Default is `0`.
    lives : int (optional)
        Starting lives. Default is `1`.

    Returns
    -------
    state : GameState
        Fresh state record.
    """
    return GameState(
        reward=jnp.int32(0),
        score=jnp.int32(score),
        terminal=jnp.bool_(False),
        lives=jnp.int32(lives),
    )


class StateWriter:
    """Append-only writer producing a flat, untagged record of ints and bools."""

    def __init__(self) -> None:
        self._values: list[int | bool] = []

    def put_int(self, value: int) -> None:
        self._values.append(int(value))

    def put_bool(self, value: bool) -> None:
        self._values.append(bool(value))

    @property
    def values(self) -> list[int | bool]:
        """Copy of the record written so far."""
        return list(self._values)


class StateReader:
    """
    Positional reader over a record produced by `StateWriter`.

    Parameters
    ----------
    values : Sequence[int | bool]
        Flat record, read front to back.

    Raises
    ------
    StateFormatError
        From `get_int` / `get_bool` when the next entry is missing or has
        the wrong type, or when an int does not fit in int32.
    """

    def __init__(self, values: Sequence[int | bool]) -> None:
        self._values = list(values)
        self._pos = 0

    def _next(self, kind: str) -> int | bool:
        if self._pos >= len(self._values):
            raise StateFormatError(
                f"Expected {kind} at position {self._pos}, but the record "
                f"holds only {len(self._values)} entries."
            )
        value = self._values[self._pos]
        self._pos += 1
        return value

    def get_int(self) -> int:
        value = self._next("int")
        if isinstance(value, bool) or not isinstance(value, int):
            raise StateFormatError(
                f"Expected int at position {self._pos - 1}, got {value!r}."
            )
        if not INT32_MIN <= value <= INT32_MAX:
            raise StateFormatError(
                f"Int at position {self._pos - 1} is outside the int32 range: {value!r}."
            )
        return value

    def get_bool(self) -> bool:
        value = self._next("bool")
        if not isinstance(value, bool):
            raise StateFormatError(
                f"Expected bool at position {self._pos - 1}, got {value!r}."
            )
        return value

    @property
    def exhausted(self) -> bool:
        """True once every entry has been read."""
        return self._pos == len(self._values)
