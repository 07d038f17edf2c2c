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

"""Read-only access to emulated machine memory."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import chex
import jax.numpy as jnp

RAM_SIZE: int = 128
# RIOT RAM is mirrored across the 8-bit address space; ALE offsets such as
# 0xDA and 0x5A name the same byte.
_RAM_MASK: int = 0x7F


@runtime_checkable
class MemoryAccessor(Protocol):
    """Byte-addressed, read-only view of machine memory at one point in time."""

    def read_byte(self, address: int) -> int:
        """Return the 8-bit value stored at `address`."""
        ...


@dataclass(frozen=True)
class RamView:
    """
    `MemoryAccessor` over a RIOT RAM snapshot.

    Parameters
    ----------
    ram : chex.Array
        uint8[128] — RIOT RAM snapshot, e.g. `state.riot.ram`.

    Examples
    --------
    >>> view = RamView.from_bytes({0xEA: 3})
    >>> view.read_byte(0xEA)
    3
    """

    ram: chex.Array

    def __post_init__(self) -> None:
        chex.assert_shape(self.ram, (RAM_SIZE,))
        chex.assert_type(self.ram, jnp.uint8)

    @classmethod
    def from_bytes(cls, values: dict[int, int] | None = None) -> "RamView":
        """
        Build a zeroed snapshot with `{address: value}` overrides applied.

        Parameters
        ----------
        values : dict[int, int] (optional)
            Bytes to set. Addresses are aliased like `read_byte`.

        Returns
        -------
        view : RamView
            New snapshot.
        """
        return cls(ram=jnp.zeros(RAM_SIZE, dtype=jnp.uint8)).with_bytes(values or {})

    def with_bytes(self, values: dict[int, int]) -> "RamView":
        """Return a copy of this snapshot with `{address: value}` overrides applied."""
        ram = self.ram
        for address, value in values.items():
            ram = ram.at[address & _RAM_MASK].set(jnp.uint8(value))
        return RamView(ram=ram)

    def read_byte(self, address: int) -> int:
        """
        Read one byte.

        Parameters
        ----------
        address : int
            ALE RAM offset; only the low 7 bits select the byte.

        Returns
        -------
        value : int
            Byte value in `[0, 255]`.
        """
        return int(self.ram[address & _RAM_MASK])
