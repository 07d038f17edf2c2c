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

"""pytest session configuration and shared fixtures.

LiveMemory is a mutable RAM snapshot standing in for the emulator's live
memory, and FakeControlPort records every input it receives and lets a
test decide how the select switch changes memory.  Both are available to
all test subdirectories.
"""

from typing import Callable

import pytest

from atarom.core.actions import Action
from atarom.core.memory import RamView


class LiveMemory:
    """Mutable `MemoryAccessor` backed by a `RamView`."""

    def __init__(self, values: dict[int, int] | None = None) -> None:
        self.view = RamView.from_bytes(values)

    def read_byte(self, address: int) -> int:
        return self.view.read_byte(address)

    def write(self, values: dict[int, int]) -> None:
        self.view = self.view.with_bytes(values)


class FakeControlPort:
    """`ControlPort` that records calls and applies `on_select` per pulse."""

    def __init__(
        self,
        memory: LiveMemory,
        on_select: Callable[[LiveMemory], None] | None = None,
    ) -> None:
        self.memory = memory
        self.on_select = on_select
        self.calls: list[tuple] = []

    def act(self, action: Action, action_b: Action = Action.PLAYER_B_NOOP) -> None:
        self.calls.append(("act", action, action_b))

    def press_select(self, frames: int) -> None:
        self.calls.append(("select", frames))
        if self.on_select is not None:
            self.on_select(self.memory)

    def soft_reset(self) -> None:
        self.calls.append(("soft_reset",))

    def count(self, kind: str) -> int:
        return sum(1 for call in self.calls if call[0] == kind)


def cycling_counter(address: int, period: int) -> Callable[[LiveMemory], None]:
    """Select handler that advances the byte at `address` modulo `period`."""

    def _advance(memory: LiveMemory) -> None:
        memory.write({address: (memory.read_byte(address) + 1) % period})

    return _advance


@pytest.fixture
def live_memory():
    """Factory fixture: `live_memory({address: value})` → LiveMemory."""
    return LiveMemory


@pytest.fixture
def fake_port():
    """Factory fixture: `fake_port(memory, on_select)` → FakeControlPort."""
    return FakeControlPort


@pytest.fixture
def cycling():
    """Factory fixture: `cycling(address, period)` → select handler."""
    return cycling_counter
