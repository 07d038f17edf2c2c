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

"""Synthetic input port exposed by the emulator driver."""

from typing import Protocol, runtime_checkable

from atarom.core.actions import Action


@runtime_checkable
class ControlPort(Protocol):
    """
    Fire-and-forget input primitives used while switching game modes.

    Every call runs synchronously; afterwards the adapter re-reads memory
    to observe its effect.
    """

    def act(self, action: Action, action_b: Action = Action.PLAYER_B_NOOP) -> None:
        """Emulate one step with the given player A / player B input."""
        ...

    def press_select(self, frames: int) -> None:
        """Hold the console select switch for `frames` frames, then release it."""
        ...

    def soft_reset(self) -> None:
        """Restart the title's logic, keeping the configured mode."""
        ...
