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

"""atarom.core — external collaborator contracts and the derived-state record."""

from atarom.core.actions import Action
from atarom.core.control import ControlPort
from atarom.core.memory import RAM_SIZE, MemoryAccessor, RamView
from atarom.core.state import GameState, StateReader, StateWriter, new_game_state

__all__ = [
    "Action",
    "ControlPort",
    "GameState",
    "MemoryAccessor",
    "RAM_SIZE",
    "RamView",
    "StateReader",
    "StateWriter",
    "new_game_state",
]
