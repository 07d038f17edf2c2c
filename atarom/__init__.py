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

"""atarom — per-title Atari 2600 game-state adapters."""

from atarom.core import (
    Action,
    ControlPort,
    GameState,
    MemoryAccessor,
    RamView,
    StateReader,
    StateWriter,
)
from atarom.errors import (
    AtaromError,
    ModeSwitchTimeoutError,
    ScoreDecodeError,
    StateFormatError,
    UnsupportedModeError,
)
from atarom.games import (
    GAME_IDS,
    ModeSwitchParams,
    ModeSwitchResult,
    RomSettings,
    decode_bcd,
    get_settings,
)

__all__ = [
    "Action",
    "AtaromError",
    "ControlPort",
    "GAME_IDS",
    "GameState",
    "MemoryAccessor",
    "ModeSwitchParams",
    "ModeSwitchResult",
    "ModeSwitchTimeoutError",
    "RamView",
    "RomSettings",
    "ScoreDecodeError",
    "StateFormatError",
    "StateReader",
    "StateWriter",
    "UnsupportedModeError",
    "decode_bcd",
    "get_settings",
]
