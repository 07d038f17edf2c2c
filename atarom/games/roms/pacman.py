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

"""Pac-Man — score, compound terminal and single-player mode rules."""

from atarom.core.actions import CARDINAL
from atarom.core.memory import MemoryAccessor
from atarom.games.base import LivesAt, LivesRule, ModeTable, RomSettings, TitleRules
from atarom.games.score import ScoreLayout

# RAM offsets (ALE convention; aliased into the 128-byte RIOT RAM).
SCORE_HI = 0xD0
SCORE_MID = 0xCE
SCORE_LO = 0xCC
LIVES_ADDR = 0x98  # lives - 1
ANIMATION_ADDR = 0xE4  # 0x3F once the death animation has finished
MODE_ADDR = 0xCC  # game number + 1 while the select screen is shown
PLAYERS_ADDR = 0xE6  # 0 for one player


class Pacman(RomSettings):
    """
    Pac-Man (Atari, 1982).

    The game ends on the last life once the death animation counter
    reaches 0x3F.  Mode selection cycles through one- and two-player
    variants of eight games; a mode is only reached when the one-player
    flag is also set.  The left difficulty switch sets the power-pill
    duration.
    """

    rules = TitleRules(
        name="pacman",
        score=ScoreLayout(addresses=(SCORE_HI, SCORE_MID, SCORE_LO)),
        lives=LivesRule(address=LIVES_ADDR, offset=1),
        terminal=LivesAt(1),
        minimal_actions=CARDINAL,
        modes=ModeTable(address=MODE_ADDR, modes=tuple(range(8)), select_frames=2),
        difficulties=(0, 1),
        initial_lives=4,
    )

    def _is_terminal(
        self, memory: MemoryAccessor, raw_lives: int, lives: int, score: int
    ) -> bool:
        return super()._is_terminal(
            memory, raw_lives, lives, score
        ) and memory.read_byte(ANIMATION_ADDR) == 0x3F

    def _mode_reached(self, memory: MemoryAccessor, mode: int) -> bool:
        game = (memory.read_byte(MODE_ADDR) - 1) & 0xFF
        return game == mode and memory.read_byte(PLAYERS_ADDR) == 0
