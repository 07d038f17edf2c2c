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

"""Keystone Kapers — score and terminal rules."""

from atarom.core.actions import NO_DIAGONAL_FIRE, Action
from atarom.core.memory import MemoryAccessor
from atarom.games.base import LivesAt, LivesRule, RomSettings, TitleRules
from atarom.games.score import ScoreLayout

# RAM offsets (ALE convention; aliased into the 128-byte RIOT RAM).
SCORE_HI = 0x9B
SCORE_LO = 0x9C
LIVES_ADDR = 0x96
PHASE_ADDR = 0x88  # 0x00 once the last life's animation has finished


class KeystoneKapers(RomSettings):
    """
    Keystone Kapers.

    Lives read as zero while the final death plays out, so the game only
    ends once the phase byte also returns to zero.  The title shows zero
    lives until the reset switch is pressed, hence the `RESET` starting
    action.
    """

    rules = TitleRules(
        name="keystone_kapers",
        score=ScoreLayout(addresses=(SCORE_HI, SCORE_LO)),
        lives=LivesRule(address=LIVES_ADDR),
        terminal=LivesAt(0),
        minimal_actions=NO_DIAGONAL_FIRE,
        starting_actions=(Action.RESET,),
        initial_lives=3,
    )

    def _is_terminal(
        self, memory: MemoryAccessor, raw_lives: int, lives: int, score: int
    ) -> bool:
        return super()._is_terminal(
            memory, raw_lives, lives, score
        ) and memory.read_byte(PHASE_ADDR) == 0x00
