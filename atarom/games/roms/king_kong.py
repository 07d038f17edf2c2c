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

"""King Kong — score, lives and mode rules."""

from atarom.core.actions import CARDINAL_FIRE
from atarom.games.base import LivesAt, LivesRule, ModeTable, RomSettings, TitleRules
from atarom.games.score import ScoreLayout

# RAM offsets (ALE convention; aliased into the 128-byte RIOT RAM).
SCORE_HI = 0x82
SCORE_LO = 0x83
LIVES_ADDR = 0xEE
MODE_ADDR = 0xEC  # game number; odd values are the two-player variants


class KingKong(RomSettings):
    """
    King Kong.

    Eight game numbers exist, alternating one and two players.  Only the
    four single-player games are exposed, so external mode `m` maps to
    mode byte `2 * m`.  Modes change bomb speed and magic bombs.
    """

    rules = TitleRules(
        name="king_kong",
        score=ScoreLayout(addresses=(SCORE_HI, SCORE_LO)),
        lives=LivesRule(address=LIVES_ADDR),
        terminal=LivesAt(0),
        minimal_actions=CARDINAL_FIRE,
        modes=ModeTable(
            address=MODE_ADDR, modes=(0, 1, 2, 3), select_frames=2, counter_step=2
        ),
        initial_lives=3,
    )
