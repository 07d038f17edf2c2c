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

"""Pitfall II: Lost Caverns — score rules."""

from atarom.core.actions import FULL, Action
from atarom.games.base import LivesRule, RomSettings, ScoreAt, TitleRules
from atarom.games.score import ScoreLayout

# RAM offsets (ALE convention; aliased into the 128-byte RIOT RAM).
SCORE_HI = 0xC7
SCORE_MID = 0xC8
SCORE_LO = 0xC9

STARTING_SCORE = 4000
MAX_SCORE = 199000  # the game clamps here instead of wrapping


class Pitfall2(RomSettings):
    """
    Pitfall II: Lost Caverns.

    There are no lives: falling sends Harry back to the last checkpoint and
    costs points, which shows up as a negative reward.  Completing the
    adventure is not visible in memory, so reaching the maximum score
    stands in for the end of the game.  The title waits in an attract state
    until the joystick is pushed, hence the `UP` starting action.
    """

    rules = TitleRules(
        name="pitfall2",
        score=ScoreLayout(addresses=(SCORE_HI, SCORE_MID, SCORE_LO)),
        lives=LivesRule(constant=1),
        terminal=ScoreAt(MAX_SCORE),
        minimal_actions=FULL,
        starting_actions=(Action.UP,),
        initial_score=STARTING_SCORE,
        initial_lives=1,
    )
