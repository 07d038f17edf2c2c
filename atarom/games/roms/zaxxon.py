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

"""Zaxxon — score, masked lives and mode rules."""

from atarom.core.actions import FULL
from atarom.games.base import LivesAt, LivesRule, ModeTable, RomSettings, TitleRules
from atarom.games.score import ScoreLayout

# RAM offsets (ALE convention; aliased into the 128-byte RIOT RAM).
SCORE_HI = 0xE8
SCORE_LO = 0xE9
SCORE_SCALE = 100  # the two lowest digits are always zero and not stored
LIVES_ADDR = 0xEA  # low three bits only
LIVES_MASK = 0x07
MODE_ADDR = 0x82


class Zaxxon(RomSettings):
    """
    Zaxxon.

    Lives read as zero until the game has been reset once after loading,
    so drivers must reset the machine before stepping.
    """

    rules = TitleRules(
        name="zaxxon",
        score=ScoreLayout(addresses=(SCORE_HI, SCORE_LO), scale=SCORE_SCALE),
        lives=LivesRule(address=LIVES_ADDR, mask=LIVES_MASK),
        terminal=LivesAt(0),
        minimal_actions=FULL,
        modes=ModeTable(address=MODE_ADDR, modes=(0, 8, 16, 24), select_frames=10),
        initial_lives=5,
    )
