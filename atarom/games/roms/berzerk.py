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

"""Berzerk — score, lives and mode rules."""

from atarom.core.actions import FULL
from atarom.games.base import LivesRule, ModeTable, RawLivesAt, RomSettings, TitleRules
from atarom.games.score import ScoreLayout

# RAM offsets (ALE convention; aliased into the 128-byte RIOT RAM).
SCORE_HI = 0x5D  # hundred-thousands and ten-thousands
SCORE_MID = 0x5E  # thousands and hundreds
SCORE_LO = 0x5F  # tens and ones
LIVES_ADDR = 0xDA  # lives - 1; wraps to 0xFF on game over
GAME_OVER = 0xFF
MODE_ADDR = 0x80

# Modes 1-12 counted in packed decimal: 0x01 ... 0x09, 0x10, 0x11, 0x12.
MODES = tuple(range(1, 10)) + (0x10, 0x11, 0x12)


class Berzerk(RomSettings):
    """
    Berzerk: the life byte underflowing to 0xFF marks the end of the game.

    The wrapped byte is reported as 0 lives rather than 0xFF + 1, so a
    finished game never shows more lives than it started with.
    """

    rules = TitleRules(
        name="berzerk",
        score=ScoreLayout(addresses=(SCORE_HI, SCORE_MID, SCORE_LO)),
        lives=LivesRule(address=LIVES_ADDR, offset=1, sentinel=GAME_OVER),
        terminal=RawLivesAt(GAME_OVER),
        minimal_actions=FULL,
        modes=ModeTable(
            address=MODE_ADDR, modes=MODES, select_frames=2, settle_noops=20
        ),
        initial_lives=3,
    )
