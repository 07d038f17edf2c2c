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

"""Per-title game-state adapters, looked up by name or game id."""

from atarom.games.base import (
    LivesAt,
    LivesRule,
    ModeTable,
    RawLivesAt,
    RomSettings,
    ScoreAt,
    TitleRules,
)
from atarom.games.mode_switch import (
    ModePhase,
    ModeSwitchParams,
    ModeSwitchResult,
    switch_mode,
)
from atarom.games.registry import _GAMES, ENV_IDS, GAME_IDS
from atarom.games.score import ScoreLayout, decode_bcd, read_score

__all__ = [
    "ENV_IDS",
    "GAME_IDS",
    "LivesAt",
    "LivesRule",
    "ModePhase",
    "ModeSwitchParams",
    "ModeSwitchResult",
    "ModeTable",
    "RawLivesAt",
    "RomSettings",
    "ScoreAt",
    "ScoreLayout",
    "TitleRules",
    "decode_bcd",
    "get_settings",
    "read_score",
    "switch_mode",
]


def get_settings(game: int | str) -> RomSettings:
    """
    Create a fresh adapter for one title.

    Parameters
    ----------
    game : int | str
        Game id (see `GAME_IDS`), ALE game name, e.g. `"zaxxon"`, or
        environment id, e.g. `"atari/zaxxon-v0"` (see `ENV_IDS`).

    Returns
    -------
    settings : RomSettings
        Newly constructed adapter, already reset.

    Raises
    ------
    ValueError
        If `game` names no supported title.
    """
    if isinstance(game, str):
        key = game.lower()
        if key in GAME_IDS:
            game = GAME_IDS[key]
        elif key in ENV_IDS:
            game = ENV_IDS[key]
        else:
            raise ValueError(
                f"Unknown game {game!r}. Available games: {sorted(GAME_IDS)}"
            )

    if not 0 <= game < len(_GAMES):
        raise ValueError(
            f"Unknown game_id {game!r}. Valid ids are 0 to {len(_GAMES) - 1}."
        )

    return _GAMES[game].settings_cls()
