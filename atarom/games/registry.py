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

"""Game registry — closed set of supported titles, indexed by game id."""

from typing import NamedTuple

from atarom.games.base import RomSettings
from atarom.games.roms.berzerk import Berzerk
from atarom.games.roms.keystone_kapers import KeystoneKapers
from atarom.games.roms.king_kong import KingKong
from atarom.games.roms.pacman import Pacman
from atarom.games.roms.pitfall2 import Pitfall2
from atarom.games.roms.zaxxon import Zaxxon


class GameSpec(NamedTuple):
    """Registry entry for one supported title."""

    game_id: int
    ale_name: str
    settings_cls: type[RomSettings]


# Ordered list of supported titles; index == game_id.
_GAMES: list[GameSpec] = [
    GameSpec(game_id=0, ale_name="berzerk", settings_cls=Berzerk),
    GameSpec(game_id=1, ale_name="keystone_kapers", settings_cls=KeystoneKapers),
    GameSpec(game_id=2, ale_name="king_kong", settings_cls=KingKong),
    GameSpec(game_id=3, ale_name="pacman", settings_cls=Pacman),
    GameSpec(game_id=4, ale_name="pitfall2", settings_cls=Pitfall2),
    GameSpec(game_id=5, ale_name="zaxxon", settings_cls=Zaxxon),
]

# Maps ALE game name → game_id integer.
GAME_IDS: dict[str, int] = {g.ale_name: g.game_id for g in _GAMES}

# Maps canonical "atari/<name>-v0" identifier → game_id integer.
ENV_IDS: dict[str, int] = {f"atari/{name}-v0": idx for name, idx in GAME_IDS.items()}
