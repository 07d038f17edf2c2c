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

"""Unit tests for the title registry and `get_settings`.

Run with:
    pytest tests/game/test_game_registry.py -v
"""

import pytest

from atarom.games import GAME_IDS, get_settings
from atarom.games.registry import _GAMES, ENV_IDS
from atarom.games.roms.zaxxon import Zaxxon


def test_games_list_indexed_by_game_id():
    for spec in _GAMES:
        assert _GAMES[spec.game_id].ale_name == spec.ale_name


def test_all_names_unique():
    names = [spec.ale_name for spec in _GAMES]
    assert len(names) == len(set(names))


def test_rules_name_matches_registry():
    for spec in _GAMES:
        assert spec.settings_cls.rules.name == spec.ale_name


def test_env_ids_format():
    assert ENV_IDS["atari/zaxxon-v0"] == GAME_IDS["zaxxon"]


def test_get_settings_by_name_and_id():
    assert isinstance(get_settings("zaxxon"), Zaxxon)
    assert isinstance(get_settings(GAME_IDS["zaxxon"]), Zaxxon)


def test_get_settings_unknown_raises():
    with pytest.raises(ValueError, match="Unknown game"):
        get_settings("not_a_game")
    with pytest.raises(ValueError, match="Unknown game_id"):
        get_settings(len(_GAMES))


def test_get_settings_by_env_id():
    assert isinstance(get_settings("atari/zaxxon-v0"), Zaxxon)


def test_get_settings_name_case_insensitive():
    assert isinstance(get_settings("ATARI/Zaxxon-v0"), Zaxxon)
    assert isinstance(get_settings("Zaxxon"), Zaxxon)


def test_get_settings_returns_fresh_instances():
    a = get_settings("atari/zaxxon-v0")
    b = get_settings("atari/zaxxon-v0")
    assert a is not b


def test_get_settings_unknown_env_id_raises():
    with pytest.raises(ValueError, match="Unknown game"):
        get_settings("atari/not_a_game-v0")
