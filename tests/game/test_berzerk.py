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

"""Unit tests for atarom.games.roms.berzerk — sentinel lives and mode switching.

Run with:
    pytest tests/game/test_berzerk.py -v
"""

import pytest

from atarom.core.actions import Action
from atarom.core.memory import RamView
from atarom.errors import UnsupportedModeError
from atarom.games.roms.berzerk import (
    LIVES_ADDR,
    MODE_ADDR,
    SCORE_HI,
    SCORE_LO,
    SCORE_MID,
    Berzerk,
)


def _ram(lives_byte, hi=0x00, mid=0x00, lo=0x00):
    return RamView.from_bytes(
        {SCORE_HI: hi, SCORE_MID: mid, SCORE_LO: lo, LIVES_ADDR: lives_byte}
    )


def test_reset_values():
    game = Berzerk()
    assert game.lives == 3
    assert game.score == 0
    assert not game.is_terminal()


def test_score_three_bytes():
    game = Berzerk()
    game.step(_ram(2, hi=0x01, mid=0x23, lo=0x50))
    assert game.score == 12350
    assert game.get_reward() == 12350


def test_lives_are_stored_minus_one():
    game = Berzerk()
    game.step(_ram(2))
    assert game.lives == 3
    game.step(_ram(0))
    assert game.lives == 1
    assert not game.is_terminal()


def test_underflow_sentinel_is_terminal():
    game = Berzerk()
    game.step(_ram(0xFF))
    assert game.is_terminal()
    # Wrapped byte reads as no lives left, not 0xFF + 1.
    assert game.lives == 0


def test_last_life_is_not_terminal():
    game = Berzerk()
    game.step(_ram(0x00))
    assert not game.is_terminal()
    assert game.lives == 1


def test_modes_are_packed_decimal_one_to_twelve():
    modes = Berzerk().get_available_modes()
    assert modes == (1, 2, 3, 4, 5, 6, 7, 8, 9, 0x10, 0x11, 0x12)
    assert Berzerk().get_default_mode() == 1


def test_set_mode_from_two_to_five(live_memory, fake_port, cycling):
    game = Berzerk()
    memory = live_memory({MODE_ADDR: 2})
    port = fake_port(memory, cycling(MODE_ADDR, 0x13))
    result = game.set_mode(5, memory, port)
    assert result.presses == 3
    assert port.count("act") == 20
    assert all(
        call == ("act", Action.NOOP, Action.PLAYER_B_NOOP) for call in port.calls[:20]
    )
    assert port.calls[20:] == [("select", 2)] * 3 + [("soft_reset",)]
    assert port.count("soft_reset") == 1


def test_set_mode_rejects_gap_in_decimal_modes(live_memory, fake_port):
    game = Berzerk()
    memory = live_memory({MODE_ADDR: 2})
    port = fake_port(memory)
    with pytest.raises(UnsupportedModeError, match="Available modes"):
        game.set_mode(0x0A, memory, port)
    assert port.calls == []
