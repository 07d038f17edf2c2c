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

"""Unit tests for atarom.core.state — GameState and the flat state record.

Run with:
    pytest tests/core/test_state_record.py -v
"""

import dataclasses

import chex
import jax.numpy as jnp
import pytest

from atarom.core.state import StateReader, StateWriter, new_game_state
from atarom.errors import StateFormatError


def test_new_game_state_defaults():
    state = new_game_state()
    chex.assert_type(state.reward, jnp.int32)
    chex.assert_type(state.score, jnp.int32)
    chex.assert_type(state.lives, jnp.int32)
    assert int(state.reward) == 0
    assert int(state.score) == 0
    assert int(state.lives) == 1
    assert not bool(state.terminal)


def test_new_game_state_baseline():
    state = new_game_state(score=4000, lives=3)
    assert int(state.score) == 4000
    assert int(state.lives) == 3


def test_game_state_is_immutable():
    state = new_game_state()
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.score = jnp.int32(5)


def test_replace_returns_new_record():
    state = new_game_state()
    updated = state.replace(score=jnp.int32(10))
    assert int(state.score) == 0
    assert int(updated.score) == 10


def test_writer_records_in_order():
    writer = StateWriter()
    writer.put_int(-50)
    writer.put_int(1200)
    writer.put_bool(True)
    writer.put_int(2)
    assert writer.values == [-50, 1200, True, 2]


def test_writer_converts_jax_scalars():
    writer = StateWriter()
    writer.put_int(jnp.int32(7))
    writer.put_bool(jnp.bool_(False))
    assert writer.values == [7, False]
    assert type(writer.values[0]) is int
    assert type(writer.values[1]) is bool


def test_writer_values_is_a_copy():
    writer = StateWriter()
    writer.put_int(1)
    writer.values.append(99)
    assert writer.values == [1]


def test_reader_reads_positionally():
    reader = StateReader([3, 4, False, 5])
    assert reader.get_int() == 3
    assert reader.get_int() == 4
    assert reader.get_bool() is False
    assert not reader.exhausted
    assert reader.get_int() == 5
    assert reader.exhausted


def test_reader_rejects_bool_as_int():
    with pytest.raises(StateFormatError, match="Expected int"):
        StateReader([True]).get_int()


def test_reader_rejects_int_as_bool():
    with pytest.raises(StateFormatError, match="Expected bool"):
        StateReader([1]).get_bool()


def test_reader_rejects_short_record():
    reader = StateReader([1])
    reader.get_int()
    with pytest.raises(StateFormatError, match="holds only 1"):
        reader.get_int()


@pytest.mark.parametrize("value", [2**40, 2**31, -(2**31) - 1])
def test_reader_rejects_int_outside_int32(value):
    with pytest.raises(StateFormatError, match="int32 range"):
        StateReader([value]).get_int()


def test_reader_accepts_int32_bounds():
    reader = StateReader([-(2**31), 2**31 - 1])
    assert reader.get_int() == -(2**31)
    assert reader.get_int() == 2**31 - 1
