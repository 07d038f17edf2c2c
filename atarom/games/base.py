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

"""Declarative per-title rules and the engine that interprets them."""

import copy
from dataclasses import dataclass

import jax.numpy as jnp

from atarom.core.actions import Action
from atarom.core.control import ControlPort
from atarom.core.memory import MemoryAccessor
from atarom.core.state import GameState, StateReader, StateWriter, new_game_state
from atarom.errors import UnsupportedModeError
from atarom.games.mode_switch import ModeSwitchParams, ModeSwitchResult, switch_mode
from atarom.games.score import ScoreLayout, read_score


@dataclass(frozen=True)
class LivesRule:
    """
    How a title stores its life counter.

    Parameters
    ----------
    address : int | None
        RAM offset of the life byte. `None` for titles without lives, which
        always report `constant`.
    mask : int
        Bits of the life byte that hold the counter; the rest encode
        unrelated state.
    offset : int
        Added to the masked byte (titles that store lives minus one).
    sentinel : int | None
        Masked value that marks "no lives left" (e.g. `0xFF` after the
        counter wrapped past zero). Reported as `0` lives.
    constant : int
        Lives reported when `address` is `None`.
    """

    address: int | None = None
    mask: int = 0xFF
    offset: int = 0
    sentinel: int | None = None
    constant: int = 1

    def raw(self, memory: MemoryAccessor) -> int:
        """Masked life byte, or `constant` for titles without lives."""
        if self.address is None:
            return self.constant
        return memory.read_byte(self.address) & self.mask

    def count(self, raw: int) -> int:
        """Convert the masked life byte into a life count."""
        if self.address is None:
            return self.constant
        if self.sentinel is not None and raw == self.sentinel:
            return 0
        return raw + self.offset


@dataclass(frozen=True)
class LivesAt:
    """Terminal once the decoded life count equals `value`."""

    value: int

    def __call__(self, raw_lives: int, lives: int, score: int) -> bool:
        return lives == self.value


@dataclass(frozen=True)
class RawLivesAt:
    """Terminal once the masked life byte equals `value` (sentinel markers)."""

    value: int

    def __call__(self, raw_lives: int, lives: int, score: int) -> bool:
        return raw_lives == self.value


@dataclass(frozen=True)
class ScoreAt:
    """
    Terminal once the score equals `value`.

    Used as a stand-in for "game completed" by titles whose real end state
    cannot be read from memory; the maximum clamped score is the only
    observable proxy.
    """

    value: int

    def __call__(self, raw_lives: int, lives: int, score: int) -> bool:
        return score == self.value


TerminalRule = LivesAt | RawLivesAt | ScoreAt


@dataclass(frozen=True)
class ModeTable:
    """
    Game variants reachable with the select switch.

    Parameters
    ----------
    address : int
        RAM offset of the mode byte.
    modes : tuple[int, ...]
        External mode identifiers, default mode first.
    select_frames : int
        Frames to hold select per pulse.
    settle_noops : int
        Idle steps before the first mode read.
    counter_step : int
        Mode byte value per external mode unit (`2` when the byte also
        carries a player-count bit).
    """

    address: int
    modes: tuple[int, ...]
    select_frames: int
    settle_noops: int = 0
    counter_step: int = 1

    def counter(self, mode: int) -> int:
        """Mode byte value that corresponds to external `mode`."""
        return mode * self.counter_step


@dataclass(frozen=True)
class TitleRules:
    """
    Everything that distinguishes one title from another.

    Parameters
    ----------
    name : str
        Registry name, e.g. `"zaxxon"`.
    score : ScoreLayout
        Score bytes and scale.
    lives : LivesRule
        Life counter decoding.
    terminal : TerminalRule
        End-of-game predicate over `(raw_lives, lives, score)`.
    minimal_actions : frozenset[Action]
        Actions the title's control scheme distinguishes.
    modes : ModeTable | None
        Selectable variants; `None` when only the default mode exists.
    difficulties : tuple[int, ...]
        Difficulty switch settings, default first.
    starting_actions : tuple[Action, ...]
        Actions to inject right after a hard reset.
    initial_score : int
        Score baseline restored by `reset`.
    initial_lives : int
        Lives restored by `reset`.
    """

    name: str
    score: ScoreLayout
    lives: LivesRule
    terminal: TerminalRule
    minimal_actions: frozenset[Action]
    modes: ModeTable | None = None
    difficulties: tuple[int, ...] = (0,)
    starting_actions: tuple[Action, ...] = ()
    initial_score: int = 0
    initial_lives: int = 1


class RomSettings:
    """
    Generic game-state adapter driven by a `TitleRules` record.

    Subclasses set the class attribute `rules`.  Titles whose terminal or
    mode checks need more than one byte override `_is_terminal` or
    `_mode_reached`; everything else is shared.

    The derived state lives in an immutable `GameState`.  `step` is the only
    operation that reads memory, and it replaces the record wholesale, so
    `clone` can hand the same record to the copy.
    """

    rules: TitleRules

    def __init__(self) -> None:
        self.reset()

    @property
    def name(self) -> str:
        """Registry name of the title."""
        return self.rules.name

    @property
    def state(self) -> GameState:
        """Current derived state record."""
        return self._state

    @property
    def score(self) -> int:
        """
        Score decoded by the last `step`.

        Returns
        -------
        score : int
            Non-negative score, or the title's baseline after `reset`.
        """
        return int(self._state.score)

    @property
    def lives(self) -> int:
        """
        Lives decoded by the last `step`.

        Returns
        -------
        lives : int
            Remaining lives. Titles without a life counter report a constant.
        """
        return int(self._state.lives)

    def reset(self) -> None:
        """Restore the title's baseline score and lives; clear reward and terminal."""
        self._state = new_game_state(
            score=self.rules.initial_score, lives=self.rules.initial_lives
        )

    def step(self, memory: MemoryAccessor) -> None:
        """
        Decode score, lives and terminal status from memory.

        Parameters
        ----------
        memory : MemoryAccessor
            Machine memory after the emulated transition.

        Raises
        ------
        ScoreDecodeError
            If the score bytes are not packed decimal.  State is left as it
            was before the call.
        """
        score = read_score(memory, self.rules.score)
        raw_lives = self.rules.lives.raw(memory)
        lives = self.rules.lives.count(raw_lives)
        terminal = self._is_terminal(memory, raw_lives, lives, score)
        self._state = self._state.replace(
            reward=jnp.int32(score - int(self._state.score)),
            score=jnp.int32(score),
            terminal=jnp.bool_(terminal),
            lives=jnp.int32(lives),
        )

    def _is_terminal(
        self, memory: MemoryAccessor, raw_lives: int, lives: int, score: int
    ) -> bool:
        return self.rules.terminal(raw_lives, lives, score)

    def is_terminal(self) -> bool:
        """
        Whether the last `step` observed the end of the game.

        Returns
        -------
        terminal : bool
            `True` once the title's end-of-game condition held.
        """
        return bool(self._state.terminal)

    def get_reward(self) -> int:
        """
        Score change produced by the last `step`.

        Returns
        -------
        reward : int
            New score minus previous score; may be negative.
        """
        return int(self._state.reward)

    def is_minimal(self, action: Action) -> bool:
        """Whether `action` belongs to the title's reduced control scheme."""
        return action in self.rules.minimal_actions

    def get_minimal_action_set(self) -> tuple[Action, ...]:
        """Minimal actions in enum order."""
        return tuple(sorted(self.rules.minimal_actions))

    def get_starting_actions(self) -> tuple[Action, ...]:
        """
        Actions to inject right after a hard reset.

        Returns
        -------
        actions : tuple[Action, ...]
            Ordered actions; empty for titles that start on their own.
        """
        return self.rules.starting_actions

    def get_available_modes(self) -> tuple[int, ...]:
        """
        Game modes accepted by `set_mode`.

        Returns
        -------
        modes : tuple[int, ...]
            Mode identifiers, default first. `(0,)` for single-mode titles.
        """
        if self.rules.modes is None:
            return (0,)
        return self.rules.modes.modes

    def get_default_mode(self) -> int:
        """
        Mode the title boots into.

        Returns
        -------
        mode : int
            First entry of `get_available_modes()`.
        """
        return self.get_available_modes()[0]

    def get_available_difficulties(self) -> tuple[int, ...]:
        """
        Difficulty switch settings the title supports.

        Returns
        -------
        difficulties : tuple[int, ...]
            Difficulty identifiers, default first.
        """
        return self.rules.difficulties

    def get_default_difficulty(self) -> int:
        """
        Difficulty the title boots into.

        Returns
        -------
        difficulty : int
            First entry of `get_available_difficulties()`.
        """
        return self.rules.difficulties[0]

    def set_mode(
        self,
        mode: int,
        memory: MemoryAccessor,
        control: ControlPort,
        params: ModeSwitchParams | None = None,
    ) -> ModeSwitchResult | None:
        """
        Bring the emulated title into `mode`.

        Parameters
        ----------
        mode : int
            One of `get_available_modes()`.
        memory : MemoryAccessor
            Live view of machine memory; re-read after every select pulse.
        control : ControlPort
            Input port used to settle, pulse select and soft-reset.
        params : ModeSwitchParams (optional)
            Retry ceiling. Defaults to `ModeSwitchParams()`.

        Returns
        -------
        result : ModeSwitchResult | None
            Outcome of the switch, or `None` for titles whose only mode is
            the default one (nothing to do).

        Raises
        ------
        UnsupportedModeError
            If `mode` is not available. Raised before any input is sent.
        ModeSwitchTimeoutError
            If the mode byte never reaches the target.
        """
        available = self.get_available_modes()
        if mode not in available:
            raise UnsupportedModeError(self.rules.name, mode, available)

        table = self.rules.modes
        if table is None:
            return None

        return switch_mode(
            lambda: self._mode_reached(memory, mode),
            control,
            mode=mode,
            select_frames=table.select_frames,
            settle_noops=table.settle_noops,
            params=params or ModeSwitchParams(),
        )

    def _mode_reached(self, memory: MemoryAccessor, mode: int) -> bool:
        table = self.rules.modes
        return memory.read_byte(table.address) == table.counter(mode)

    def save_state(self, writer: StateWriter) -> None:
        """Write reward, score, terminal and lives, in that order."""
        writer.put_int(self._state.reward)
        writer.put_int(self._state.score)
        writer.put_bool(self._state.terminal)
        writer.put_int(self._state.lives)

    def load_state(self, reader: StateReader) -> None:
        """
        Restore the fields written by `save_state`.

        Raises
        ------
        StateFormatError
            If the record does not hold int, int, bool, int at the reader's
            position.  State is left unchanged.
        """
        reward = reader.get_int()
        score = reader.get_int()
        terminal = reader.get_bool()
        lives = reader.get_int()
        self._state = GameState(
            reward=jnp.int32(reward),
            score=jnp.int32(score),
            terminal=jnp.bool_(terminal),
            lives=jnp.int32(lives),
        )

    def clone(self) -> "RomSettings":
        """Return a detached adapter holding the same state snapshot."""
        return copy.copy(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(score={self.score}, reward={self.get_reward()}, "
            f"lives={self.lives}, terminal={self.is_terminal()})"
        )
