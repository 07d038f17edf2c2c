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

"""Select-button state machine that cycles a title into a requested mode."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from atarom.core.actions import Action
from atarom.core.control import ControlPort
from atarom.errors import ModeSwitchTimeoutError

logger = logging.getLogger(__name__)


class ModePhase(Enum):
    """Phases of a mode switch, in the order they are entered."""

    SETTLING = "settling"
    POLLING = "polling"
    CONFIRMED = "confirmed"


@dataclass(frozen=True)
class ModeSwitchParams:
    """
    Hyper-parameters for `switch_mode`.

    Parameters
    ----------
    max_select_presses : int
        Select pulses allowed before the switch is abandoned.  Mode counters
        are single bytes, so `256` pulses visit every value at least once.
    """

    max_select_presses: int = 256


@dataclass(frozen=True)
class ModeSwitchResult:
    """
    Outcome of a successful mode switch.

    Parameters
    ----------
    phase : ModePhase
        Always `ModePhase.CONFIRMED`.
    presses : int
        Select pulses issued while polling.
    """

    phase: ModePhase
    presses: int


def switch_mode(
    reached: Callable[[], bool],
    control: ControlPort,
    *,
    mode: int,
    select_frames: int,
    settle_noops: int = 0,
    params: ModeSwitchParams = ModeSwitchParams(),
) -> ModeSwitchResult:
    """
    Press select until `reached()` holds, then soft-reset.

    `SETTLING` injects `settle_noops` idle steps so a pending title
    transition finishes before the mode byte is read.  `POLLING` checks
    `reached()` and, while it is false, holds select for `select_frames`
    frames.  `CONFIRMED` issues exactly one soft reset to commit the mode.

    Parameters
    ----------
    reached : Callable[[], bool]
        Re-reads memory and reports whether the title is in the target mode.
    control : ControlPort
        Input port used for no-ops, select pulses and the soft reset.
    mode : int
        Target mode identifier, used for diagnostics.
    select_frames : int
        Frames to hold select per pulse.
    settle_noops : int (optional)
        Idle steps before polling. Default is `0`.
    params : ModeSwitchParams (optional)
        Retry ceiling. Defaults to `ModeSwitchParams()`.

    Returns
    -------
    result : ModeSwitchResult
        Final phase and number of select pulses.

    Raises
    ------
    ModeSwitchTimeoutError
        If the target mode is not observed within
        `params.max_select_presses` pulses.  No soft reset is issued.
    """
    logger.debug("mode %s: %s (%d no-ops)", mode, ModePhase.SETTLING.value, settle_noops)
    for _ in range(settle_noops):
        control.act(Action.NOOP, Action.PLAYER_B_NOOP)

    logger.debug("mode %s: %s", mode, ModePhase.POLLING.value)
    presses = 0
    while not reached():
        if presses >= params.max_select_presses:
            raise ModeSwitchTimeoutError(mode, presses)
        control.press_select(select_frames)
        presses += 1

    control.soft_reset()
    logger.debug(
        "mode %s: %s after %d select presses", mode, ModePhase.CONFIRMED.value, presses
    )
    return ModeSwitchResult(phase=ModePhase.CONFIRMED, presses=presses)
