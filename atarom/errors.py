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

"""Exceptions raised by the game-state adapters."""


class AtaromError(Exception):
    """Base class for all adapter errors."""


class UnsupportedModeError(AtaromError, ValueError):
    """
    Raised when `set_mode` is asked for a mode the title does not offer.

    Parameters
    ----------
    title : str
        Registry name of the title.
    mode : int
        Requested mode identifier.
    available : tuple of int
        Modes the title does offer.
    """

    def __init__(self, title: str, mode: int, available: tuple) -> None:
        self.title = title
        self.mode = mode
        self.available = tuple(available)
        super().__init__(
            f"Mode {mode!r} is not supported by {title!r}. "
            f"Available modes: {list(self.available)}"
        )


class ScoreDecodeError(AtaromError, ValueError):
    """Raised when score bytes are not valid packed decimal."""


class ModeSwitchTimeoutError(AtaromError, RuntimeError):
    """
    Raised when the polled mode never matches the target mode.

    Parameters
    ----------
    mode : int
        Requested mode identifier.
    presses : int
        Number of select pulses issued before giving up.
    """

    def __init__(self, mode: int, presses: int) -> None:
        self.mode = mode
        self.presses = presses
        super().__init__(
            f"Mode {mode!r} was not reached after {presses} select presses."
        )


class StateFormatError(AtaromError, ValueError):
    """Raised when a serialized state record does not match the fixed schema."""
