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

"""Controller actions, numbered as in the Arcade Learning Environment."""

from enum import IntEnum


class Action(IntEnum):
    """
    Closed set of controller actions.

    Values 0-17 are the player A joystick actions used as agent action
    indices.  `PLAYER_B_NOOP` is the idle second controller passed alongside
    player A input, and `RESET` / `SELECT` are console switches.
    """

    NOOP = 0
    FIRE = 1
    UP = 2
    RIGHT = 3
    LEFT = 4
    DOWN = 5
    UPRIGHT = 6
    UPLEFT = 7
    DOWNRIGHT = 8
    DOWNLEFT = 9
    UPFIRE = 10
    RIGHTFIRE = 11
    LEFTFIRE = 12
    DOWNFIRE = 13
    UPRIGHTFIRE = 14
    UPLEFTFIRE = 15
    DOWNRIGHTFIRE = 16
    DOWNLEFTFIRE = 17
    PLAYER_B_NOOP = 18
    RESET = 40
    SELECT = 46


# Joystick without the button: NOOP + four directions.
CARDINAL: frozenset[Action] = frozenset(
    {Action.NOOP, Action.UP, Action.RIGHT, Action.LEFT, Action.DOWN}
)

# NOOP, FIRE and the four directions.
CARDINAL_FIRE: frozenset[Action] = CARDINAL | {Action.FIRE}

# Everything except the diagonal + fire combinations (14 actions).
NO_DIAGONAL_FIRE: frozenset[Action] = CARDINAL_FIRE | {
    Action.UPRIGHT,
    Action.UPLEFT,
    Action.DOWNRIGHT,
    Action.DOWNLEFT,
    Action.UPFIRE,
    Action.RIGHTFIRE,
    Action.LEFTFIRE,
    Action.DOWNFIRE,
}

# The full 18-action joystick set.
FULL: frozenset[Action] = frozenset(Action(i) for i in range(18))
