"""Maps typed commands to game actions."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Literal

from themine.core.types import Vector
from themine.domain.rules import DOWN, LEFT, RIGHT, UP

CommandType = Literal["move", "enter", "reset", "quit"]


@dataclass(frozen=True, slots=True)
class Command:
    command_type: CommandType
    vector: Vector | None = None


MOVE_KEYS: Dict[str, Vector] = {
    "w": UP,
    "up": UP,
    "\x1b[a": UP,
    "s": DOWN,
    "down": DOWN,
    "\x1b[b": DOWN,
    "a": LEFT,
    "left": LEFT,
    "\x1b[d": LEFT,
    "d": RIGHT,
    "right": RIGHT,
    "\x1b[c": RIGHT,
}

# Arrow keys arrive as three-character escape sequences; match them before single characters.
_TOKEN = re.compile(r"\x1b\[[abcd]|.", re.DOTALL)

_ACTION_KEYS: Dict[str, CommandType] = {
    "": "enter",
    "enter": "enter",
    "r": "reset",
    "reset": "reset",
    "q": "quit",
    "quit": "quit",
}


def parse_command(token: str) -> Command | None:
    """Return the command for one key token, or None if the key is unbound."""
    key = token.strip().lower()
    if key in MOVE_KEYS:
        return Command("move", MOVE_KEYS[key])
    if key in _ACTION_KEYS:
        return Command(_ACTION_KEYS[key])
    return None


def parse_line(line: str) -> List[Command]:
    """Split a typed line into commands; 'wwd' is three moves, a blank line is Enter."""
    stripped = line.strip()
    whole = parse_command(stripped)
    if whole is not None:
        return [whole]
    commands: List[Command] = []
    for token in _TOKEN.findall(stripped.lower()):
        command = parse_command(token)
        if command is not None and command.command_type == "move":
            commands.append(command)
    return commands
