from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Union

from .core import Action, GameSnapshot, GameState, TetrisEngine


# Single-character command stream, e.g. a recorded session or a serial link.
# "x" stands for a reset and is kept as None in parsed scripts. "r" received
# after game over restarts the game, see replay().
COMMAND_CHARS: Dict[str, Optional[Action]] = {
    "l": Action.LEFT,
    "r": Action.RIGHT,
    "u": Action.ROTATE,
    "d": Action.SOFT_DROP,
    "s": Action.HARD_DROP,
    "x": None,
}

Command = Union[Action, None]


def parse_commands(text: str, strict: bool = False) -> List[Command]:
    """Translate a command stream into engine commands.

    Unknown characters are skipped, as a controller link would. With
    ``strict=True`` they raise ``ValueError`` instead (whitespace is always
    skipped).
    """
    commands: List[Command] = []
    for i, char in enumerate(text):
        key = char.lower()
        if key not in COMMAND_CHARS:
            if strict and not char.isspace():
                raise ValueError(f"Unknown command {char!r} at position {i}")
            continue
        commands.append(COMMAND_CHARS[key])
    return commands


def replay(engine: TetrisEngine, commands: Iterable[Command]) -> GameSnapshot:
    """Apply commands in order and return the resulting snapshot."""
    for command in commands:
        if command is None:
            engine.reset()
        elif command == Action.RIGHT and engine.state == GameState.GAMEOVER:
            engine.reset()
        else:
            engine.apply(command)
    return engine.snapshot()
