"""
Line protocol spoken with the game server.

  settings <type> <value>
  update <player> <type> <value>
  action move <time ms>     -> place_move <x> <y>

stdout carries only protocol replies; diagnostics go through logging.
"""
import logging
import sys
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from ai.agent import UltimateBot
from config import Config
from game import Board
from game.rules import PLAYABLE, CLOSED, PLAYERS, EMPTY, opponent_of

logger = logging.getLogger(__name__)

FIELD_VALUES = (EMPTY,) + PLAYERS
MACROBOARD_VALUES = (PLAYABLE, CLOSED) + PLAYERS


class ProtocolError(ValueError):
    """Malformed command or value."""


@dataclass
class BotSettings:
    timebank: Optional[int] = None
    time_per_move: Optional[int] = None
    player_names: List[str] = field(default_factory=list)
    your_bot: Optional[str] = None
    your_botid: int = 1

    @property
    def opponent_id(self) -> int:
        return opponent_of(self.your_botid)


def parse_int(value: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ProtocolError(f"Not an integer: {value!r}") from None


def parse_cells(value: str, count: int, allowed) -> List[int]:
    cells = [parse_int(v) for v in value.split(',')]
    if len(cells) != count:
        raise ProtocolError(f"Expected {count} values, got {len(cells)}")
    for v in cells:
        if v not in allowed:
            raise ProtocolError(f"Unexpected cell value {v}")
    return cells


class BotIO:
    """Parses server commands and answers move requests."""

    def __init__(self, config: Config = None, out: TextIO = None):
        self.config = config or Config()
        self.out = out if out is not None else sys.stdout
        self.settings = BotSettings()
        self.board = Board()
        self.bot = UltimateBot(self.settings.your_botid, self.config)

    def loop(self, stream: TextIO = None):
        stream = stream if stream is not None else sys.stdin
        for line in stream:
            self.process_line(line)

    def process_line(self, line: str):
        command = line.split()
        if not command:
            return
        try:
            self.dispatch(command)
        except ProtocolError as e:
            logger.warning("Ignoring <%s>: %s", line.strip(), e)

    def dispatch(self, command: List[str]):
        name = command[0]
        if name == "action":
            self._require(command, 3)
            self.action(command[1], parse_int(command[2]))
        elif name == "update":
            self._require(command, 4)
            self.update(command[1], command[2], command[3])
        elif name == "settings":
            self._require(command, 3)
            self.setting(command[1], command[2])
        else:
            logger.warning("Unknown command <%s>.", name)

    def action(self, type_: str, time_left: int):
        if type_ != "move":
            logger.warning("Unknown action <%s>.", type_)
            return

        result = self.bot.select_action(self.board, self.settings.your_botid,
                                        time_left=time_left, time_per_move=self.settings.time_per_move)
        if not result.found:
            logger.error("No move to play in round %d: game already decided", self.board.round)
            return

        x, y = result.move
        self.out.write(f"place_move {x} {y}\n")
        self.out.flush()

    def update(self, player: str, type_: str, value: str):
        if player != "game" and player != self.settings.your_bot:
            return  # not my update

        if type_ == "round":
            self.board.round = parse_int(value)
        elif type_ == "move":
            self.board.move = parse_int(value)
        elif type_ == "field":
            self.board.set_field(parse_cells(value, 81, FIELD_VALUES))
        elif type_ == "macroboard":
            self.board.set_macroboard(parse_cells(value, 9, MACROBOARD_VALUES))
        else:
            logger.warning("Unknown update <%s>.", type_)

    def setting(self, type_: str, value: str):
        if type_ == "timebank":
            self.settings.timebank = parse_int(value)
        elif type_ == "time_per_move":
            self.settings.time_per_move = parse_int(value)
        elif type_ == "player_names":
            self.settings.player_names = value.split(',')
        elif type_ == "your_bot":
            self.settings.your_bot = value
        elif type_ == "your_botid":
            bot_id = parse_int(value)
            if bot_id not in PLAYERS:
                raise ProtocolError(f"Bot id must be 1 or 2, got {bot_id}")
            self.settings.your_botid = bot_id
            self.bot.bot_id = bot_id
        else:
            logger.warning("Unknown setting <%s>.", type_)

    @staticmethod
    def _require(command: List[str], length: int):
        if len(command) < length:
            raise ProtocolError(f"Expected {length} tokens, got {len(command)}")
