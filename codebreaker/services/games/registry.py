import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple

from .errors import GameNotFoundError, InvalidGuessError
from .scoring import score_guess
from .secret_generator import SecretGenerator

logger = logging.getLogger(__name__)

DEFAULT_CODE_LENGTH = 4
DEFAULT_COLORS = 6
DEFAULT_ATTEMPTS = 10


@dataclass
class Game:
    secret: Tuple[int, ...] = field(repr=False)
    code_length: int
    colors: int
    attempts_max: int
    attempts_left: int

    def public_view(self) -> dict:
        return {
            'codeLength': self.code_length,
            'colors': self.colors,
            'attemptsMax': self.attempts_max,
            'attemptsLeft': self.attempts_left,
        }


@dataclass(frozen=True)
class GuessOutcome:
    """Feedback for one scored guess.

    Concrete outcomes are Ongoing, Won and Lost. Only Lost carries the
    secret.
    """
    exact: int
    partial: int
    attempts_left: int

    won = False
    lost = False
    status = 'ongoing'

    def to_dict(self) -> dict:
        return {
            'exact': self.exact,
            'partial': self.partial,
            'attemptsLeft': self.attempts_left,
            'won': self.won,
            'lost': self.lost,
        }


@dataclass(frozen=True)
class Ongoing(GuessOutcome):
    pass


@dataclass(frozen=True)
class Won(GuessOutcome):
    won = True
    status = 'won'


@dataclass(frozen=True)
class Lost(GuessOutcome):
    secret: Tuple[int, ...] = ()

    lost = True
    status = 'lost'

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['secret'] = list(self.secret)
        return data


def _resolve(value, default: int, limit: Optional[int]) -> int:
    """Apply the default for absent/non-positive values, then the cap."""
    if value is None or value <= 0:
        value = default
    if limit and limit > 0 and value > limit:
        value = limit
    return value


class GameRegistry:
    """In-memory store of every game created by this process.

    A single lock guards the id -> Game map and every read or write of a
    game's attempt counter. Games are never evicted.
    """

    def __init__(
        self,
        generator: Optional[SecretGenerator] = None,
        max_code_length: Optional[int] = None,
        max_colors: Optional[int] = None,
        max_attempts: Optional[int] = None,
    ):
        self.generator = generator or SecretGenerator()
        self.max_code_length = max_code_length
        self.max_colors = max_colors
        self.max_attempts = max_attempts
        self._games: Dict[str, Game] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config) -> 'GameRegistry':
        return cls(
            max_code_length=int(config.get('MAX_CODE_LENGTH', 0)),
            max_colors=int(config.get('MAX_COLORS', 0)),
            max_attempts=int(config.get('MAX_ATTEMPTS', 0)),
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def __contains__(self, game_id) -> bool:
        with self._lock:
            return game_id in self._games

    def create_game(self, code_length=None, colors=None, attempts=None) -> Tuple[str, dict]:
        code_length = _resolve(code_length, DEFAULT_CODE_LENGTH, self.max_code_length)
        colors = _resolve(colors, DEFAULT_COLORS, self.max_colors)
        attempts = _resolve(attempts, DEFAULT_ATTEMPTS, self.max_attempts)

        secret = self.generator.generate(code_length, colors)
        game = Game(
            secret=tuple(secret),
            code_length=code_length,
            colors=colors,
            attempts_max=attempts,
            attempts_left=attempts,
        )
        game_id = self.generator.new_id()
        with self._lock:
            while game_id in self._games:
                game_id = self.generator.new_id()
            self._games[game_id] = game
            view = game.public_view()
        logger.info(
            f"[new_game] id={game_id} code_length={code_length} colors={colors} attempts={attempts}"
        )
        return game_id, view

    def get_game(self, game_id: str) -> dict:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                raise GameNotFoundError(game_id)
            return game.public_view()

    def submit_guess(self, game_id: str, guess: Sequence[int]) -> GuessOutcome:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                raise GameNotFoundError(game_id)
            if len(guess) != game.code_length:
                raise InvalidGuessError(game.code_length, len(guess))

            exact, partial = score_guess(game.secret, guess)
            if game.attempts_left > 0:
                game.attempts_left -= 1
            attempts_left = game.attempts_left

            if exact == game.code_length:
                outcome = Won(exact, partial, attempts_left)
            elif attempts_left <= 0:
                outcome = Lost(exact, partial, attempts_left, secret=game.secret)
            else:
                outcome = Ongoing(exact, partial, attempts_left)

        logger.info(
            f"[guess] id={game_id} exact={exact} partial={partial} "
            f"attempts_left={attempts_left} status={outcome.status}"
        )
        return outcome
