class GameError(Exception):
    """Base class for errors raised by the game services.

    ``status_code`` is what the HTTP layer answers with.
    """
    status_code = 500


class RandomSourceError(GameError):
    """The OS entropy source could not produce random bytes."""
    status_code = 503


class GameNotFoundError(GameError):
    status_code = 404

    def __init__(self, game_id):
        super().__init__(f"game not found: {game_id}")
        self.game_id = game_id


class InvalidGuessError(GameError):
    status_code = 400

    def __init__(self, expected: int, got: int):
        super().__init__(f"invalid guess length: expected {expected}, got {got}")
        self.expected = expected
        self.got = got
