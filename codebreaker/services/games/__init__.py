"""Game domain services: secret generation, scoring and the game registry.

This package contains pure game logic that is imported by HTTP routes and
socket handlers, keeping transport concerns separated from core game
mechanics.
"""
from .errors import GameError, GameNotFoundError, InvalidGuessError, RandomSourceError
from .registry import GameRegistry, GuessOutcome, Lost, Ongoing, Won
from .scoring import score_guess
from .secret_generator import SecretGenerator

__all__ = [
    'GameError',
    'GameNotFoundError',
    'InvalidGuessError',
    'RandomSourceError',
    'GameRegistry',
    'GuessOutcome',
    'Ongoing',
    'Won',
    'Lost',
    'score_guess',
    'SecretGenerator',
]
