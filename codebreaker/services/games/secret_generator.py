import logging
import secrets
from typing import Tuple

from .errors import RandomSourceError

logger = logging.getLogger(__name__)

GAME_ID_BYTES = 12


def generate_secret(code_length: int, colors: int) -> Tuple[int, ...]:
    """Draw ``code_length`` colors uniformly from ``[0, colors)``.

    Uses the OS CSPRNG. If it is unavailable this raises
    RandomSourceError; there is no fallback to ``random``.
    """
    try:
        return tuple(secrets.randbelow(colors) for _ in range(code_length))
    except (OSError, NotImplementedError) as exc:
        logger.error(f"[entropy] secret generation failed: {exc}")
        raise RandomSourceError(f"secure random source unavailable: {exc}") from exc


def generate_game_id(nbytes: int = GAME_ID_BYTES) -> str:
    """Opaque game handle: ``nbytes`` random bytes rendered as hex."""
    try:
        return secrets.token_hex(nbytes)
    except (OSError, NotImplementedError) as exc:
        logger.error(f"[entropy] id generation failed: {exc}")
        raise RandomSourceError(f"secure random source unavailable: {exc}") from exc


class SecretGenerator:
    """Bundles secret and id generation so a registry can swap them out."""

    def generate(self, code_length: int, colors: int) -> Tuple[int, ...]:
        return generate_secret(code_length, colors)

    def new_id(self) -> str:
        return generate_game_id()
