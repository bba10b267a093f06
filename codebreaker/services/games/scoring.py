from collections import Counter
from typing import Sequence, Tuple


def score_guess(secret: Sequence[int], guess: Sequence[int]) -> Tuple[int, int]:
    """Return ``(exact, partial)`` for a guess of the same length as the secret.

    Exact matches are resolved first; only secret positions left unmatched
    feed the pool that partial matches draw from, so a color is never
    credited more times than it is still available in the secret.
    """
    exact = 0
    partial = 0
    remaining = Counter()
    for s, g in zip(secret, guess):
        if s == g:
            exact += 1
        else:
            remaining[s] += 1
    for s, g in zip(secret, guess):
        if s != g and remaining[g] > 0:
            partial += 1
            remaining[g] -= 1
    return exact, partial
