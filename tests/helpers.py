"""
Shared test helpers.

``ScriptedRng`` replaces the engine's random generator so each
comparison against the random draw is known in advance.
"""

from collections.abc import Iterable


class ScriptedRng:
    """
    Stand-in for ``random.Random`` that replays fixed draws.

    ``random()`` returns the scripted values in order (as fractions of 1,
    so ``0.5`` is a roll of 50).  ``choice()`` always returns
    ``replacement`` so a substituted character is easy to spot.
    """

    def __init__(self, draws: Iterable[float], replacement: str = "#") -> None:
        self._draws = iter(draws)
        self.replacement = replacement
        self.draw_count = 0

    def random(self) -> float:
        self.draw_count += 1
        return next(self._draws)

    def choice(self, seq):
        return self.replacement
