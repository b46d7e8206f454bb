"""Character-level distortion engine.

``DistortionEngine`` decides, one character at a time, whether a listener
(or speaker) gets it right.  The rule for a single character at skill
``s``:

1. Draw ``r`` uniformly from ``[0, 100)``.
2. If ``s < min_proficiency``, apply the proficiency penalty to ``s``.
3. Punctuation (``!@,.:;$``) and the space character pass through.
4. Any other character is replaced by a random alphanumeric character
   when ``s' < r``; otherwise it is kept.

Since ``r`` never reaches 100, skill 100 always transmits faithfully.
Output length always equals input length.

Randomness
----------
The engine owns a ``random.Random`` instance and nothing else that
changes between calls.  Pass a seeded generator to get reproducible
output in tests or replays::

    engine = DistortionEngine(rng=random.Random(42))
"""

from __future__ import annotations

import random

from linguist.distortion.config import DistortionConfig
from linguist.distortion.types import ALPHANUMERIC, PASSTHROUGH_CHARS, clamp_skill


class DistortionEngine:
    """Applies proficiency-driven character substitution.

    Attributes:
        _config: Frozen thresholds (minimum proficiency, penalty, direction).
        _rng:    Uniform, non-cryptographic random source.
    """

    def __init__(
        self,
        config: DistortionConfig | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config or DistortionConfig.default()
        self._rng = rng or random.Random()  # nosec B311 - gameplay noise, not crypto

    @property
    def config(self) -> DistortionConfig:
        return self._config

    def effective_skill(self, skill: float) -> float:
        """Return the value a random draw is compared against for ``skill``.

        Clamps into ``[0, 100]`` first when the config asks for it, then
        applies the penalty if the skill is under the minimum proficiency.
        """
        if self._config.clamp_skill:
            skill = clamp_skill(skill)

        if skill < self._config.min_proficiency:
            if self._config.penalty_direction == "subtract":
                skill -= self._config.proficiency_penalty
            else:
                skill += self._config.proficiency_penalty

        return skill

    def fidelity(self, skill: float) -> float:
        """Probability (0.0-1.0) that a non-punctuation character survives.

        A substituted character can coincidentally equal the original, so
        the observed survival rate is slightly higher than this value.
        """
        return clamp_skill(self.effective_skill(skill)) / 100

    def distort_char(self, char: str, skill: float) -> str:
        """Distort a single character at the given proficiency."""
        # One draw per character, pass-through characters included, so the
        # random stream advances the same way for any input of equal length.
        roll = self._rng.random() * 100
        effective = self.effective_skill(skill)

        if char in PASSTHROUGH_CHARS:
            return char

        if effective < roll:
            return self._rng.choice(ALPHANUMERIC)

        return char

    def distort_text(self, text: str, skill: float) -> str:
        """Distort every character of ``text``; the result has the same length."""
        return "".join(self.distort_char(char, skill) for char in text)
