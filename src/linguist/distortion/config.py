"""Distortion engine configuration.

``DistortionConfig`` is a frozen dataclass holding the comprehension
threshold and penalty.  It is built once at startup from the process-wide
settings (see :mod:`linguist.config`) and handed to every
:class:`~linguist.distortion.engine.DistortionEngine`; nothing mutates it
afterwards.

Penalty direction
-----------------
Below ``min_proficiency`` a penalty is applied to the skill before it is
compared with the random draw.  Two directions are supported:

``"add"`` (default)
    ``skill + penalty``.  This is the reference arithmetic.  Because a
    character is corrupted when ``skill < r``, adding to the skill makes
    corruption *less* likely for speakers already under the threshold,
    which runs against the documented intent of a comprehension cliff.
    It is kept as the default so existing behaviour does not change.

``"subtract"``
    ``skill - penalty``.  Speakers under the threshold are treated as
    worse than their raw number, which is the cliff the threshold was
    meant to model.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from linguist.config import DistortionSettings

logger = logging.getLogger(__name__)

PenaltyDirection = Literal["add", "subtract"]

_PENALTY_DIRECTIONS: tuple[str, ...] = ("add", "subtract")

DEFAULT_MIN_PROFICIENCY = 70
DEFAULT_PROFICIENCY_PENALTY = 10

_TRUE_STRINGS: tuple[str, ...] = ("true", "yes", "1", "on", "enabled")


def parse_flag(value: Any) -> bool:
    """Read a boolean setting that may arrive as a string (INI, env, YAML)."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


@dataclass(frozen=True)
class DistortionConfig:
    """Immutable thresholds used by the distortion engine.

    Attributes:
        min_proficiency:     Skill below which the penalty applies.
        proficiency_penalty: Size of the penalty applied below the threshold.
        penalty_direction:   ``"add"`` or ``"subtract"``; see module docstring.
        clamp_skill:         When ``True`` skills handed to the engine outside
                             ``[0, 100]`` are clamped before use.  When
                             ``False`` they are passed through unchanged.
                             Records built by ``make_proficiency_record``
                             are always in range whatever this says.
    """

    min_proficiency: int = DEFAULT_MIN_PROFICIENCY
    proficiency_penalty: int = DEFAULT_PROFICIENCY_PENALTY
    penalty_direction: PenaltyDirection = "add"
    clamp_skill: bool = True

    @classmethod
    def default(cls) -> DistortionConfig:
        """Return the reference configuration (threshold 70, penalty 10, additive)."""
        return cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DistortionConfig:
        """Parse a ``distortion`` settings block.

        Missing fields fall back to the reference defaults.  An unrecognised
        ``penalty_direction`` is logged and replaced with ``"add"``.

        Args:
            data: Mapping with any of the dataclass field names.

        Returns:
            A fully-populated, frozen ``DistortionConfig``.
        """
        direction = str(data.get("penalty_direction", "add")).lower()
        if direction not in _PENALTY_DIRECTIONS:
            logger.warning(
                "Unknown penalty_direction %r; falling back to 'add'.",
                direction,
            )
            direction = "add"

        return cls(
            min_proficiency=int(data.get("min_proficiency", DEFAULT_MIN_PROFICIENCY)),
            proficiency_penalty=int(data.get("proficiency_penalty", DEFAULT_PROFICIENCY_PENALTY)),
            penalty_direction=direction,  # type: ignore[arg-type]
            clamp_skill=parse_flag(data.get("clamp_skill", True)),
        )

    @classmethod
    def from_settings(cls, settings: DistortionSettings) -> DistortionConfig:
        """Freeze the process-wide ``[distortion]`` settings section."""
        return cls.from_dict(
            {
                "min_proficiency": settings.min_proficiency,
                "proficiency_penalty": settings.proficiency_penalty,
                "penalty_direction": settings.penalty_direction,
                "clamp_skill": settings.clamp_skill,
            }
        )
