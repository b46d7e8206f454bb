"""Value types shared by the composer, interpreter and distortion engine.

``ProficiencyRecord`` and ``Message`` are frozen dataclasses: the core
only ever reads them and produces new values, so one speaker's record can
be shared across any number of concurrent sends.

Defaulting rules
----------------
- A record built without a skill is fully proficient (``100``).  An
  explicit ``0`` is a real value and is kept as ``0``.
- A record or message built without a language is ``"english"``.
- Composing from a bare language tag is *not* the same as building a
  record from it: the composer forces skill ``0`` in that case (see
  :mod:`linguist.distortion.service`).
"""

from __future__ import annotations

import string
from dataclasses import dataclass

DEFAULT_LANGUAGE = "english"

# Tag assigned to a received message whose language the listener does not
# know.  Such messages are always interpreted at zero proficiency.
UNKNOWN_LANGUAGE = "unknown"

MIN_SKILL = 0
MAX_SKILL = 100

# Punctuation plus the space character.  These survive distortion at every
# skill level so that word boundaries and sentence shape stay readable.
PASSTHROUGH_CHARS = "!@,.:;$ "

# Replacement alphabet for distorted characters: A-Z, a-z, 0-9.
ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits


@dataclass(frozen=True)
class ProficiencyRecord:
    """One language a participant can speak and understand.

    Attributes:
        language: Case-sensitive language tag (e.g. ``"english"``).
        skill:    Proficiency from 0 (none) to 100 (native).
    """

    language: str = DEFAULT_LANGUAGE
    skill: int = MAX_SKILL


@dataclass(frozen=True)
class Message:
    """A chat line in transit between composer and interpreter.

    Attributes:
        content:  The (possibly distorted) text.  May be empty on a value
                  built with :func:`make_message`, but the composer and
                  interpreter never return an empty message.
        language: The language the message claims to be written in.
    """

    content: str = ""
    language: str = DEFAULT_LANGUAGE


def clamp_skill(skill: float) -> float:
    """Clamp a proficiency value into ``[0, 100]``."""
    return max(MIN_SKILL, min(MAX_SKILL, skill))


def make_proficiency_record(
    language: str | None = None, skill: int | None = None
) -> ProficiencyRecord:
    """Build a :class:`ProficiencyRecord` with the standard defaults.

    Args:
        language: Language tag; ``None`` or ``""`` means ``"english"``.
        skill:    Proficiency; ``None`` means ``100``.  ``0`` is kept.
                  Values outside ``[0, 100]`` are always clamped; a
                  record never carries an out-of-range skill.

    Returns:
        A new, frozen record.
    """
    resolved_skill = MAX_SKILL if skill is None else int(clamp_skill(skill))
    return ProficiencyRecord(language=language or DEFAULT_LANGUAGE, skill=resolved_skill)


def make_message(content: str | None = None, language: str | None = None) -> Message:
    """Build a :class:`Message`; missing content is ``""``, missing language ``"english"``."""
    return Message(content=content or "", language=language or DEFAULT_LANGUAGE)
