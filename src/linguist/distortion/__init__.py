"""Message distortion layer for linguist.

This package turns a plain chat line into what a listener actually makes
of it.  Both ends of a conversation run the same character-level
distortion, parameterised by a single proficiency value, so corruption
from a clumsy speaker compounds with corruption from a clumsy listener.

Package structure
-----------------
types.py    ProficiencyRecord, Message and their factories; language and
            character-set constants.
config.py   DistortionConfig : frozen threshold/penalty settings, built
            once from the process-wide configuration.
engine.py   DistortionEngine : the per-character transform.
service.py  MessagePipeline  : compose (send side) and interpret
            (receive side); the public entry-point used by speakers.

Typical call flow
-----------------
1. sender calls ``compose("cold day!", record)``
2. engine distorts each character at the sender's skill
3. receiver calls ``interpret(message, known_languages)``
4. engine distorts again at the receiver's skill, or at zero skill with
   the language retagged ``"unknown"`` when the receiver does not know it
5. an empty message at any point yields ``None`` ("no message")
"""

from linguist.distortion.config import DistortionConfig
from linguist.distortion.engine import DistortionEngine
from linguist.distortion.service import (
    MessagePipeline,
    compose,
    interpret,
    min_proficiency_threshold,
    proficiency_penalty,
)
from linguist.distortion.types import (
    ALPHANUMERIC,
    DEFAULT_LANGUAGE,
    PASSTHROUGH_CHARS,
    UNKNOWN_LANGUAGE,
    Message,
    ProficiencyRecord,
    make_message,
    make_proficiency_record,
)

__all__ = [
    "ALPHANUMERIC",
    "DEFAULT_LANGUAGE",
    "PASSTHROUGH_CHARS",
    "UNKNOWN_LANGUAGE",
    "DistortionConfig",
    "DistortionEngine",
    "Message",
    "MessagePipeline",
    "ProficiencyRecord",
    "compose",
    "interpret",
    "make_message",
    "make_proficiency_record",
    "min_proficiency_threshold",
    "proficiency_penalty",
]
