"""Composer and interpreter for in-game chat.

``MessagePipeline`` is the single public entry-point for the distortion
layer.  It wraps one :class:`~linguist.distortion.engine.DistortionEngine`
and exposes the two stages of a conversation:

``compose(content, proficiency_or_language)``
    Send side.  Builds a :class:`Message` tagged with the speaker's
    language and distorts it at the speaker's skill.

``interpret(message, known_languages)``
    Receive side.  Looks the message's language up in the listener's
    registry and distorts the content again at the listener's skill.

Caller contract
---------------
Both stages return either a non-empty :class:`Message` or ``None``.
``None`` means "no message" (the content was empty) and is not an error;
callers simply have nothing to deliver.  Neither stage raises for
type-correct input.

Language resolution
-------------------
- ``compose`` with a :class:`ProficiencyRecord` uses it as-is.
- ``compose`` with a bare language tag (or nothing) speaks that language
  (or ``"english"``) at skill **0**.  A speaker with no proficiency
  information is maximally garbled.  This is deliberately different from
  :func:`make_proficiency_record`, which defaults skill to 100.
- ``interpret`` on a language missing from the listener's registry
  retags the result ``"unknown"`` and distorts at skill 0.

Distortion compounds: ``interpret`` works on whatever ``compose`` produced,
never on the original text.

Module-level helpers
--------------------
``compose``, ``interpret``, ``min_proficiency_threshold`` and
``proficiency_penalty`` delegate to a default pipeline built lazily from
the process-wide configuration in :mod:`linguist.config`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import TYPE_CHECKING, Union

from linguist.distortion.config import DistortionConfig
from linguist.distortion.engine import DistortionEngine
from linguist.distortion.types import (
    DEFAULT_LANGUAGE,
    UNKNOWN_LANGUAGE,
    Message,
    ProficiencyRecord,
)

if TYPE_CHECKING:
    from linguist.registry import LanguageRegistry

logger = logging.getLogger(__name__)

KnownLanguages = Union[Mapping[str, ProficiencyRecord], "LanguageRegistry"]


def _lookup(known_languages: KnownLanguages, language: str) -> ProficiencyRecord | None:
    """Resolve ``language`` against a mapping or a registry capability."""
    if isinstance(known_languages, Mapping):
        return known_languages.get(language)
    return known_languages.lookup(language)


class MessagePipeline:
    """Send-side and receive-side message transformation.

    One pipeline can serve any number of speakers; it keeps no per-call
    state.

    Attributes:
        _engine: Distortion engine shared by both stages.
    """

    def __init__(self, engine: DistortionEngine | None = None) -> None:
        self._engine = engine or DistortionEngine()

    @property
    def engine(self) -> DistortionEngine:
        return self._engine

    @property
    def config(self) -> DistortionConfig:
        return self._engine.config

    # ── Public API ────────────────────────────────────────────────────────────

    def compose(
        self,
        content: str | None,
        proficiency_or_language: ProficiencyRecord | str | None = None,
    ) -> Message | None:
        """Compose an outgoing message at the speaker's proficiency.

        Args:
            content:                 Raw text typed by the speaker.
            proficiency_or_language: The speaker's record for the language
                                     they are speaking, or a bare language
                                     tag (spoken at skill 0), or ``None``
                                     (``"english"`` at skill 0).

        Returns:
            The distorted message, or ``None`` when ``content`` is empty.
        """
        if isinstance(proficiency_or_language, ProficiencyRecord):
            record = proficiency_or_language
        else:
            # No proficiency information: the speaker is guessing at the
            # language, so every character is at risk.
            record = ProficiencyRecord(
                language=proficiency_or_language or DEFAULT_LANGUAGE,
                skill=0,
            )

        return self._translate(Message(content=content or "", language=record.language), record)

    def interpret(
        self, message: Message | None, known_languages: KnownLanguages
    ) -> Message | None:
        """Interpret an incoming message at the listener's proficiency.

        Args:
            message:         The message as transmitted, or
                             ``None`` when nothing was sent.
            known_languages: The listener's languages, either a mapping of
                             tag to record or any object with a
                             ``lookup(language)`` method.

        Returns:
            A new, further-distorted message (language ``"unknown"`` if the
            listener does not know it), or ``None`` when the content is empty.
        """
        if message is None:
            return None

        record = _lookup(known_languages, message.language)

        if record is None:
            logger.debug(
                "Language %r not known to listener; interpreting as %r.",
                message.language,
                UNKNOWN_LANGUAGE,
            )
            message = replace(message, language=UNKNOWN_LANGUAGE)
            record = ProficiencyRecord(language=UNKNOWN_LANGUAGE, skill=0)

        return self._translate(message, record)

    def min_proficiency_threshold(self) -> int:
        return self._engine.config.min_proficiency

    def proficiency_penalty(self) -> int:
        return self._engine.config.proficiency_penalty

    # ── Internals ─────────────────────────────────────────────────────────────

    def _translate(self, message: Message, record: ProficiencyRecord) -> Message | None:
        """Distort ``message.content`` at ``record.skill``; empty content → ``None``."""
        if not message.content:
            logger.debug("Empty %r message; nothing to deliver.", message.language)
            return None

        return replace(message, content=self._engine.distort_text(message.content, record.skill))


# ── Default pipeline ─────────────────────────────────────────────────────────

_default_pipeline: MessagePipeline | None = None


def get_default_pipeline() -> MessagePipeline:
    """Return the process-wide pipeline, building it on first use."""
    global _default_pipeline
    if _default_pipeline is None:
        from linguist.config import config

        engine = DistortionEngine(DistortionConfig.from_settings(config.distortion))
        _default_pipeline = MessagePipeline(engine)
    return _default_pipeline


def reset_default_pipeline() -> None:
    """Drop the cached default pipeline so the next call rebuilds it from config."""
    global _default_pipeline
    _default_pipeline = None


def compose(
    content: str | None,
    proficiency_or_language: ProficiencyRecord | str | None = None,
) -> Message | None:
    """Compose with the default pipeline.  See :meth:`MessagePipeline.compose`."""
    return get_default_pipeline().compose(content, proficiency_or_language)


def interpret(message: Message | None, known_languages: KnownLanguages) -> Message | None:
    """Interpret with the default pipeline.  See :meth:`MessagePipeline.interpret`."""
    return get_default_pipeline().interpret(message, known_languages)


def min_proficiency_threshold() -> int:
    """Skill below which the proficiency penalty applies (70 by default)."""
    return get_default_pipeline().min_proficiency_threshold()


def proficiency_penalty() -> int:
    """Size of the proficiency penalty (10 by default)."""
    return get_default_pipeline().proficiency_penalty()
