"""Per-speaker language registries.

The distortion layer never owns a speaker's languages; it only asks "what
is this listener's record for language X?".  :class:`LanguageRegistry`
is that question as a protocol, so a plain dict, a :class:`Speaker` or
any other store (sorted, persistent, remote) can answer it.

:class:`Speaker` is the in-memory registry used by the CLI demo and by
games that do not need anything fancier.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from linguist.distortion.service import MessagePipeline, get_default_pipeline
from linguist.distortion.types import (
    DEFAULT_LANGUAGE,
    Message,
    ProficiencyRecord,
    make_proficiency_record,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class LanguageRegistry(Protocol):
    """Lookup capability for a listener's known languages."""

    def lookup(self, language: str) -> ProficiencyRecord | None:
        """Return the record for ``language``, or ``None`` if it is not known."""
        ...


def _coerce_record(entry: ProficiencyRecord | Mapping[str, Any]) -> ProficiencyRecord:
    """Accept a record or a ``{"language": ..., "skill": ...}`` mapping."""
    if isinstance(entry, ProficiencyRecord):
        return entry
    return make_proficiency_record(entry.get("language"), entry.get("skill"))


class Speaker:
    """A participant with a set of languages and a default language.

    A speaker created without any languages knows English at full
    proficiency.  The default language is only a preference: if the
    speaker has no record for it, messages sent without an explicit
    language are spoken in it at skill 0.

    Attributes:
        languages:        Language tag → proficiency record.
        default_language: Language used when ``send`` is given none.
    """

    def __init__(
        self,
        languages: Iterable[ProficiencyRecord | Mapping[str, Any]] | None = None,
        default_language: str | None = None,
        *,
        pipeline: MessagePipeline | None = None,
    ) -> None:
        self.default_language = default_language or DEFAULT_LANGUAGE
        self.languages: dict[str, ProficiencyRecord] = {}
        for entry in languages or ():
            record = _coerce_record(entry)
            self.languages[record.language] = record

        if not self.languages:
            self.languages = {DEFAULT_LANGUAGE: ProficiencyRecord(DEFAULT_LANGUAGE, 100)}

        self._pipeline = pipeline

    def __repr__(self) -> str:
        known = ", ".join(f"{r.language}={r.skill}" for r in self.languages.values())
        return f"Speaker({known}; default={self.default_language})"

    @property
    def pipeline(self) -> MessagePipeline:
        return self._pipeline or get_default_pipeline()

    def lookup(self, language: str) -> ProficiencyRecord | None:
        return self.languages.get(language)

    def send(self, content: str | None, language: str | None = None) -> Message | None:
        """Speak ``content``, optionally in a specific language.

        The composer receives, in order of preference:

        1. this speaker's record for ``language``;
        2. the bare ``language`` tag (spoken at skill 0);
        3. this speaker's record for the default language;
        4. the bare default language tag (spoken at skill 0).

        Returns:
            The composed message, or ``None`` for empty content.
        """
        if not content:
            return None

        resolved: ProficiencyRecord | str
        if language and language in self.languages:
            resolved = self.languages[language]
        elif language:
            logger.debug("Speaker has no record for %r; speaking it at skill 0.", language)
            resolved = language
        elif self.default_language in self.languages:
            resolved = self.languages[self.default_language]
        else:
            resolved = self.default_language

        return self.pipeline.compose(content, resolved)

    def receive(self, message: Message | None) -> Message | None:
        """Hear ``message`` through this speaker's own proficiencies.

        ``None`` (nothing was sent) is heard as ``None``.
        """
        return self.pipeline.interpret(message, self)
