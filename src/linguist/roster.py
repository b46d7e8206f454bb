"""Speaker roster loader.

A roster is a YAML file naming a set of speakers and the languages each
one knows, so a demo or a test scene can be set up without code::

    version: 0.1.0
    speakers:
      aldric:
        default_language: english
        languages:
          english: 75
      brenna:
        languages:
          english: 85
          romanian: 40

A missing file is an empty roster.  A malformed entry raises
:exc:`RosterError` naming the offending speaker.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from hashlib import sha256
from pathlib import Path
from typing import Any

import yaml

from linguist.distortion.service import MessagePipeline
from linguist.distortion.types import make_proficiency_record
from linguist.registry import Speaker

logger = logging.getLogger(__name__)


class RosterError(Exception):
    """Raised when a roster file cannot be parsed into speakers."""


@dataclass(slots=True)
class RosterReport:
    """Summary of a loaded roster.

    Attributes:
        speakers:     Speaker names in file order.
        languages:    Every language tag mentioned, sorted.
        roster_hash:  Deterministic hash of the roster payload.
        version:      Roster version string when available.
    """

    speakers: list[str]
    languages: list[str]
    roster_hash: str
    version: str | None


class RosterLoader:
    """Load speakers from a roster YAML file."""

    def __init__(
        self,
        *,
        default_language: str | None = None,
        pipeline: MessagePipeline | None = None,
    ) -> None:
        self._default_language = default_language
        self._pipeline = pipeline

    def load(self, path: Path) -> tuple[dict[str, Speaker], RosterReport]:
        """Load a roster and return the speakers plus a report.

        Args:
            path: Roster file path.

        Returns:
            Tuple of (speakers by name, report).

        Raises:
            RosterError: If the file is not valid YAML or an entry is malformed.
        """
        payload = self._read_yaml(path)
        entries = payload.get("speakers") or {}
        if not isinstance(entries, dict):
            raise RosterError(f"{path}: 'speakers' must be a mapping")

        speakers: dict[str, Speaker] = {}
        languages: set[str] = set()
        for name, entry in entries.items():
            speaker = self._build_speaker(str(name), entry)
            speakers[str(name)] = speaker
            languages.update(speaker.languages)

        report = RosterReport(
            speakers=list(speakers),
            languages=sorted(languages),
            roster_hash=self._hash_payload(payload),
            version=payload.get("version"),
        )
        logger.debug("Loaded %d speaker(s) from %s", len(speakers), path)

        return speakers, report

    def _read_yaml(self, path: Path) -> dict[str, Any]:
        """Read a YAML file and return a dict; returns empty dict if missing."""
        if not path.exists():
            logger.warning("Roster file %s not found; using an empty roster.", path)
            return {}
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise RosterError(f"{path}: invalid YAML ({exc})") from exc
        if not isinstance(data, dict):
            raise RosterError(f"{path}: top level must be a mapping")
        return data

    def _build_speaker(self, name: str, entry: Any) -> Speaker:
        """Turn one ``speakers`` entry into a :class:`Speaker`."""
        if entry is None:
            entry = {}
        if not isinstance(entry, dict):
            raise RosterError(f"speaker {name!r}: entry must be a mapping")

        raw_languages = entry.get("languages") or {}
        if not isinstance(raw_languages, dict):
            raise RosterError(f"speaker {name!r}: 'languages' must map language to skill")

        records = []
        for language, skill in raw_languages.items():
            if skill is not None and (isinstance(skill, bool) or not isinstance(skill, int)):
                raise RosterError(
                    f"speaker {name!r}: skill for {language!r} must be an integer, got {skill!r}"
                )
            records.append(make_proficiency_record(str(language), skill))

        return Speaker(
            records,
            entry.get("default_language") or self._default_language,
            pipeline=self._pipeline,
        )

    def _hash_payload(self, payload: dict[str, Any]) -> str:
        """Compute a deterministic hash for the roster payload."""
        serialized = yaml.safe_dump(payload, sort_keys=True)
        return sha256(serialized.encode("utf-8")).hexdigest()
