"""PipeWorks Linguist: imperfect in-game communication.

A player speaks in a language at some proficiency; another player hears
it at their own proficiency in that language.  Gaps in proficiency, or a
language the listener does not know at all, corrupt the message one
character at a time.

Version Management
------------------
``__version__`` is read from the installed package metadata at import time.
The single source of truth is the ``version`` field in ``pyproject.toml``.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from linguist.distortion import (
    DEFAULT_LANGUAGE,
    UNKNOWN_LANGUAGE,
    DistortionConfig,
    DistortionEngine,
    Message,
    MessagePipeline,
    ProficiencyRecord,
    compose,
    interpret,
    make_message,
    make_proficiency_record,
    min_proficiency_threshold,
    proficiency_penalty,
)
from linguist.registry import LanguageRegistry, Speaker

# ---------------------------------------------------------------------------
# Package version, read from pyproject.toml via importlib.metadata.
#
# Falls back to "0.0.0-dev" when the package is imported from a source
# checkout without being installed.
# ---------------------------------------------------------------------------
try:
    __version__: str = version("pipeworks-linguist")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "DEFAULT_LANGUAGE",
    "UNKNOWN_LANGUAGE",
    "DistortionConfig",
    "DistortionEngine",
    "LanguageRegistry",
    "Message",
    "MessagePipeline",
    "ProficiencyRecord",
    "Speaker",
    "__version__",
    "compose",
    "interpret",
    "make_message",
    "make_proficiency_record",
    "min_proficiency_threshold",
    "proficiency_penalty",
]
