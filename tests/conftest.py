"""
Shared pytest fixtures for the linguist test suite.

This module provides fixtures that are automatically available to all test files:
- Seeded random generators for reproducible distortion
- Distortion engines and pipelines built on those generators
- Speakers for conversation scenarios

Distortion is random by nature.  Tests either pin the generator with a
seed, script it with ``tests.helpers.ScriptedRng``, or assert statistically over long
inputs.  Exact-output assertions on an unseeded engine are only made at
skill 100, where nothing can change.
"""

import random
from collections.abc import Generator

import pytest

from linguist.distortion import (
    DistortionConfig,
    DistortionEngine,
    MessagePipeline,
    ProficiencyRecord,
)
from linguist.distortion.service import reset_default_pipeline
from linguist.registry import Speaker

# ============================================================================
# RANDOMNESS FIXTURES
# ============================================================================

@pytest.fixture
def seeded_rng() -> random.Random:
    """A deterministic generator; same seed, same distortion."""
    return random.Random(20240607)


@pytest.fixture
def engine(seeded_rng: random.Random) -> DistortionEngine:
    """Engine with the reference thresholds and a seeded generator."""
    return DistortionEngine(DistortionConfig.default(), rng=seeded_rng)


@pytest.fixture
def pipeline(engine: DistortionEngine) -> MessagePipeline:
    """Pipeline over the seeded reference engine."""
    return MessagePipeline(engine)


# ============================================================================
# SPEAKER FIXTURES
# ============================================================================


@pytest.fixture
def english_speaker(pipeline: MessagePipeline) -> Speaker:
    """Speaks English at 80, the proficiency used in the classic scenario."""
    return Speaker([ProficiencyRecord("english", 80)], pipeline=pipeline)


@pytest.fixture
def romanian_listener(pipeline: MessagePipeline) -> Speaker:
    """Knows only Romanian; hears English as an unknown language."""
    return Speaker([ProficiencyRecord("romanian", 70)], pipeline=pipeline)


# ============================================================================
# ISOLATION
# ============================================================================


@pytest.fixture(autouse=True)
def _fresh_default_pipeline() -> Generator[None, None, None]:
    """Rebuild the module-level default pipeline for every test."""
    reset_default_pipeline()
    yield
    reset_default_pipeline()
