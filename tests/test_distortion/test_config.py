"""Unit tests for DistortionConfig."""

from dataclasses import FrozenInstanceError

import pytest

from linguist.config import DistortionSettings
from linguist.distortion import DistortionConfig


@pytest.mark.unit
class TestDistortionConfigDefault:
    def test_reference_values(self):
        cfg = DistortionConfig.default()
        assert cfg.min_proficiency == 70
        assert cfg.proficiency_penalty == 10
        assert cfg.penalty_direction == "add"
        assert cfg.clamp_skill is True

    def test_is_frozen(self):
        cfg = DistortionConfig.default()
        with pytest.raises(FrozenInstanceError):
            cfg.min_proficiency = 50  # type: ignore[misc]


@pytest.mark.unit
class TestDistortionConfigFromDict:
    def test_all_fields_populated(self):
        cfg = DistortionConfig.from_dict(
            {
                "min_proficiency": 60,
                "proficiency_penalty": 15,
                "penalty_direction": "subtract",
                "clamp_skill": False,
            }
        )
        assert cfg.min_proficiency == 60
        assert cfg.proficiency_penalty == 15
        assert cfg.penalty_direction == "subtract"
        assert cfg.clamp_skill is False

    def test_empty_dict_gives_defaults(self):
        assert DistortionConfig.from_dict({}) == DistortionConfig.default()

    def test_direction_is_case_insensitive(self):
        assert DistortionConfig.from_dict({"penalty_direction": "SUBTRACT"}).penalty_direction == (
            "subtract"
        )

    def test_unknown_direction_falls_back_to_add(self, caplog):
        with caplog.at_level("WARNING", logger="linguist.distortion.config"):
            cfg = DistortionConfig.from_dict({"penalty_direction": "multiply"})
        assert cfg.penalty_direction == "add"
        assert "multiply" in caplog.text

    def test_string_numbers_are_coerced(self):
        cfg = DistortionConfig.from_dict({"min_proficiency": "65", "proficiency_penalty": "5"})
        assert cfg.min_proficiency == 65
        assert cfg.proficiency_penalty == 5

    @pytest.mark.parametrize("raw", ["false", "False", "0", "no", "off", ""])
    def test_string_flags_can_disable_clamping(self, raw):
        assert DistortionConfig.from_dict({"clamp_skill": raw}).clamp_skill is False

    @pytest.mark.parametrize("raw", ["true", "YES", "1", "on", True])
    def test_truthy_flags_enable_clamping(self, raw):
        assert DistortionConfig.from_dict({"clamp_skill": raw}).clamp_skill is True


@pytest.mark.unit
def test_from_settings_freezes_settings_section():
    settings = DistortionSettings(min_proficiency=55, penalty_direction="subtract")
    cfg = DistortionConfig.from_settings(settings)

    assert cfg.min_proficiency == 55
    assert cfg.proficiency_penalty == 10
    assert cfg.penalty_direction == "subtract"

    # Later edits to the mutable settings do not leak into the frozen config.
    settings.min_proficiency = 90
    assert cfg.min_proficiency == 55
