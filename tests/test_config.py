# tests/test_config.py
import random

import pytest
from pydantic import ValidationError

from mcqbank.utils.config import Settings
from mcqbank.utils.dependencies import get_rng

class TestSettings:
    def test_defaults(self):
        config = Settings()
        assert config.finals_ratio == {"pharmacology": 0.5, "pathology": 0.5}
        assert config.random_subjects == ["pharmacology", "pathology"]
        assert config.default_lessons_page_size == 1000

    @pytest.mark.parametrize("ratio", [0, 1.01, -0.5])
    def test_finals_ratio_must_be_in_unit_interval(self, ratio):
        with pytest.raises(ValidationError):
            Settings(finals_ratio={"pharmacology": ratio})

    def test_ratios_need_not_sum_to_one(self):
        assert Settings(finals_ratio={"pharmacology": 0.3, "pathology": 0.3}).finals_ratio["pathology"] == 0.3

    @pytest.mark.parametrize("raw,expected", [("/api", "/api"), ("api/", "/api"), ("", ""), ("/", "")])
    def test_api_prefix_is_normalized(self, raw, expected):
        assert Settings(api_prefix=raw).api_prefix == expected

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        config = Settings()
        assert config.port == 8080
        assert config.log_level == "DEBUG"

def test_get_rng_gives_independent_generators():
    first, second = get_rng(), get_rng()
    assert isinstance(first, random.Random)
    assert first is not second
