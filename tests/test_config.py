"""Tests for settings parsing."""

import pytest
from pydantic import ValidationError

from app.config import Environment, Settings


def test_defaults():
    s = Settings()
    assert s.default_servings == 2
    assert s.recipe_search_min_length == 2
    assert s.recipe_search_limit == 10


def test_environment_is_case_insensitive():
    s = Settings(environment="Production")
    assert s.environment is Environment.PRODUCTION
    assert s.is_production()
    assert not s.is_development()


def test_log_level_normalised():
    assert Settings(log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("MEALBOARD_DEFAULT_SERVINGS", "4")
    monkeypatch.setenv("MEALBOARD_GATEWAY_BASE_URL", "http://planner.local")
    s = Settings()
    assert s.default_servings == 4
    assert s.gateway_base_url == "http://planner.local"
