"""Pytest fixtures for diario-mood tests."""

from typing import Generator

import pytest

from src.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so env changes in one test never leak into another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings configured for testing."""
    return Settings(
        environment="development",
        log_level="DEBUG",
    )


@pytest.fixture
def positive_entry() -> str:
    """Diary entry with strong positive mood."""
    return "Hoy fue un día excelente, me siento feliz y agradecido"


@pytest.fixture
def negated_entry() -> str:
    """Diary entry where a positive word is negated."""
    return "no me siento nada bien hoy"


@pytest.fixture
def neutral_entry() -> str:
    """Diary entry without lexicon hits."""
    return "el día de hoy fue un día normal"


@pytest.fixture
def diary_entries() -> list[str]:
    """A week of short diary entries with mixed moods."""
    return [
        "Hoy fue un día excelente, me siento feliz y agradecido",
        "Estoy muy triste y cansado, todo salió mal",
        "el día de hoy fue un día normal",
        "Me gusta disfrutar del tiempo con mi familia, qué bueno",
        "no me siento nada bien hoy",
        "Tuve un problema terrible en el trabajo, odio los lunes",
        "Una tarde tranquila, leí un libro genial",
    ]
