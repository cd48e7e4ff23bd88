# tests/conftest.py
import json
import logging
import random

import pytest
from fastapi.testclient import TestClient

# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from mcqbank.utils.config import settings
from mcqbank.utils.dependencies import get_rng

TEST_SEED = 1234

def _questions(lesson: str, n: int) -> list:
    return [
        {
            "question": f"{lesson} question {i}",
            "options": ["A", "B", "C", "D"],
            "answerIndex": i % 4,
            "lesson": lesson,
        }
        for i in range(n)
    ]

# Layout of the on-disk fixture tree. Pharmacology holds 25 questions and
# pathology 15, so "both" pools 40; "general" adds 3 more at the root.
LESSON_FILES = {
    "pharmacology/lesson1.json": _questions("pharmacology-lesson1", 10),
    "pharmacology/lesson2.json": {"title": "Autonomic Drugs", "questions": _questions("pharmacology-lesson2", 10)},
    "pharmacology/lesson10.json": _questions("pharmacology-lesson10", 5),
    "pathology/lesson-1.json": _questions("pathology-lesson-1", 8),
    "pathology/lesson-2.json": {"questions": _questions("pathology-lesson-2", 7)},
    "general.json": _questions("general", 3),
    "anatomy/notes.json": {"notes": "no questions here"},
}
BROKEN_FILES = {"pathology/broken.json": "{ this is not json"}

TOTAL_QUESTIONS = 43

@pytest.fixture(scope="session")
def mcq_data_dir(tmp_path_factory):
    """Writes the fixture question tree to a temporary directory."""
    base = tmp_path_factory.mktemp("mcqs")
    for relative, content in LESSON_FILES.items():
        path = base / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(content), encoding="utf-8")
    for relative, text in BROKEN_FILES.items():
        (base / relative).write_text(text, encoding="utf-8")
    logger.info(f"Wrote fixture question tree to {base}")
    return base

# --- Fixture to Modify Settings ---
@pytest.fixture(scope="session")
def modify_settings_for_test_data(mcq_data_dir):
    original_dir = settings.mcq_data_dir
    try:
        settings.mcq_data_dir = str(mcq_data_dir)
        logger.info(f"Using test question data at '{mcq_data_dir}' for the session.")
        yield
    finally:
        settings.mcq_data_dir = original_dir
        logger.info(f"Restored mcq_data_dir to '{original_dir}'.")

# --- TestClient Fixture ---
@pytest.fixture(scope="session")
def client(modify_settings_for_test_data):
    """
    Creates the TestClient after settings point at the fixture tree, so the
    startup index is built from it.
    """
    from mcqbank.main import app
    with TestClient(app) as c:
        yield c

@pytest.fixture
def seeded_rng(client):
    """Makes every request draw from a freshly seeded generator."""
    client.app.dependency_overrides[get_rng] = lambda: random.Random(TEST_SEED)
    yield TEST_SEED
    client.app.dependency_overrides.pop(get_rng, None)
