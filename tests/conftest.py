# =============================================================================
# CONFTEST - Shared pytest fixtures
# =============================================================================
# Sample records and exams built in memory; no terminal, no real exam directory
# =============================================================================

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest


# =============================================================================
# ENVIRONMENT FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def clean_env():
    """Runs every test without EXAMPREP_* variables, fresh config and logging."""
    import logging

    from examprep.config import reset_config

    env = {k: v for k, v in os.environ.items() if not k.startswith("EXAMPREP_")}
    with patch.dict(os.environ, env, clear=True):
        reset_config()
        yield
    reset_config()

    # handlers installed by setup_logging hold the test's captured stderr
    root = logging.getLogger("examprep")
    for handler in [h for h in root.handlers if getattr(h, "_examprep", False)]:
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    """Temporary exam directory (not created yet)."""
    return tmp_path / "assets"


# =============================================================================
# RAW RECORD FIXTURES
# =============================================================================


@pytest.fixture
def single_choice_record() -> dict:
    """SingleChoice record: capital of France."""
    return {
        "kind": "SingleChoice",
        "prompt": "What is the capital of France?",
        "choices": ["Berlin", "Paris", "London", "Rome"],
        "answer": ["Paris"],
        "explanation": "Paris is the capital of France.",
        "refs": ["https://en.wikipedia.org/wiki/Paris"],
    }


@pytest.fixture
def multi_choice_record() -> dict:
    """MultiChoice record: US states."""
    return {
        "kind": "MultiChoice",
        "prompt": "Which of these are US states?",
        "choices": ["Wyoming", "Alaska", "Puerto Rico", "Miami", "Hawaii"],
        "answer": ["Wyoming", "Alaska", "Hawaii"],
        "explanation": "Puerto Rico is a territory and Miami is a city.",
        "refs": [],
    }


@pytest.fixture
def free_entry_record() -> dict:
    """FreeEntry record with two hints and three accepted answers."""
    return {
        "kind": "FreeEntry",
        "prompt": "Search for 'john' ignoring case.",
        "choices": ["Use grep", "The flag is -i"],
        "answer": [
            "grep -i john user_info.txt",
            "grep john test.txt -i",
            "grep john -i test.txt",
        ],
        "explanation": "grep -i ignores case.",
        "refs": ["man grep"],
    }


@pytest.fixture
def exam_data(single_choice_record, multi_choice_record, free_entry_record) -> dict:
    """Deserialized exam file with one question of each kind."""
    return {
        "name": "Sample Exam",
        "questions": [single_choice_record, multi_choice_record, free_entry_record],
    }


# =============================================================================
# MODEL FIXTURES
# =============================================================================


@pytest.fixture
def sample_exam(exam_data):
    """Validated Exam with one question of each kind."""
    from examprep.models.schemas import load_exam_data

    return load_exam_data(exam_data)


@pytest.fixture
def single_choice_question(sample_exam):
    return sample_exam.questions[0]


@pytest.fixture
def multi_choice_question(sample_exam):
    return sample_exam.questions[1]


@pytest.fixture
def free_entry_question(sample_exam):
    return sample_exam.questions[2]


@pytest.fixture
def exam_file(assets_dir, exam_data) -> Path:
    """Exam directory containing sample.json."""
    assets_dir.mkdir()
    path = assets_dir / "sample.json"
    path.write_text(json.dumps(exam_data), encoding="utf-8")
    return path


# =============================================================================
# LOGGING FIXTURES
# =============================================================================


@pytest.fixture
def capture_logs(caplog):
    """Captures logs for assertions."""
    import logging

    caplog.set_level(logging.DEBUG, logger="examprep")
    return caplog


# =============================================================================
# HELPERS
# =============================================================================


@pytest.fixture
def scripted_io():
    """Factory for (input_fn, output_lines) pairs that replay canned answers."""

    def _make(answers: list[str]):
        pending = list(answers)
        output: list[str] = []

        def input_fn(prompt: str) -> str:
            output.append(prompt)
            if not pending:
                raise EOFError
            return pending.pop(0)

        def output_fn(*args) -> None:
            output.append(" ".join(str(a) for a in args))

        return input_fn, output_fn, output

    return _make
