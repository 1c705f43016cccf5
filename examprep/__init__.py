"""examprep - Terminal study aid for exam question sets.

Architecture:
- models/: QuestionKind, question/exam schemas (pydantic), StudySession
- engine/: GradingEngine (verdicts, hints), ScoringEngine (final tally)
- storage/: ExamStore (exam directory, JSON exam files)
- prompts/: Terminal message templates, sample exam
- session.py: StudyRunner terminal driver
- cli.py: argparse entry point
"""

from .engine import GradingEngine, ScoringEngine
from .exceptions import ExamPrepError, ValidationError
from .models import (
    Exam,
    ExamSummary,
    FreeEntryQuestion,
    HintDisclosure,
    MultiChoiceQuestion,
    QuestionKind,
    SingleChoiceQuestion,
    StudySession,
    Verdict,
    build_exam,
    load_exam_data,
)
from .storage import ExamStore

__version__ = "0.1.0"

__all__ = [
    # Models
    "QuestionKind",
    "SingleChoiceQuestion",
    "MultiChoiceQuestion",
    "FreeEntryQuestion",
    "Exam",
    "Verdict",
    "HintDisclosure",
    "ExamSummary",
    "StudySession",
    "build_exam",
    "load_exam_data",
    # Engines
    "GradingEngine",
    "ScoringEngine",
    # Storage
    "ExamStore",
    # Errors
    "ExamPrepError",
    "ValidationError",
]
