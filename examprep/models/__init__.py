"""Exam Models - Enums, Schemas and State."""

from .enums import ExplanationMode, QuestionKind
from .schemas import (
    Exam,
    ExamSummary,
    FreeEntryQuestion,
    HintDisclosure,
    MultiChoiceQuestion,
    Question,
    SingleChoiceQuestion,
    Verdict,
    build_exam,
    load_exam_data,
)
from .state import StudySession

__all__ = [
    # Enums
    "QuestionKind",
    "ExplanationMode",
    # Schemas
    "Question",
    "SingleChoiceQuestion",
    "MultiChoiceQuestion",
    "FreeEntryQuestion",
    "Exam",
    "Verdict",
    "HintDisclosure",
    "ExamSummary",
    "build_exam",
    "load_exam_data",
    # State
    "StudySession",
]
