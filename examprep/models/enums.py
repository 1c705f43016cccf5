"""Exam Enums - Question kinds and display modes."""

from enum import Enum


class QuestionKind(str, Enum):
    """Closed set of question kinds accepted in exam files."""

    SINGLE_CHOICE = "SingleChoice"  # exactly one correct choice
    MULTI_CHOICE = "MultiChoice"  # one or more correct choices
    FREE_ENTRY = "FreeEntry"  # typed answer, optional hints


class ExplanationMode(str, Enum):
    """When the driver shows explanation and refs after a verdict."""

    ALWAYS = "always"
    INCORRECT = "incorrect"
