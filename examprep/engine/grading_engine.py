"""Grading Engine - Judges responses and discloses hints."""

import logging
from typing import Any

from ..models.enums import QuestionKind
from ..models.schemas import (
    FreeEntryQuestion,
    HintDisclosure,
    MultiChoiceQuestion,
    Question,
    SingleChoiceQuestion,
    Verdict,
)

logger = logging.getLogger(__name__)


class GradingEngine:
    """Stateless grader for the three question kinds.

    Matching is always exact and case-sensitive:

        - SingleChoice: response equals the single accepted choice
        - MultiChoice: selected set equals the accepted set
        - FreeEntry: trimmed response equals any accepted string

    Grading never raises for user input; anything malformed (empty text,
    unknown choice, wrong shape) yields an incorrect verdict.

    Example:
        >>> engine = GradingEngine()
        >>> engine.grade(question, "Paris").correct
        True
        >>> engine.next_hint(free_entry_question, hints_shown=0)
        HintDisclosure(hint='starts with grep', remaining=1)
    """

    def grade(self, question: Question, response: Any) -> Verdict:
        """Grade a response against a question.

        Args:
            question: Validated question
            response: Choice text (SingleChoice), collection of choice texts
                (MultiChoice) or the typed line (FreeEntry)

        Returns:
            Verdict with the correctness flag, accepted answers,
            explanation and refs
        """
        if isinstance(question, SingleChoiceQuestion):
            correct = self._match_single(question, response)
            expected = question.ordered_answer
        elif isinstance(question, MultiChoiceQuestion):
            correct = self._match_multi(question, response)
            expected = question.ordered_answer
        else:
            correct = self._match_free_entry(question, response)
            expected = tuple(sorted(question.answer))

        logger.debug(f"Graded {question.kind} {question.prompt[:40]!r}: correct={correct}")

        return Verdict(
            correct=correct,
            kind=QuestionKind(question.kind),
            expected=expected,
            explanation=question.explanation,
            refs=question.refs,
        )

    def next_hint(self, question: Question, hints_shown: int) -> HintDisclosure:
        """Return the hint following the ones already shown.

        Args:
            question: Question being answered
            hints_shown: How many hints the caller has already revealed

        Returns:
            HintDisclosure with the hint text and how many remain after it;
            ``hint`` is None once every hint has been revealed. Questions
            without hints (including choice questions) are exhausted
            immediately.
        """
        if not isinstance(question, FreeEntryQuestion):
            return HintDisclosure(hint=None, remaining=0)

        hints = question.disclosable_hints
        shown = max(hints_shown, 0)
        if shown >= len(hints):
            return HintDisclosure(hint=None, remaining=0)

        return HintDisclosure(hint=hints[shown], remaining=len(hints) - shown - 1)

    # -------------------------------------------------------------------------
    # Matchers
    # -------------------------------------------------------------------------

    @staticmethod
    def _is_blank(response: Any) -> bool:
        return not isinstance(response, str) or not response.strip()

    def _match_single(self, question: SingleChoiceQuestion, response: Any) -> bool:
        if self._is_blank(response):
            return False
        return response in question.answer

    def _match_multi(self, question: MultiChoiceQuestion, response: Any) -> bool:
        # a lone string is a wrong-shaped response, not a one-element selection
        if response is None or isinstance(response, (str, bytes)):
            return False
        try:
            selected = set(response)
        except TypeError:
            return False

        if not selected or any(self._is_blank(item) for item in selected):
            return False
        return len(selected) == len(question.answer) and selected <= question.answer

    def _match_free_entry(self, question: FreeEntryQuestion, response: Any) -> bool:
        if self._is_blank(response):
            return False
        return response.strip() in question.answer
