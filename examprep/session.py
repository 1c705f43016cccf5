"""Study Session - Terminal driver that presents questions and shows verdicts."""

from __future__ import annotations

import logging
import random
import re
import string
from typing import Any, Callable, Optional

from .config import StudyConfig
from .engine.grading_engine import GradingEngine
from .engine.scoring_engine import ScoringEngine
from .models.enums import ExplanationMode
from .models.schemas import (
    Exam,
    ExamSummary,
    FreeEntryQuestion,
    MultiChoiceQuestion,
    Question,
    Verdict,
)
from .models.state import StudySession
from .prompts import templates
from .storage.exam_store import ExamStore

logger = logging.getLogger(__name__)

_SELECTION_SEPARATORS = re.compile(r"[,\s]+")


def choice_label(index: int) -> str:
    """Letter label for a choice position: A..Z, then AA, AB, ..."""
    letters = string.ascii_uppercase
    label = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, len(letters))
        label = letters[remainder] + label
    return label


def resolve_selection(token: str, labels: dict[str, str]) -> str:
    """Map a typed letter to its choice text.

    Unknown tokens come back unchanged so that grading marks them wrong.
    """
    return labels.get(token.strip().upper(), token)


class StudyRunner:
    """Runs an exam in the terminal.

    Input and output go through injectable callables so the driver can be
    exercised without a terminal.

    Example:
        >>> runner = StudyRunner(config)
        >>> summary = runner.run(exam)
    """

    def __init__(
        self,
        config: StudyConfig,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[..., Any]] = None,
        engine: Optional[GradingEngine] = None,
        scoring: Optional[ScoringEngine] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.engine = engine or GradingEngine()
        self.scoring = scoring or ScoringEngine()
        self.rng = rng or random.Random()

    # -------------------------------------------------------------------------
    # Input helpers
    # -------------------------------------------------------------------------

    def read_entry(self, prompt: str) -> str:
        """Read a non-empty, trimmed line, asking again while empty."""
        while True:
            entry = self.input_fn(prompt).strip()
            if entry:
                return entry
            self.output_fn(templates.ENTRY_EMPTY)

    def read_confirmed(self, prompt: str) -> str:
        """Read a line twice and return it once both entries match."""
        while True:
            first = self.read_entry(prompt)
            second = self.read_entry(templates.CONFIRM_ENTRY)
            if first == second:
                return second
            self.output_fn(templates.ENTRIES_MUST_MATCH)

    def choose_exam(self, store: ExamStore) -> str:
        """List the exam directory and ask for a file name."""
        exams = store.list_exams()
        if exams:
            self.output_fn(templates.AVAILABLE_EXAMS.format(directory=store.directory))
            for name in exams:
                self.output_fn(f"  {name}")
        else:
            self.output_fn(templates.NO_EXAMS_FOUND.format(directory=store.directory))
        return self.read_confirmed(templates.ENTER_EXAM_FILENAME)

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    def run(self, exam: Exam) -> ExamSummary:
        """Present every question in order and print the final summary."""
        session = StudySession(exam=exam)
        self.output_fn(templates.EXAM_HEADER.format(name=exam.name, count=exam.question_count))

        while not session.finished:
            index = session.position
            question = session.current_question
            self.output_fn(
                templates.QUESTION_HEADER.format(number=index + 1, total=exam.question_count)
            )
            self.output_fn(question.prompt)

            verdict = self.ask(session, index, question)
            session.record_verdict(index, verdict)
            self.show_verdict(verdict)

        summary = self.scoring.calculate_summary(exam, session.verdicts, session.hints_used)
        self.show_summary(exam, summary)
        logger.info(f"Session finished: {summary.correct}/{summary.total} on {exam.name!r}")
        return summary

    def ask(self, session: StudySession, index: int, question: Question) -> Verdict:
        """Collect a response for one question and grade it."""
        if isinstance(question, FreeEntryQuestion):
            return self._ask_free_entry(session, index, question)

        order = list(question.choices)
        if self.config.shuffle_choices:
            self.rng.shuffle(order)

        labels = {}
        for position, choice in enumerate(order):
            label = choice_label(position)
            labels[label] = choice
            self.output_fn(templates.CHOICE_LINE.format(letter=label, choice=choice))

        if isinstance(question, MultiChoiceQuestion):
            raw = self.read_entry(templates.ANSWER_MULTI_PROMPT)
            tokens = [t for t in _SELECTION_SEPARATORS.split(raw) if t]
            response: Any = {resolve_selection(t, labels) for t in tokens}
        else:
            raw = self.read_entry(templates.ANSWER_SINGLE_PROMPT)
            response = resolve_selection(raw, labels)

        return self.engine.grade(question, response)

    def _ask_free_entry(
        self, session: StudySession, index: int, question: FreeEntryQuestion
    ) -> Verdict:
        keyword = self.config.hint_keyword
        if question.disclosable_hints:
            prompt = templates.ANSWER_FREE_PROMPT.format(hint_keyword=keyword)
        else:
            prompt = templates.ANSWER_FREE_PROMPT_NO_HINTS

        while True:
            raw = self.read_entry(prompt)
            # an accepted answer that spells the keyword is still an answer
            if raw.lower() != keyword.lower() or raw in question.answer:
                return self.engine.grade(question, raw)

            disclosure = self.engine.next_hint(question, session.hints_shown_for(index))
            if disclosure.exhausted:
                self.output_fn(templates.NO_MORE_HINTS)
                continue
            session.record_hint(index)
            self.output_fn(
                templates.HINT_LINE.format(hint=disclosure.hint, remaining=disclosure.remaining)
            )

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def show_verdict(self, verdict: Verdict) -> None:
        """Print the verdict and, per config, the answer, explanation and refs."""
        self.output_fn(templates.VERDICT_CORRECT if verdict.correct else templates.VERDICT_INCORRECT)

        if verdict.correct and self.config.show_explanation != ExplanationMode.ALWAYS:
            return

        if len(verdict.expected) == 1:
            self.output_fn(templates.EXPECTED_ONE.format(answer=verdict.expected[0]))
        elif verdict.expected:
            self.output_fn(templates.EXPECTED_MANY.format(answers=", ".join(verdict.expected)))

        if verdict.explanation:
            self.output_fn(templates.EXPLANATION_LINE.format(explanation=verdict.explanation))

        if verdict.refs:
            self.output_fn(templates.REFS_HEADER)
            for ref in verdict.refs:
                self.output_fn(templates.REF_LINE.format(ref=ref))

    def show_summary(self, exam: Exam, summary: ExamSummary) -> None:
        """Print the final tally and the questions worth reviewing."""
        self.output_fn(templates.SUMMARY_HEADER.format(name=summary.exam_name))
        self.output_fn(
            templates.SUMMARY_SCORE.format(
                correct=summary.correct,
                total=summary.total,
                percentage=summary.percentage,
                band=summary.band,
            )
        )
        if summary.hints_used:
            self.output_fn(templates.SUMMARY_HINTS.format(hints_used=summary.hints_used))

        if summary.missed:
            self.output_fn(templates.SUMMARY_MISSED_HEADER)
            for index in summary.missed:
                self.output_fn(
                    templates.SUMMARY_MISSED_LINE.format(
                        number=index + 1, prompt=exam.questions[index].prompt
                    )
                )
