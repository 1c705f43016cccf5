"""Study State - Per-run bookkeeping of a study session."""

from dataclasses import dataclass, field

from .schemas import Exam, Question, Verdict


@dataclass
class StudySession:
    """Mutable state of one pass through an exam.

    The exam itself is never modified; the session only tracks where the
    user is and what happened so far.

    Attributes:
        exam: Exam being studied (read-only)
        position: Index of the question currently presented
        verdicts: Recorded verdicts (question index -> Verdict)
        hints_shown: Hints revealed so far (question index -> count)
    """

    exam: Exam
    position: int = 0
    verdicts: dict[int, Verdict] = field(default_factory=dict)
    hints_shown: dict[int, int] = field(default_factory=dict)

    @property
    def finished(self) -> bool:
        return self.position >= self.exam.question_count

    @property
    def current_question(self) -> Question | None:
        if self.finished:
            return None
        return self.exam.questions[self.position]

    @property
    def hints_used(self) -> int:
        return sum(self.hints_shown.values())

    def hints_shown_for(self, index: int) -> int:
        """Hints already revealed for a question."""
        return self.hints_shown.get(index, 0)

    def record_hint(self, index: int) -> int:
        """Count one more revealed hint and return the new total."""
        self.hints_shown[index] = self.hints_shown_for(index) + 1
        return self.hints_shown[index]

    def record_verdict(self, index: int, verdict: Verdict) -> None:
        """Store the verdict for a question and move past it."""
        if not 0 <= index < self.exam.question_count:
            raise IndexError(f"Question index out of range: {index}")
        self.verdicts[index] = verdict
        self.position = max(self.position, index + 1)
