"""Scoring Engine - Final tally of a study session."""

from ..models.schemas import Exam, ExamSummary, Verdict


class ScoringEngine:
    """Tallies verdicts into an ExamSummary.

    Every question counts one point. Questions left unanswered count as
    missed.

    Result bands:
        - 90-100%: Excellent
        - 75-89%: Good
        - 50-74%: Fair
        - <50%: Needs review

    Example:
        >>> engine = ScoringEngine()
        >>> engine.calculate_band(80.0)
        'Good'
    """

    # (threshold, band)
    BANDS = [
        (90, "Excellent"),
        (75, "Good"),
        (50, "Fair"),
        (0, "Needs review"),
    ]

    def calculate_band(self, percentage: float) -> str:
        """Return the band for a percentage (0-100)."""
        for threshold, band in self.BANDS:
            if percentage >= threshold:
                return band
        return self.BANDS[-1][1]

    def calculate_summary(
        self, exam: Exam, verdicts: dict[int, Verdict], hints_used: int = 0
    ) -> ExamSummary:
        """Summarize a session.

        Args:
            exam: Exam that was studied
            verdicts: Verdicts by question index
            hints_used: Total hints revealed during the session

        Returns:
            ExamSummary with totals, percentage, band and missed indices

        Raises:
            ValueError: If a verdict refers to a question outside the exam
        """
        total = exam.question_count
        out_of_range = sorted(i for i in verdicts if not 0 <= i < total)
        if out_of_range:
            raise ValueError(
                f"Verdicts for unknown questions {out_of_range} (exam has {total} questions)"
            )

        correct = sum(1 for verdict in verdicts.values() if verdict.correct)
        missed = tuple(
            i for i in range(total) if i not in verdicts or not verdicts[i].correct
        )
        percentage = round(correct / total * 100, 1) if total > 0 else 0.0

        return ExamSummary(
            exam_name=exam.name,
            total=total,
            answered=len(verdicts),
            correct=correct,
            percentage=percentage,
            band=self.calculate_band(percentage),
            missed=missed,
            hints_used=hints_used,
        )
