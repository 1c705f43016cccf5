"""Terminal message templates and the bundled sample exam."""

from .templates import SAMPLE_EXAM, SAMPLE_EXAM_FILENAME

__all__ = ["SAMPLE_EXAM", "SAMPLE_EXAM_FILENAME"]
