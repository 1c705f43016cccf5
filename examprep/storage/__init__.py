"""Exam Storage - Exam files on disk."""

from .exam_store import ExamStore

__all__ = ["ExamStore"]
