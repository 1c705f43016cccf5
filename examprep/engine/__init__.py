"""Exam Engines - Grading and scoring logic."""

from .grading_engine import GradingEngine
from .scoring_engine import ScoringEngine

__all__ = ["GradingEngine", "ScoringEngine"]
