"""Evaluation helpers for Kalah policies."""

from .match import EvaluationResult, evaluate_policies

__all__ = ["EvaluationResult", "evaluate_policies"]
