"""Gymnasium environment wrapping the Kalah rules."""

from .gym_env import KalahEnv

__all__ = ["KalahEnv"]
