"""Gymnasium environment for Lines of Action."""

from .gym_env import LinesOfActionEnv

__all__ = ["LinesOfActionEnv"]
