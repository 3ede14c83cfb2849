# controllers/__init__.py

from .base import BaseController
from .feedback import FeedbackController, FeedbackGain

__all__ = [
    "BaseController",
    "FeedbackController",
    "FeedbackGain",
]
