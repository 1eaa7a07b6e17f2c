"""Port/protocol classification."""

from .classifier import Classifier

__all__ = ["Classifier"]
