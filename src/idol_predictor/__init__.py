"""Pick pitchers from a simulated league snapshot with named algorithms."""

from .evaluate import Evaluation, evaluate

__all__ = ["Evaluation", "evaluate"]
