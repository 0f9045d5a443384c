"""activitymix: classify learning activities into pedagogical modes."""

__version__ = "0.1.0"

from . import core
from . import features
from . import storage

__all__ = ["core", "features", "storage"]
