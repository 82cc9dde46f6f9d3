"""
Start modes for the Kudu data generator.

Re-exports the mode interfaces and the concrete modes so downstream code can
import from `kudu_datagen.modes` directly.
"""

from kudu_datagen.modes.abstract import AbstractStartMode, StartMode
from kudu_datagen.modes.clean import CleanStartMode
from kudu_datagen.modes.resume import ResumeMode

__all__ = [
    # Abstracts
    "AbstractStartMode",
    "StartMode",
    # Concrete modes
    "CleanStartMode",
    "ResumeMode",
]
