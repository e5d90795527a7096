"""
Run Package

Configuration and trial execution for the genetic algorithm.

Exported Classes:
    Config: Configuration parameters, read from an INI file
    Trial:  Abstract base class for one evolutionary run
"""

from neuroevo.run.config import Config
from neuroevo.run.trial  import Trial

__all__ = ['Config',
           'Trial']
