"""
SAHARA - Mental Wellness Companion Analysis Core

This package provides the sentiment and risk classification engine
behind the Sahara companion, along with the crisis keyword check,
support copy helpers, and a thin HTTP API around them.

IMPORTANT: Classifications are heuristic and non-clinical. They gate
supportive UI only and never replace professional assessment.
"""

__version__ = "0.1.0"
__author__ = "Sahara Engineering Team"
