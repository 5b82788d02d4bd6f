"""
Shared compute infrastructure for surveystats.

IMPORTANT: This is NOT where engine code lives. Engines live in their own
subpackages (descriptive/, anova/, ...). This module only holds helpers
shared across them.

Submodules:
    timing: Execution timing utilities
"""

from surveystats.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
