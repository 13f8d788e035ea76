"""Constants for SwabBooker.

All classes can be imported directly from this package:
    from swabbooker.constants import ApiDefaults, WorkflowDefaults
"""

from .api import ApiDefaults
from .workflow import PromptMessages, WorkflowDefaults

__all__ = ["ApiDefaults", "PromptMessages", "WorkflowDefaults"]
