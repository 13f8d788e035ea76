"""Interactive terminal prompts."""

from swabbooker.ui.prompts import Choice, Prompter

__all__ = ["Choice", "Prompter"]
