"""
Advice message templates.
"""

from .templates import AdviceTemplates, MESSAGES_PATH

__all__ = ["AdviceTemplates", "MESSAGES_PATH"]
