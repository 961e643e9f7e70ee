"""Form client for the liquidación trigger."""

from .state import MONTH_NAMES, FormState, FormStatus, InvalidTransition

__all__ = ["MONTH_NAMES", "FormState", "FormStatus", "InvalidTransition"]
