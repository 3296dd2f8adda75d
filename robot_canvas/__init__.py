from .brain.plan_validator import PlanFailure, PlanResult, PlanSuccess, PlanValidator
from .config import Settings
from .prompts import PromptBuilder

__all__ = [
    "PlanFailure",
    "PlanResult",
    "PlanSuccess",
    "PlanValidator",
    "PromptBuilder",
    "Settings",
]
