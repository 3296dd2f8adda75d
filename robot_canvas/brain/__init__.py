from .errors import (
    ConfigurationError,
    EmptyPlanError,
    EmptyResponseError,
    ExternalServiceError,
    InputError,
    MalformedResponseError,
    ParseError,
    PlanError,
    SchemaValidationError,
)
from .trajectory_schema import TrajectoryPlan, TrajectoryStep

__all__ = [
    "ConfigurationError",
    "EmptyPlanError",
    "EmptyResponseError",
    "ExternalServiceError",
    "InputError",
    "MalformedResponseError",
    "ParseError",
    "PlanError",
    "SchemaValidationError",
    "TrajectoryPlan",
    "TrajectoryStep",
]
