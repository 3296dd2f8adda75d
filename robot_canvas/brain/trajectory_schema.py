"""Trajectory schema shared by the plan validator and the prompt builder.

The prompt's output-format section is generated from these models by
``field_guide()``, so a field added here shows up in the prompt as well.
"""

from typing import Annotated, List, Literal, Optional, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field, ValidationError

Degrees = Annotated[float, Field(strict=True, ge=-180, le=180, description="rotation in degrees")]
Pixels = Annotated[float, Field(strict=True)]


class JointAngles(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    shoulder: Degrees
    elbow: Degrees


class TargetCoords(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    x: Pixels = Field(description="x coordinate of the intended gripper position")
    y: Pixels = Field(description="y coordinate of the intended gripper position")


class TrajectoryStep(BaseModel):
    """One pose of the arm, reached over ``duration`` seconds."""

    model_config = ConfigDict(allow_inf_nan=False)

    step_id: int = Field(strict=True, description="sequence number of the movement")
    description: str = Field(strict=True, description="what the robot is doing (e.g. 'Reaching for ball')")
    angles: JointAngles = Field(description="joint angles")
    target_coords: TargetCoords = Field(description="intended (x, y) location of the gripper")
    gripper: Literal["open", "closed"] = Field(description="state of the end-effector")
    duration: float = Field(strict=True, gt=0.1, description="time in seconds for this step")


class TrajectoryPlan(BaseModel):
    """Ordered steps returned by the planner. Neither ``step_id`` order nor
    ``target_coords`` against ``angles`` is checked here."""

    trajectory: List[TrajectoryStep]

    @property
    def steps(self):
        return self.trajectory

    def __len__(self):
        return len(self.trajectory)

    def to_dicts(self):
        return [step.model_dump() for step in self.trajectory]


def collect_violations(error: ValidationError):
    """Flattens a pydantic ValidationError into (dotted path, reason) pairs."""
    violations = []
    for item in error.errors():
        path = ".".join(str(part) for part in item["loc"]) or "(root)"
        violations.append((path, item["msg"]))
    return violations


def _format_number(value) -> str:
    return f"{value:g}"


def _bounds_text(field) -> Optional[str]:
    ge = le = gt = lt = None
    for constraint in field.metadata:
        ge = getattr(constraint, "ge", ge)
        le = getattr(constraint, "le", le)
        gt = getattr(constraint, "gt", gt)
        lt = getattr(constraint, "lt", lt)

    if ge is not None and le is not None:
        return f"{_format_number(ge)} to {_format_number(le)}"
    parts = []
    if ge is not None:
        parts.append(f"minimum {_format_number(ge)}")
    if gt is not None:
        parts.append(f"greater than {_format_number(gt)}")
    if le is not None:
        parts.append(f"maximum {_format_number(le)}")
    if lt is not None:
        parts.append(f"less than {_format_number(lt)}")
    return ", ".join(parts) or None


def _describe(name, field) -> str:
    text = f"{name}: {field.description}" if field.description else name

    if get_origin(field.annotation) is Literal:
        choices = " or ".join(f'"{choice}"' for choice in get_args(field.annotation))
        return f"{text}, either {choices}"

    bounds = _bounds_text(field)
    if bounds:
        text += f" ({bounds})"
    return text


def field_guide(model=TrajectoryStep) -> List[str]:
    """
    One line per top-level field of ``model``; nested models are listed as
    "object with a and b" using their own fields.
    """
    lines = []
    for name, field in model.model_fields.items():
        annotation = field.annotation
        if isinstance(annotation, type) and issubclass(annotation, BaseModel):
            inner = " and ".join(_describe(sub, subfield) for sub, subfield in annotation.model_fields.items())
            label = f"{name} ({field.description})" if field.description else name
            lines.append(f"{label}: object with {inner}")
        else:
            lines.append(_describe(name, field))
    return lines
