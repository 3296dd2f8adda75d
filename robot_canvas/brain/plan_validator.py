import json
import logging
from dataclasses import dataclass
from typing import Union

from pydantic import ValidationError

from robot_canvas.brain.errors import (
    ConfigurationError,
    EmptyPlanError,
    InputError,
    ParseError,
    PlanError,
    SchemaValidationError,
)
from robot_canvas.brain.llm_engine import GeminiRoboticsClient, split_data_url
from robot_canvas.brain.trajectory_schema import TrajectoryPlan, collect_violations
from robot_canvas.prompts import PromptBuilder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanSuccess:
    plan: TrajectoryPlan


@dataclass(frozen=True)
class PlanFailure:
    error: PlanError


PlanResult = Union[PlanSuccess, PlanFailure]


def check_inputs(image_data, instruction):
    """
    Returns an InputError for a missing, non-string or blank field, else None.
    """
    if not image_data or not instruction:
        return InputError("Both image (base64) and prompt are required")
    if not isinstance(image_data, str) or not isinstance(instruction, str):
        return InputError("Image must be a base64 string and prompt must be a string")
    if not instruction.strip():
        return InputError("Prompt cannot be empty")
    return None


def parse_plan(text):
    """
    Turns the planner's raw text into a TrajectoryPlan.
    Returns a PlanResult; nothing is raised for bad planner output.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return PlanFailure(ParseError(f"Failed to parse trajectory response: {e}", raw_text=text))

    try:
        plan = TrajectoryPlan.model_validate(data)
    except ValidationError as e:
        return PlanFailure(SchemaValidationError(collect_violations(e)))

    if len(plan) == 0:
        return PlanFailure(EmptyPlanError("Trajectory is empty"))

    return PlanSuccess(plan)


class PlanValidator:
    """
    The boundary between the untrusted planner and the rest of the backend.
    validate() asks the planner for a trajectory and returns it only if it
    passes the schema as a whole; otherwise it returns the classified error.
    """

    def __init__(self, settings, client=None, prompt_builder=None):
        self.settings = settings
        self.client = client or GeminiRoboticsClient(settings)
        self.prompt_builder = prompt_builder or PromptBuilder(settings)

    def validate(self, image_data, instruction) -> PlanResult:
        input_error = check_inputs(image_data, instruction)
        if input_error is not None:
            return PlanFailure(input_error)

        if not self.settings.gemini_api_key:
            return PlanFailure(ConfigurationError(
                "GEMINI_API_KEY environment variable is required. "
                "Get your API key from https://aistudio.google.com/apikey"
            ))

        image_base64, mime_type = split_data_url(image_data)
        prompt = self.prompt_builder.build(instruction)

        try:
            text = self.client.generate(prompt, image_base64, mime_type)
        except PlanError as e:
            logger.warning("Planner call failed: %s", e.message)
            return PlanFailure(e)

        logger.debug("Planner reply: %s", text)
        result = parse_plan(text)
        if isinstance(result, PlanFailure):
            logger.warning("Rejected planner output: %s", result.error.message)
        else:
            logger.info("Accepted trajectory with %d steps", len(result.plan))
        return result
