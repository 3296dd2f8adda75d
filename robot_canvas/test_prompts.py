"""Tests for the planning prompt."""

import pytest

from robot_canvas.config import Settings
from robot_canvas.prompts import PromptBuilder


@pytest.fixture
def builder(settings):
    return PromptBuilder(settings)


def test_prompt_is_deterministic(builder):
    """Same instruction and settings give a byte-identical prompt."""
    first = builder.build("reach for the ball")
    second = PromptBuilder(Settings(gemini_api_key="other-key")).build("reach for the ball")

    assert first == builder.build("reach for the ball")
    assert first == second


def test_instruction_is_embedded_verbatim(builder):
    instruction = 'pick up the {red} "cube"'
    prompt = builder.build(instruction)

    assert f'instruction: "{instruction}"' in prompt


def test_empty_instruction_is_accepted(builder):
    prompt = builder.build("")

    assert 'instruction: "".' in prompt


def test_canvas_and_arm_geometry(builder):
    prompt = builder.build("wave")

    assert "width 1200px, height 600px" in prompt
    assert "(0,0) as top-left corner" in prompt
    assert "Base fixed at center (600, 300)" in prompt
    assert "Upper arm length: 150px" in prompt
    assert "Lower arm length: 120px" in prompt
    assert "Maximum reach from the base: 270px" in prompt


def test_geometry_follows_settings():
    prompt = PromptBuilder(Settings(canvas_width=800, canvas_height=400, upper_arm_length=100)).build("wave")

    assert "width 800px, height 400px" in prompt
    assert "Base fixed at center (400, 200)" in prompt
    assert "Maximum reach from the base: 220px" in prompt


def test_angle_conventions(builder):
    prompt = builder.build("wave")

    assert "0 = pointing right, positive = counterclockwise" in prompt
    assert "0 = fully extended/straight line" in prompt
    assert "negative = hyperextending clockwise" in prompt


def test_output_fields_come_from_schema(builder):
    prompt = builder.build("wave")

    assert "- step_id: sequence number of the movement" in prompt
    assert "- description: what the robot is doing" in prompt
    assert "shoulder: rotation in degrees (-180 to 180)" in prompt
    assert "elbow: rotation in degrees (-180 to 180)" in prompt
    assert "- target_coords (intended (x, y) location of the gripper): object with x:" in prompt
    assert '- gripper: state of the end-effector, either "open" or "closed"' in prompt
    assert "- duration: time in seconds for this step (greater than 0.1)" in prompt


def test_forbids_neutral_step(builder):
    prompt = builder.build("wave")

    assert "Do NOT include a final step that retracts the arm to a neutral position" in prompt
