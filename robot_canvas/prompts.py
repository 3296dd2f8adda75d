from robot_canvas.brain.trajectory_schema import field_guide

SYSTEM_PROMPT = """You are a robotics planning system. Analyze this canvas image and the user's instruction: "{instruction}".

The canvas dimensions are: width {width}px, height {height}px. Coordinates use (0,0) as top-left corner, with x increasing to the right and y increasing downward.

The robot arm has:
- Base fixed at center ({base_x:g}, {base_y:g})
- Upper arm length: {upper}px
- Lower arm length: {lower}px
- Maximum reach from the base: {reach}px
- Shoulder angle: -180 to 180 degrees (0 = pointing right, positive = counterclockwise)
- Elbow angle: -180 to 180 degrees (0 = fully extended/straight line, positive = bending/flexing counterclockwise relative to upper arm, negative = hyperextending clockwise relative to upper arm)

IMPORTANT: To fully extend the lower arm, set elbow angle to 0 degrees. This creates a straight line from the upper arm through the lower arm to the gripper, maximizing the reach distance.

Return a JSON object with a "trajectory" array. Each trajectory step must include:
{fields}

The target_coords should match the calculated gripper position from the angles. Each step should have valid angles within the specified ranges.

IMPORTANT: Do NOT include a final step that retracts the arm to a neutral position (shoulder: 0, elbow: 0). The arm should stay in the final position after completing the task."""


class PromptBuilder:
    """
    Renders the planning prompt: the canvas and arm geometry from settings,
    the output format from the trajectory schema, and the user's instruction
    verbatim.
    """

    def __init__(self, settings):
        self.settings = settings

    def build(self, instruction):
        s = self.settings
        base_x, base_y = s.base_position
        fields = "\n".join(f"- {line}" for line in field_guide())

        return SYSTEM_PROMPT.format(
            instruction=instruction,
            width=s.canvas_width,
            height=s.canvas_height,
            base_x=base_x,
            base_y=base_y,
            upper=s.upper_arm_length,
            lower=s.lower_arm_length,
            reach=s.max_reach,
            fields=fields,
        )
