"""
Failure kinds of the planning pipeline.

These are carried inside a PlanFailure rather than raised through the
pipeline; the HTTP layer looks at the kind only to choose 400 vs 500.
"""


class PlanError(Exception):
    """Base class for every classified planning failure."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    @property
    def details(self):
        return f"{type(self).__name__}: {self.message}"


class ConfigurationError(PlanError):
    """Required configuration (the planner API key) is missing or invalid."""


class InputError(PlanError):
    """The caller's image or instruction is missing, mistyped or empty."""

    status_code = 400


class ExternalServiceError(PlanError):
    """The planner call failed at the transport level."""

    def __init__(self, message, status=None, body=""):
        super().__init__(message)
        self.status = status
        self.body = body

    @property
    def details(self):
        return f"{type(self).__name__}: status={self.status} body={self.body}"


class EmptyResponseError(PlanError):
    """The planner reply had no candidates."""


class MalformedResponseError(EmptyResponseError):
    """A candidate was returned, but it carried no usable text."""


class ParseError(PlanError):
    """The planner's text is not valid JSON."""

    def __init__(self, message, raw_text=""):
        super().__init__(message)
        self.raw_text = raw_text

    @property
    def details(self):
        return f"{type(self).__name__}: {self.message}. Response: {self.raw_text}"


class SchemaValidationError(PlanError):
    """The parsed plan violates the trajectory schema.

    ``violations`` holds every (field path, reason) pair, in the order they
    were found.
    """

    def __init__(self, violations):
        self.violations = list(violations)
        joined = "; ".join(f"{path}: {reason}" for path, reason in self.violations)
        super().__init__(f"Invalid trajectory format: {joined}")


class EmptyPlanError(PlanError):
    """The plan is schema-valid but has no steps."""
