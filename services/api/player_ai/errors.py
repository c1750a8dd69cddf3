"""Domain exceptions raised by the core and translated to HTTP by the routes."""


class PlayerAIError(Exception):
    """Base class for service errors."""


class RecordNotFoundError(PlayerAIError):
    """A performance record id does not exist."""

    def __init__(self, record_id: int):
        super().__init__(f"Player performance not found: {record_id}")
        self.record_id = record_id


class TrainingError(PlayerAIError):
    """The classifier could not be trained on the current dataset.

    `record_id` is set when the failed retrain followed a committed write, so
    callers can still locate the stored row.
    """

    record_id: int | None = None


class ModelNotTrainedError(PlayerAIError):
    """A prediction was requested before any model was installed."""

    def __init__(self, message: str = "Model has not been trained yet"):
        super().__init__(message)


class FeatureValidationError(PlayerAIError, ValueError):
    """Raw metrics are missing or malformed; no feature vector was built."""

    def __init__(self, problems: list[str]):
        super().__init__("Invalid player metrics: " + "; ".join(problems))
        self.problems = problems
