class CaltrainError(Exception):
    """Base exception for all status page errors."""


class DocumentError(CaltrainError):
    """Raised when the page cannot be decoded or parsed into a tree."""


class ExtractionError(CaltrainError):
    """Raised when a completed row cannot be turned into a train record.

    Any of these aborts the whole extraction; no partial snapshot is returned.
    """

    def __init__(self, text: str, message: str = "") -> None:
        self.text = text
        super().__init__(message or f"Could not parse {text!r}")


class InvalidTrainIdError(ExtractionError):
    """Raised when the train id cell is not a number in the 0..65535 range."""

    def __init__(self, text: str) -> None:
        super().__init__(text, f"Invalid train id: {text!r}")


class UnknownTrainTypeError(ExtractionError):
    """Raised when the type cell names none of Local, Limited or Baby Bullet."""

    def __init__(self, text: str) -> None:
        super().__init__(text, f"Unknown train type: {text!r}")


class InvalidArrivalTimeError(ExtractionError):
    """Raised when the arrival countdown does not fit in 0..65535 minutes."""

    def __init__(self, text: str) -> None:
        super().__init__(text, f"Invalid arrival time: {text!r}")
