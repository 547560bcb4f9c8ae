"""Domain exceptions."""


class SubmissionError(Exception):
    """A form submission could not be processed."""


class InvalidSavedItemError(SubmissionError):
    """The submission references a saved item that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid saved item reference: {name}")
        self.name = name


class InsufficientDataError(SubmissionError):
    """Macros could not be resolved for the submission."""


class InvalidQuantityError(SubmissionError):
    """The submitted quantity is not a positive number."""


class EstimationError(RuntimeError):
    """The macro estimation API failed or returned malformed data."""


class EntryNotFoundError(LookupError):
    """No log entry exists with the requested id."""

    def __init__(self, entry_id: int) -> None:
        super().__init__(f"Log entry {entry_id} not found")
        self.entry_id = entry_id
