# tzsuggest/errors.py
from __future__ import annotations


class InvalidArgument(ValueError):
    """Requested result size is not strictly smaller than the candidate set."""


class InteractionError(Exception):
    """
    Base for failures while answering an interaction.
    The message is shown verbatim to the invoking user.
    """
    message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class Fatal(InteractionError):
    message = "Fatal error encountered. Please report this."


class InvalidArgs(InteractionError):
    message = "Invalid arguments. Please check the date and time fields."


class UnknownTimezone(InteractionError):
    message = "Unknown timezone. Please pick one of the suggested timezones."


class UnsupportedInteractionType(InteractionError):
    message = "Unsupported interaction type."


class MissingPayload(InteractionError):
    message = "Missing interaction payload."
