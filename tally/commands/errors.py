from enum import Enum

from tally.commands.keywords import EntityType


class ExtractionReason(str, Enum):
    INVALID_AMOUNT = "invalidAmount"
    INVALID_DATE = "invalidDate"
    MISSING_NAME_OR_TYPE = "missingNameOrType"


class CommandError(Exception):
    """Base class for errors a command turns into a user-facing reply."""


class ExtractionError(CommandError):
    def __init__(self, reason: ExtractionReason, token: str | None = None):
        self.reason = reason
        self.token = token
        super().__init__(f"{reason.value}: {token!r}" if token else reason.value)


class ResolutionError(CommandError):
    reason = "notFound"

    def __init__(self, entity_type: EntityType, identifier: str):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(f"{entity_type.value} {identifier!r} not found")


class CollaboratorError(Exception):
    """Storage or AI service failure."""
