from typing import Any, Dict, Iterable, Optional


class SendZenError(Exception):
    """Base class for every error raised by the SendZen client."""


class ConfigurationError(SendZenError, ValueError):
    pass


class MessageValidationError(SendZenError, ValueError):
    """
    Raised before any network call when a message breaks a gateway rule.
    Nothing is sent once one of these is raised.
    """


class InvalidPhoneNumber(MessageValidationError):
    def __init__(self, value: str, field: str):
        self.value = value
        self.field = field
        super().__init__(f"Invalid '{field}' phone number format: {value}")


class InvalidSender(InvalidPhoneNumber):
    def __init__(self, value: str):
        super().__init__(value, "from")


class InvalidRecipient(InvalidPhoneNumber):
    def __init__(self, value: str):
        super().__init__(value, "to")


class InvalidLanguageCode(MessageValidationError):
    def __init__(self, lang_code: str):
        self.lang_code = lang_code
        super().__init__(
            f"Invalid language code format: {lang_code}. "
            "Expected format: en_US, es_ES, fr_FR, etc."
        )


class MissingContentLocator(MessageValidationError):
    def __init__(self, message_type: str, both_given: bool = False):
        self.message_type = message_type
        self.both_given = both_given
        if both_given:
            reason = "must have either link or id, not both"
        else:
            reason = "must have either link or id"
        super().__init__(f"{message_type.capitalize()} {reason}")


class EmptyComponentParameters(MessageValidationError):
    def __init__(self, component_type: str):
        self.component_type = component_type
        super().__init__(f"{component_type} component must have parameters")


class TooManyButtons(MessageValidationError):
    def __init__(self, sub_type: str, limit: int, count: int):
        self.sub_type = sub_type
        self.limit = limit
        self.count = count
        super().__init__(
            f"Maximum {limit} {sub_type} button{'s' if limit > 1 else ''} allowed, got {count}"
        )


class IncompatibleButtonTypes(MessageValidationError):
    def __init__(self, sub_type: str, others: Iterable[str]):
        self.sub_type = sub_type
        self.others = tuple(others)
        super().__init__(
            f"{sub_type} buttons cannot be combined with {', '.join(self.others)} buttons"
        )


class DuplicateButtonIndex(MessageValidationError):
    def __init__(self, index: Optional[int]):
        self.index = index
        super().__init__(f"Button indices must be unique, {index} is repeated")


class DuplicateButtonText(MessageValidationError):
    def __init__(self, text: Optional[str]):
        self.text = text
        super().__init__(f"Button texts must be unique, '{text}' is repeated")


class InteractiveButtonCountOutOfRange(MessageValidationError):
    def __init__(self, count: int, minimum: int = 1, maximum: int = 3):
        self.count = count
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Interactive message must have between {minimum} and {maximum} buttons, got {count}"
        )


class DuplicateButtonId(MessageValidationError):
    def __init__(self, button_id: str):
        self.button_id = button_id
        super().__init__(f"Interactive message buttons must have unique IDs, '{button_id}' is repeated")


class DuplicateButtonTitle(MessageValidationError):
    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Interactive message buttons must have unique titles, '{title}' is repeated")


class ApiError(SendZenError):
    """
    Error surfaced by the transport.

    Attributes:
        message (str): Human readable message.
        code (str): Gateway or client error code.
        details (str): Additional details.
        status (int, optional): HTTP status, 0 when no response was received.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: str,
        status: Optional[int] = None
    ):
        self.message = message
        self.code = code
        self.details = details
        self.status = status
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        error = {
            "message": self.message,
            "error": {
                "code": self.code,
                "details": self.details,
            },
        }
        if self.status is not None:
            error["status"] = self.status
        return error


class ServerError(ApiError):
    pass


class NetworkError(ApiError):
    def __init__(self, details: str = "No response received from server"):
        super().__init__(
            message="Network error - no response received",
            code="NETWORK_ERROR",
            details=details,
            status=0
        )


class UnknownError(ApiError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message=message or "Unknown error occurred",
            code="UNKNOWN_ERROR",
            details="An unexpected error occurred"
        )
