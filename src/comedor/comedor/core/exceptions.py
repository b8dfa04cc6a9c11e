class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when a session token or its claims are not acceptable."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotAWeekday(ValidationError):
    """Raised when a day label cannot be resolved to one of the seven weekdays."""

    def __init__(self, label: object):
        self.label = label
        super().__init__(f"'{label}' no es un día de la semana válido")


class MalformedMenuInput(DomainError):
    """Raised when menu day data is not a mapping at all."""


class DocumentNotFound(DomainError):
    """Raised when updating a document that does not exist."""

    def __init__(self, collection: str, doc_id: str):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"Document {collection}/{doc_id} not found")
