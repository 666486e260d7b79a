"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised when a required field is missing or a value breaks an entity
    constraint (for example comment content longer than 500 characters).
    """

    pass


class InvalidIdentifierError(ValidationError):
    """Raised when an identifier is not a well-formed UUID.

    Only the shape is checked; whether a record exists is a separate
    question answered by the repositories.
    """

    def __init__(self, kind: str, value: object):
        self.kind = kind
        self.value = value
        super().__init__(f"Invalid {kind} id: {value!r}")
