"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Input violates a calculation constraint; always caller-correctable"""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class InternalConsistencyError(DomainException):
    """Generated schedule does not reconcile to the payable amount"""

    pass
