"""Domain layer errors."""

from gatehouse.domain.value import InviteInvalidReason


class DomainError(Exception):
    """Base domain error."""

    kind = "domain_error"

    def details(self) -> dict:
        """Extra fields surfaced to the caller alongside the message."""
        return {}


class NotFoundError(DomainError):
    """Raised when a referenced invite, profile or code does not exist."""

    kind = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")

    def details(self) -> dict:
        return {"resource": self.resource}


class ForbiddenError(DomainError):
    """Raised when a non-administrator calls an admin-only operation."""

    kind = "forbidden"

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Only administrators can {action}")


class ConflictError(DomainError):
    """Raised on uniqueness violations."""

    kind = "conflict"


class InvalidOperationError(DomainError):
    """Raised for malformed requests and violated preconditions."""

    kind = "invalid"

    def __init__(
        self,
        message: str,
        reason: InviteInvalidReason | None = None,
        **details,
    ):
        self.reason = reason
        self.extra = details
        super().__init__(message)

    def details(self) -> dict:
        result = dict(self.extra)
        if self.reason is not None:
            result["reason"] = self.reason.value
        return result


class ExhaustedError(DomainError):
    """Raised when redeeming a code that has reached its usage limit."""

    kind = "exhausted"
    reason = InviteInvalidReason.MAX_USES_REACHED

    def __init__(self, code: str):
        self.code = code
        super().__init__("Invite has reached its maximum number of uses")

    def details(self) -> dict:
        return {"reason": self.reason.value}
