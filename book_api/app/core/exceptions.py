"""Errors raised by the service layer and translated by the endpoints."""


class ResourceNotFoundError(Exception):
    """Raised when an operation targets an id with no stored record."""

    def __init__(self, resource: str, resource_id: int) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} not found with id {resource_id}")
