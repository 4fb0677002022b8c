"""Base domain exceptions."""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    pass
