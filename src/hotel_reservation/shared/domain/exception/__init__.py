from .exceptions import (
    DomainException,
    DuplicateResourceException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "DuplicateResourceException",
]
