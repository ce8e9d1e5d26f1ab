"""Domain value objects."""

from src.domain.value_objects.access_claims import AccessClaims

__all__ = ["AccessClaims"]
