from __future__ import annotations

from typing import List


class StorefrontError(Exception):
    pass


class ValidationError(ValueError, StorefrontError):
    """Raised when catalog or subscriber input fails validation.

    ``errors`` holds one ``{"field": ..., "message": ...}`` dict per problem,
    which is what the API returns in its 400 body.
    """

    def __init__(self, errors: List[dict]):
        self.errors = errors
        msg = "; ".join(f"{e.get('field', '?')}: {e.get('message', e.get('msg', ''))}" for e in errors)
        super().__init__(msg or "invalid data")


class AlreadySubscribed(StorefrontError):
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"{email} is already subscribed")


class CatalogUnavailable(StorefrontError):
    pass
