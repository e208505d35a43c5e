# inventory/domain/errors.py
"""
Typed failures raised by the domain services.
The HTTP layer (inventory/api/errors.py) maps each class to a status code
and the `{"success": false, ...}` envelope.
"""
from __future__ import annotations
from typing import Dict, Optional


class InventoryError(Exception):
    status_code: int = 500

    def __init__(self, message: str, *, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error = error  # raw detail string surfaced as "error" in the response


class ValidationError(InventoryError):
    """Malformed, missing or out-of-range input. Carries field-level messages."""
    status_code = 400

    def __init__(self, errors: Dict[str, str], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = dict(errors)


class NotFoundError(InventoryError):
    """Record absent, or present but owned by someone else (not disclosed)."""
    status_code = 404


class ConflictError(InventoryError):
    """Uniqueness violation still unresolved after the retry budget."""
    status_code = 400


class UnauthorizedError(InventoryError):
    # 401 when no credential was sent, 403 when it is invalid or expired
    status_code = 401

    def __init__(self, message: str, *, status_code: int = 401):
        super().__init__(message)
        self.status_code = status_code


class InternalError(InventoryError):
    status_code = 500


class DuplicateKeyError(Exception):
    """
    Raised by repositories when a write hits a unique index.
    `field` names the offending key (e.g. "sku", "email").
    """

    def __init__(self, field: str):
        super().__init__(f"duplicate key on {field}")
        self.field = field
