"""
Domain models and value objects.

Contains the request model that the UI layer sends to the matrix engine.
"""

from src.core.domain.operation_request import MatrixOperation, OperationRequest

__all__ = [
    "MatrixOperation",
    "OperationRequest",
]
