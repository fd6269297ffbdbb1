"""
Contract Validation Module

Модуль для валидации JSON контрактов между UI-слоем и матричным движком.
"""

from .validators import (
    ContractValidator,
    OperationRequestValidator,
    OperationResultValidator,
    SchemaLoader,
    validate_operation_request,
    validate_operation_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OperationRequestValidator",
    "OperationResultValidator",
    # Functions
    "validate_operation_request",
    "validate_operation_result",
]
