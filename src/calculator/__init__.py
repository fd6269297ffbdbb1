"""Calculator — командный слой матричного калькулятора.

UI-слой (ввод формы, HTML, графики) вызывает MatrixCalculator и
отображает OperationResult; вычислительной логики в UI нет.
"""

from .matrix_calculator import (
    CalculatorConfig,
    MatrixCalculator,
    OperationResult,
)

__all__ = [
    "CalculatorConfig",
    "MatrixCalculator",
    "OperationResult",
]
