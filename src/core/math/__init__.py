"""
Core math modules для матричного калькулятора

Плотные матрицы, определитель, обратная матрица и решение линейных систем
с фиксированными порогами выбора алгоритма и единым epsilon.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    DISPLAY_DECIMALS,
    EPS_MATRIX_COMPARE,
    EPS_PIVOT,
    exceeds_tolerance,
    grids_close,
    is_close,
    is_negligible,
    is_real_number,
    is_valid_float,
    round_for_display,
)

# Errors
from src.core.math.errors import (
    DimensionMismatch,
    InvalidDimensions,
    InvalidInput,
    InvalidShape,
    LargeMatrixWarning,
    MatrixError,
    NoSolution,
    NotSquare,
    Singular,
    UnsolvableSystem,
)

# Algorithms
from src.core.math.determinant import (
    CLOSED_FORM_MAX_SIZE,
    GAUSSIAN_SWITCH_SIZE,
    determinant,
    determinant_cofactor,
    determinant_gaussian,
)
from src.core.math.inverse import (
    INVERSE_ADVISORY_SIZE,
    inverse,
    inverse_adjugate,
    inverse_gauss_jordan,
)
from src.core.math.linear_system import solve, solve_by_inverse, solve_gauss_jordan

# Matrix
from src.core.math.matrix import Matrix, solve_system

# Formatting
from src.core.math.formatting import format_matrix, format_number, format_solution

__all__ = [
    # Numerical Safeguards: Constants
    "DISPLAY_DECIMALS",
    "EPS_MATRIX_COMPARE",
    "EPS_PIVOT",
    # Numerical Safeguards: Functions
    "exceeds_tolerance",
    "grids_close",
    "is_close",
    "is_negligible",
    "is_real_number",
    "is_valid_float",
    "round_for_display",
    # Errors
    "MatrixError",
    "InvalidDimensions",
    "InvalidInput",
    "DimensionMismatch",
    "NotSquare",
    "Singular",
    "InvalidShape",
    "NoSolution",
    "UnsolvableSystem",
    "LargeMatrixWarning",
    # Algorithms: Constants
    "CLOSED_FORM_MAX_SIZE",
    "GAUSSIAN_SWITCH_SIZE",
    "INVERSE_ADVISORY_SIZE",
    # Algorithms: Functions
    "determinant",
    "determinant_cofactor",
    "determinant_gaussian",
    "inverse",
    "inverse_adjugate",
    "inverse_gauss_jordan",
    "solve",
    "solve_by_inverse",
    "solve_gauss_jordan",
    # Matrix
    "Matrix",
    "solve_system",
    # Formatting
    "format_matrix",
    "format_number",
    "format_solution",
]
