"""
Тесты для обратной матрицы

Проверяемые инварианты:
1. 2×2 — замкнутая форма; 3..10 — присоединённая матрица; > 10 — Гаусс-Жордан
2. Singular при |det| < 1e-10 (проверка до выбора алгоритма)
3. NotSquare для неквадратных матриц
4. A · A⁻¹ ≈ I в пределах 1e-9
5. LargeMatrixWarning при n > 15, вычисление не прерывается
6. Неизменность входной матрицы
"""

import random
import warnings

import pytest

from src.core.math import (
    EPS_MATRIX_COMPARE,
    INVERSE_ADVISORY_SIZE,
    LargeMatrixWarning,
    Matrix,
    NotSquare,
    Singular,
    inverse,
    inverse_adjugate,
    inverse_gauss_jordan,
)


def diagonally_dominant(n: int, seed: int) -> list[list[float]]:
    """Хорошо обусловленная сетка: |a_ii| > Σ|a_ij|."""
    rng = random.Random(seed)
    grid = [[rng.uniform(-1.0, 1.0) for _ in range(n)] for _ in range(n)]
    for i in range(n):
        grid[i][i] = float(n + 1) * (1.0 if rng.random() < 0.5 else -1.0)
    return grid


def assert_identity(matrix: Matrix) -> None:
    assert matrix.is_close(Matrix.identity(matrix.rows), abs_tol=EPS_MATRIX_COMPARE)


# =============================================================================
# ТЕСТЫ: Замкнутые формы
# =============================================================================


class TestSmallInverse:
    """Размеры 1 и 2"""

    def test_scaled_identity(self):
        """[[2,0],[0,2]]⁻¹ = [[0.5,0],[0,0.5]]"""
        result = Matrix.from_sequence([[2, 0], [0, 2]]).inverse()
        assert result == Matrix.from_sequence([[0.5, 0], [0, 0.5]])

    def test_general_two_by_two(self):
        """[[4,7],[2,6]]⁻¹ = [[0.6,-0.7],[-0.2,0.4]]"""
        result = Matrix.from_sequence([[4, 7], [2, 6]]).inverse()
        assert result.is_close(Matrix.from_sequence([[0.6, -0.7], [-0.2, 0.4]]))

    def test_one_by_one(self):
        """[[a]]⁻¹ = [[1/a]]"""
        assert Matrix.from_sequence([[4]]).inverse().data == [[0.25]]

    def test_one_by_one_zero(self):
        """[[0]] — Singular"""
        with pytest.raises(Singular):
            Matrix.from_sequence([[0]]).inverse()


# =============================================================================
# ТЕСТЫ: Присоединённая матрица (3..10)
# =============================================================================


class TestAdjugateInverse:
    """Размеры 3..10"""

    def test_tridiagonal_three_by_three(self):
        """Известная обратная для трёхдиагональной матрицы"""
        m = Matrix.from_sequence([[2, -1, 0], [-1, 2, -1], [0, -1, 2]])
        expected = Matrix.from_sequence([[3, 2, 1], [2, 4, 2], [1, 2, 3]]).scale(0.25)
        assert m.inverse().is_close(expected)

    @pytest.mark.parametrize("n", [3, 4, 5, 6])
    def test_product_is_identity(self, n):
        """A · A⁻¹ ≈ I"""
        m = Matrix.from_sequence(diagonally_dominant(n, seed=n))
        assert_identity(m.multiply(m.inverse()))
        assert_identity(m.inverse().multiply(m))

    def test_matches_gauss_jordan(self):
        """Присоединённая и Гаусс-Жордан дают одинаковый результат"""
        grid = diagonally_dominant(5, seed=17)
        det = Matrix.from_sequence(grid).determinant()
        adjugate_result = Matrix.from_sequence(inverse_adjugate(grid, det))
        gauss_result = Matrix.from_sequence(inverse_gauss_jordan(grid))
        assert adjugate_result.is_close(gauss_result, abs_tol=1e-10)


# =============================================================================
# ТЕСТЫ: Гаусс-Жордан (> 10)
# =============================================================================


class TestGaussJordanInverse:
    """Размеры > 10"""

    def test_identity(self):
        """I⁻¹ = I"""
        assert Matrix.identity(11).inverse() == Matrix.identity(11)

    @pytest.mark.parametrize("n", [11, 12])
    def test_product_is_identity(self, n):
        """A · A⁻¹ ≈ I"""
        m = Matrix.from_sequence(diagonally_dominant(n, seed=n))
        assert_identity(m.multiply(m.inverse()))

    def test_permutation_needs_pivoting(self):
        """Нулевая диагональ: выбор пивота по максимуму модуля"""
        grid = Matrix.identity(11).data
        grid[0], grid[10] = grid[10], grid[0]
        m = Matrix.from_sequence(grid)
        # Перестановочная матрица обратна сама себе
        assert m.inverse() == m

    def test_zero_pivot_raises_singular(self):
        """Вырожденный пивот после выбора → Singular"""
        with pytest.raises(Singular, match="Gauss-Jordan"):
            inverse_gauss_jordan([[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [1.0, 1.0, 1.0]])

    def test_duplicate_rows_singular(self):
        """Одинаковые строки → det = 0 → Singular"""
        grid = diagonally_dominant(11, seed=1)
        grid[7] = list(grid[2])
        with pytest.raises(Singular, match="determinant"):
            inverse(grid)


# =============================================================================
# ТЕСТЫ: Ошибки и границы
# =============================================================================


class TestInverseErrors:
    """Singular и NotSquare"""

    def test_singular_two_by_two(self):
        """[[1,2],[2,4]] — Singular"""
        with pytest.raises(Singular, match="no inverse"):
            Matrix.from_sequence([[1, 2], [2, 4]]).inverse()

    def test_singular_is_arithmetic_error(self):
        """Singular — ArithmeticError"""
        with pytest.raises(ArithmeticError):
            Matrix.from_sequence([[1, 2], [2, 4]]).inverse()

    def test_near_zero_determinant_singular(self):
        """|det| < 1e-10 считается нулём"""
        m = Matrix.from_sequence([[1e-6, 0], [0, 1e-5]])
        with pytest.raises(Singular):
            m.inverse()

    def test_small_but_valid_determinant(self):
        """|det| = 1e-9 — обратная существует"""
        m = Matrix.from_sequence([[1e-4, 0], [0, 1e-5]])
        assert m.inverse().is_close(Matrix.from_sequence([[1e4, 0], [0, 1e5]]), abs_tol=1e-3)

    def test_not_square(self):
        """Неквадратная матрица → NotSquare"""
        with pytest.raises(NotSquare, match="inverse"):
            Matrix(2, 3).inverse()

    def test_input_not_mutated(self):
        """Входная матрица не изменяется"""
        grid = diagonally_dominant(11, seed=4)
        snapshot = [list(row) for row in grid]
        inverse(grid)
        assert grid == snapshot


# =============================================================================
# ТЕСТЫ: Предупреждение о размере
# =============================================================================


class TestLargeMatrixAdvisory:
    """LargeMatrixWarning при n > 15"""

    def test_threshold_value(self):
        assert INVERSE_ADVISORY_SIZE == 15

    def test_warning_above_threshold(self):
        """16×16 — предупреждение, результат вычислен"""
        with pytest.warns(LargeMatrixWarning, match="16x16"):
            result = Matrix.identity(16).inverse()
        assert result == Matrix.identity(16)

    def test_no_warning_at_threshold(self):
        """15×15 — без предупреждения"""
        with warnings.catch_warnings():
            warnings.simplefilter("error", LargeMatrixWarning)
            Matrix.identity(15).inverse()

    def test_warning_does_not_block_singular_check(self):
        """Предупреждение выдаётся до проверки сингулярности"""
        grid = Matrix.identity(16).data
        grid[3] = [0.0] * 16
        with pytest.warns(LargeMatrixWarning):
            with pytest.raises(Singular):
                inverse(grid)

    def test_warning_is_user_warning(self):
        assert issubclass(LargeMatrixWarning, UserWarning)
