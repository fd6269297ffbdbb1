"""
Тесты для определителя

Проверяемые инварианты:
1. Пороги выбора алгоритма: 1/2/3 — формулы, 4..10 — Лаплас, > 10 — Гаусс
2. NotSquare для неквадратных матриц
3. det(I_n) = 1, нулевая строка → 0
4. Согласие путей: замкнутая форма ↔ Лаплас ↔ Гаусс
5. Перестановка строк меняет знак (Гаусс)
6. Неизменность входной матрицы
7. Миноры и алгебраические дополнения
"""

import random

import pytest

from src.core.math import (
    CLOSED_FORM_MAX_SIZE,
    GAUSSIAN_SWITCH_SIZE,
    InvalidDimensions,
    Matrix,
    NotSquare,
    determinant,
    determinant_cofactor,
    determinant_gaussian,
)


def near_identity(n: int, seed: int) -> list[list[float]]:
    """Сетка I + 0.1·R с R из [-1, 1]: определитель порядка единицы."""
    rng = random.Random(seed)
    return [
        [(1.0 if i == j else 0.0) + 0.1 * rng.uniform(-1.0, 1.0) for j in range(n)]
        for i in range(n)
    ]


def pad_with_unit(grid: list[list[float]]) -> list[list[float]]:
    """Добавление строки и столбца с 1 на диагонали: определитель не меняется."""
    n = len(grid)
    padded = [list(row) + [0.0] for row in grid]
    padded.append([0.0] * n + [1.0])
    return padded


def swap_rows(grid: list[list[float]], i: int, j: int) -> list[list[float]]:
    result = [list(row) for row in grid]
    result[i], result[j] = result[j], result[i]
    return result


# =============================================================================
# ТЕСТЫ: Константы
# =============================================================================


class TestThresholds:
    """Пороги выбора алгоритма фиксированы"""

    def test_threshold_values(self):
        assert CLOSED_FORM_MAX_SIZE == 3
        assert GAUSSIAN_SWITCH_SIZE == 10


# =============================================================================
# ТЕСТЫ: Базовые случаи
# =============================================================================


class TestClosedForm:
    """Размеры 1, 2, 3"""

    def test_one_by_one(self):
        """1×1 — единственный элемент"""
        assert Matrix.from_sequence([[-7.5]]).determinant() == -7.5

    def test_two_by_two(self):
        """2×2 — ad - bc"""
        assert Matrix.from_sequence([[2, 0], [0, 2]]).determinant() == 4.0
        assert Matrix.from_sequence([[1, 2], [3, 4]]).determinant() == -2.0

    def test_three_by_three_sarrus(self):
        """3×3 — правило Саррюса"""
        m = Matrix.from_sequence([[2, -3, 1], [2, 0, -1], [1, 4, 5]])
        assert m.determinant() == 49.0

    def test_three_by_three_singular(self):
        """3×3 с линейно зависимыми строками"""
        m = Matrix.from_sequence([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert m.determinant() == pytest.approx(0.0, abs=1e-12)


# =============================================================================
# ТЕСТЫ: Разложение Лапласа (4..10)
# =============================================================================


class TestCofactorExpansion:
    """Размеры 4..10"""

    def test_four_by_four(self):
        """Классический пример 4×4 с det = 30"""
        m = Matrix.from_sequence(
            [
                [1, 0, 2, -1],
                [3, 0, 0, 5],
                [2, 1, 4, -3],
                [1, 0, 5, 0],
            ]
        )
        assert m.determinant() == pytest.approx(30.0)

    def test_upper_triangular_product_of_diagonal(self):
        """Треугольная 5×5: произведение диагонали"""
        m = Matrix.from_sequence(
            [
                [2, 1, 3, 4, 5],
                [0, 3, 1, 2, 2],
                [0, 0, -1, 7, 1],
                [0, 0, 0, 4, 9],
                [0, 0, 0, 0, 0.5],
            ]
        )
        assert m.determinant() == pytest.approx(2 * 3 * -1 * 4 * 0.5)

    def test_row_swap_changes_sign(self):
        """Перестановка строк меняет знак"""
        grid = near_identity(5, seed=7)
        assert determinant(swap_rows(grid, 0, 3)) == pytest.approx(-determinant(grid))

    def test_matches_gaussian_on_same_matrix(self):
        """Лаплас и Гаусс согласуются на одной матрице"""
        grid = near_identity(6, seed=11)
        assert determinant_cofactor(grid) == pytest.approx(determinant_gaussian(grid), abs=1e-9)


# =============================================================================
# ТЕСТЫ: Гаусс (> 10)
# =============================================================================


class TestGaussianElimination:
    """Размеры > 10"""

    def test_identity_eleven(self):
        """det(I_11) = 1"""
        assert Matrix.identity(11).determinant() == 1.0

    def test_swapped_identity_negative(self):
        """Перестановка двух строк I_11 → -1 (нулевой пивот, поиск строки ниже)"""
        grid = swap_rows(Matrix.identity(11).data, 0, 1)
        assert determinant(grid) == -1.0

    def test_zero_column_returns_exact_zero(self):
        """Нулевой столбец → пивот не найден → ровно 0.0"""
        grid = near_identity(12, seed=3)
        for row in grid:
            row[5] = 0.0
        assert determinant(grid) == 0.0

    def test_zero_last_row(self):
        """Нулевая последняя строка → 0"""
        grid = near_identity(11, seed=5)
        grid[10] = [0.0] * 11
        assert determinant(grid) == 0.0

    def test_zero_pivot_swaps_with_row_below(self):
        """Нулевой пивот: обмен с ненулевой строкой ниже, знак меняется"""
        grid = Matrix.identity(11).data
        grid[0] = [0.0] * 11
        grid[0][1] = 1.0
        grid[1] = [0.0] * 11
        grid[1][0] = 1.0
        grid[2][0] = 5.0
        # Перестановка строк 0 и 1 даёт треугольную матрицу с det 1, знак -1
        assert determinant_gaussian(grid) == pytest.approx(-1.0)

    def test_input_not_mutated(self):
        """Гаусс работает на копии"""
        grid = near_identity(11, seed=9)
        snapshot = [list(row) for row in grid]
        determinant(grid)
        assert grid == snapshot


# =============================================================================
# ТЕСТЫ: Согласие путей
# =============================================================================


class TestAlgorithmAgreement:
    """Все пути вычисления согласуются"""

    def test_cofactor_ten_vs_gaussian_eleven(self):
        """Лаплас (10×10) и Гаусс (11×11 с дополнением) согласуются в пределах 1e-6"""
        grid = near_identity(10, seed=2024)
        det_cofactor = determinant(grid)
        det_gaussian = determinant(pad_with_unit(grid))
        assert det_gaussian == pytest.approx(det_cofactor, abs=1e-6)

    def test_closed_form_three_vs_cofactor_four(self):
        """Саррюс (3×3) и Лаплас (4×4 с дополнением) согласуются"""
        grid = [[2.0, -3.0, 1.0], [2.0, 0.0, -1.0], [1.0, 4.0, 5.0]]
        assert determinant(pad_with_unit(grid)) == pytest.approx(determinant(grid))

    @pytest.mark.parametrize("n", [2, 3, 4, 5])
    def test_small_sizes_vs_gaussian(self, n):
        """Формулы и Лаплас против Гаусса на малых размерах"""
        grid = near_identity(n, seed=100 + n)
        assert determinant(grid) == pytest.approx(determinant_gaussian(grid), abs=1e-12)


# =============================================================================
# ТЕСТЫ: Свойства
# =============================================================================


class TestDeterminantProperties:
    """Общие свойства определителя"""

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 11])
    def test_identity_is_one(self, n):
        """det(I_n) = 1"""
        assert Matrix.identity(n).determinant() == 1.0

    @pytest.mark.parametrize("n", [2, 3, 4, 6, 11])
    def test_zero_row_is_zero(self, n):
        """Нулевая строка → det = 0"""
        grid = near_identity(n, seed=n)
        grid[n - 1] = [0.0] * n
        assert determinant(grid) == 0.0

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 11, 12])
    def test_transpose_invariant(self, n):
        """det(Aᵀ) = det(A)"""
        m = Matrix.from_sequence(near_identity(n, seed=40 + n))
        assert m.transpose().determinant() == pytest.approx(m.determinant(), rel=1e-9)

    @pytest.mark.parametrize("shape", [(2, 3), (3, 2), (1, 4), (11, 12)])
    def test_not_square(self, shape):
        """Неквадратная матрица → NotSquare"""
        with pytest.raises(NotSquare, match="must be square"):
            Matrix(*shape).determinant()


# =============================================================================
# ТЕСТЫ: Миноры и алгебраические дополнения
# =============================================================================


class TestMinorAndCofactor:
    """Тесты minor и cofactor"""

    @pytest.fixture
    def m(self) -> Matrix:
        return Matrix.from_sequence([[1, 2, 3], [4, 5, 6], [7, 8, 10]])

    def test_minor(self, m: Matrix):
        """Минор без строки 0 и столбца 1"""
        assert m.minor(0, 1).data == [[4.0, 6.0], [7.0, 10.0]]

    def test_cofactor_sign(self, m: Matrix):
        """Знак (-1)^(i+j)"""
        assert m.cofactor(0, 0) == 5 * 10 - 6 * 8
        assert m.cofactor(0, 1) == -(4 * 10 - 6 * 7)

    def test_first_row_expansion(self, m: Matrix):
        """Σ a[0][j]·C(0, j) = det"""
        expansion = sum(m[0, j] * m.cofactor(0, j) for j in range(3))
        assert expansion == pytest.approx(m.determinant())

    def test_minor_not_square(self):
        """Минор неквадратной матрицы → NotSquare"""
        with pytest.raises(NotSquare):
            Matrix(2, 3).minor(0, 0)

    def test_minor_of_one_by_one(self):
        """У 1×1 нет миноров"""
        with pytest.raises(InvalidDimensions):
            Matrix(1, 1).minor(0, 0)
        with pytest.raises(InvalidDimensions):
            Matrix(1, 1).cofactor(0, 0)

    def test_out_of_range(self, m: Matrix):
        """Индекс вне диапазона → IndexError"""
        with pytest.raises(IndexError):
            m.minor(3, 0)
        with pytest.raises(IndexError):
            m.cofactor(0, -1)
