import pytest

from axiom_shift.matrix import Matrix


@pytest.mark.parametrize(
    "data, rows, cols",
    [
        ([[1, 2], [3, 4]], 2, 2),
        ([], 0, 0),
        ([[]], 1, 0),
        ([[1, 2], [3]], 2, 2),
        (None, 0, 0),
    ],
)
def test_new_matrix_shape(data, rows, cols):
    m = Matrix(data)
    assert (m.rows, m.cols) == (rows, cols)


def test_new_matrix_stores_floats():
    m = Matrix([[1, 2], [3, 4]])
    assert m.data == [[1.0, 2.0], [3.0, 4.0]]


def test_multiply_normal():
    res = Matrix([[1, 2], [3, 4]]).multiply(Matrix([[5, 6], [7, 8]]))
    assert res.data == [[19.0, 22.0], [43.0, 50.0]]


def test_multiply_non_square():
    res = Matrix([[1, 2, 3]]).multiply(Matrix([[1], [2], [3]]))
    assert res.data == [[14.0]]


def test_multiply_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix([[1, 2, 3], [4, 5, 6]]).multiply(Matrix([[1, 2], [3, 4]]))


def test_multiply_zero_size_raises():
    with pytest.raises(ValueError):
        Matrix([]).multiply(Matrix([]))


def test_subtract_normal():
    res = Matrix([[1, 2], [3, 4]]).subtract(Matrix([[1, 2], [3, 4]]))
    assert res.data == [[0.0, 0.0], [0.0, 0.0]]


def test_subtract_values():
    res = Matrix([[5, 7]]).subtract(Matrix([[1, 2]]))
    assert res.data == [[4.0, 5.0]]


def test_subtract_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3, 4]]).subtract(Matrix([[1, 2, 3], [4, 5, 6]]))


def test_subtract_zero_size_raises():
    with pytest.raises(ValueError):
        Matrix([]).subtract(Matrix([]))


@pytest.mark.parametrize("data, want", [([[1, 2], [3, 4]], 2.5), ([], 0.0)])
def test_scalar_value(data, want):
    assert Matrix(data).scalar_value() == want


def test_normalize_unit_norm():
    m = Matrix([[3, 4], [0, 0]])
    m.normalize()
    norm = sum(v * v for row in m.data for v in row)
    assert abs(norm - 1.0) < 1e-6
    assert m.data[0] == pytest.approx([0.6, 0.8])


def test_normalize_empty_stays_empty():
    m = Matrix([])
    m.normalize()
    assert (m.rows, m.cols) == (0, 0)


def test_normalize_all_zero_unchanged():
    m = Matrix([[0, 0], [0, 0]])
    m.normalize()
    assert m.data == [[0.0, 0.0], [0.0, 0.0]]


def test_copy_is_deep():
    m = Matrix([[1, 0], [0, 2]])
    c = m.copy()
    assert (c.rows, c.cols) == (2, 2)
    assert c.data[0][0] == 1 and c.data[1][1] == 2
    c.data[0][0] = 99
    assert m.data[0][0] == 1


@pytest.mark.parametrize(
    "a, b, want",
    [
        (Matrix([[0, 0], [0, 0]]), Matrix([[0, 0], [0, 0], [0, 0]]), False),
        (Matrix([[1, 0], [0, 0]]), Matrix([[0, 0], [0, 0]]), False),
        (Matrix([[1, 0], [0, 0]]), Matrix([[1, 0], [0, 0]]), True),
        (Matrix([]), Matrix([]), True),
    ],
)
def test_equality(a, b, want):
    assert (a == b) is want


def test_equality_with_none():
    m = Matrix([[0, 0], [0, 0]])
    assert (m == None) is False  # noqa: E711
    assert (None == m) is False  # noqa: E711