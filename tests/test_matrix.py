import pytest

from fieldmatrix.fields import of_double, of_int
from fieldmatrix.matrix import Matrix, MatrixError
from fieldmatrix.spy import FieldSpy

EPS = 1e-9


def _filled(field, rows):
    m = Matrix(len(rows), field)
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            m[i, j] = value
    return m


def _values(m):
    return [[m[i, j] for j in range(m.size)] for i in range(m.size)]


def test_new_matrix_is_zero():
    m = Matrix(3, of_int())
    assert _values(m) == [[0] * 3 for _ in range(3)]


@pytest.mark.parametrize("size", [0, -1])
def test_create_rejects_bad_size(size):
    with pytest.raises(MatrixError):
        Matrix(size, of_int())


def test_create_rejects_missing_field():
    with pytest.raises(MatrixError):
        Matrix(2, None)


def test_create_set_get_int():
    m = _filled(of_int(), [[2, 1], [3, 5]])
    assert m[0, 0] == 2
    assert m[0, 1] == 1
    assert m[1, 0] == 3
    assert m[1, 1] == 5


@pytest.mark.parametrize("index", [(2, 2), (0, 2), (2, 0), (-1, 0)])
def test_out_of_range_access_int(index):
    m = Matrix(2, of_int())
    with pytest.raises(IndexError):
        m[index]
    with pytest.raises(IndexError):
        m[index] = 99
    assert _values(m) == [[0, 0], [0, 0]]


def test_create_set_get_double():
    m = _filled(of_double(), [[123.123, 321.123], [4151532.45125125, 97124.99900001]])
    assert abs(m[0, 0] - 123.123) < EPS
    assert abs(m[0, 1] - 321.123) < EPS
    assert abs(m[1, 0] - 4151532.45125125) < EPS
    assert abs(m[1, 1] - 97124.99900001) < EPS


def test_out_of_range_set_double():
    m = _filled(of_double(), [[1.5, 2.5], [3.5, 4.5]])
    for index in [(2, 2), (0, 2), (2, 0)]:
        with pytest.raises(IndexError):
            m[index] = 99.0001
    assert _values(m) == [[1.5, 2.5], [3.5, 4.5]]


def test_sum_int():
    field = of_int()
    m1 = _filled(field, [[1, 2], [3, 4]])
    m2 = _filled(field, [[5, 6], [7, 8]])
    m3 = Matrix(2, field)
    assert m1.add(m2, m3) is m3
    assert _values(m3) == [[6, 8], [10, 12]]


def test_sum_int_bad_cases():
    field = of_int()
    m1 = Matrix(2, field)
    m3 = Matrix(2, field)
    with pytest.raises(MatrixError):
        m1.add(m3, Matrix(3, field))
    with pytest.raises(MatrixError):
        m1.add(Matrix(2, of_double()), m3)


def test_sum_double():
    field = of_double()
    m1 = _filled(field, [[123.123, 213.1412], [315.515, 24124.5150]])
    m2 = _filled(field, [[5.7437, 6.6267], [7.412, 84.1245]])
    m3 = Matrix(2, field)
    m1.add(m2, m3)
    assert abs(m3[0, 0] - 128.866700) < EPS
    assert abs(m3[0, 1] - 219.767900) < EPS
    assert abs(m3[1, 0] - 322.927000) < EPS
    assert abs(m3[1, 1] - 24208.6395) < EPS


def test_sum_double_bad_cases():
    field = of_double()
    m1 = Matrix(2, field)
    m3 = Matrix(2, field)
    with pytest.raises(MatrixError):
        m1.add(m3, Matrix(3, field))
    with pytest.raises(MatrixError):
        m1.add(Matrix(2, of_int()), m3)


IDENTITY = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
OPERAND = [[312, 123, 444], [512, 123, 5], [42, 52, 666]]


def test_multiply_int_by_identity():
    field = of_int()
    m1 = _filled(field, IDENTITY)
    m2 = _filled(field, OPERAND)
    m3 = Matrix(3, field)
    assert m1.multiply(m2, m3) is m3
    assert _values(m3) == OPERAND


def test_multiply_double_by_identity():
    field = of_double()
    m1 = _filled(field, [[float(v) for v in row] for row in IDENTITY])
    m2 = _filled(field, [[float(v) for v in row] for row in OPERAND])
    m3 = Matrix(3, field)
    m1.multiply(m2, m3)
    for i in range(3):
        for j in range(3):
            assert abs(m3[i, j] - OPERAND[i][j]) < EPS


@pytest.mark.parametrize("field, other", [(of_int(), of_double()), (of_double(), of_int())])
def test_multiply_bad_cases(field, other):
    m1 = Matrix(3, field)
    m3 = Matrix(3, field)
    with pytest.raises(MatrixError):
        m1.multiply(Matrix(2, field), m3)
    with pytest.raises(MatrixError):
        m1.multiply(Matrix(3, other), m3)


def test_multiply_by_zero_matrix_gives_zero():
    field = of_int()
    m = _filled(field, OPERAND)
    out = _filled(field, OPERAND)
    m.multiply(Matrix(3, field), out)
    assert _values(out) == [[0] * 3 for _ in range(3)]


def test_add_linear_combination_int():
    m = _filled(of_int(), [[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert m.add_linear_combination(1, [0, 2, -1]) is m
    assert _values(m) == [[1, 2, 3], [-3, -3, -3], [7, 8, 9]]


def test_add_linear_combination_double():
    m = _filled(of_double(), [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]])
    m.add_linear_combination(1, [0.5, 0.0, -1.0])
    expected = [[1.0, 2.0, 3.0], [-2.5, -2.0, -1.5], [7.0, 8.0, 9.0]]
    for i in range(3):
        for j in range(3):
            assert abs(m[i, j] - expected[i][j]) < EPS


def test_add_linear_combination_bad_cases():
    m = Matrix(3, of_int())
    with pytest.raises(IndexError):
        m.add_linear_combination(3, [0, 2, -1])
    with pytest.raises(MatrixError):
        m.add_linear_combination(1, None)
    with pytest.raises(MatrixError):
        m.add_linear_combination(1, [1, 2])


def test_scale_int():
    field = of_int()
    m = _filled(field, [[3, 2, 1], [4, 5, 6], [9, 8, 7]])
    assert m.scale(5, field) is m
    assert _values(m) == [[15, 10, 5], [20, 25, 30], [45, 40, 35]]


def test_scale_int_bad_cases():
    m = Matrix(3, of_int())
    with pytest.raises(MatrixError):
        m.scale(5.0, of_double())
    with pytest.raises(MatrixError):
        m.scale(None, of_int())


def test_scale_double():
    field = of_double()
    m = _filled(field, [[3.0, 2.0, 1.0], [4.0, 5.0, 6.0], [9.0, 8.0, 7.0]])
    m.scale(5.0, field)
    expected = [[15.0, 10.0, 5.0], [20.0, 25.0, 30.0], [45.0, 40.0, 35.0]]
    for i in range(3):
        for j in range(3):
            assert abs(m[i, j] - expected[i][j]) < EPS


def test_scale_double_bad_cases():
    m = Matrix(3, of_double())
    with pytest.raises(MatrixError):
        m.scale(5, of_int())
    with pytest.raises(MatrixError):
        m.scale(None, of_double())


def test_format_layout():
    m = _filled(of_int(), [[2, 1], [3, 5]])
    assert m.format() == "2 1\n3 5\n"
    assert str(m) == m.format()


def test_format_double_uses_general_notation():
    m = _filled(of_double(), [[0.5, 2.0], [1e-5, -1.5]])
    assert m.format() == "0.5 2\n1e-05 -1.5\n"


def test_add_calls_operator():
    spy = FieldSpy(of_double())
    a, b, out = Matrix(2, spy), Matrix(2, spy), Matrix(2, spy)
    spy.reset()
    a.add(b, out)
    assert spy.add_calls == 4


def test_multiply_calls_operator():
    spy = FieldSpy(of_double())
    a, b, out = Matrix(2, spy), Matrix(2, spy), Matrix(2, spy)
    spy.reset()
    a.multiply(b, out)
    assert spy.zero_calls == 4
    assert spy.add_calls == 8
    assert spy.multiply_calls == 8


def test_create_calls_zero():
    spy = FieldSpy(of_double())
    Matrix(3, spy)
    assert spy.zero_calls == 9


def test_print_calls_operator():
    spy = FieldSpy(of_double())
    m = Matrix(3, spy)
    spy.reset()
    m.format()
    assert spy.format_calls == 9