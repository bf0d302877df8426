import random
import pytest
from fractions import Fraction
from fieldmatrix import RationalField, PrimeField, BinaryField, Matrix

fields = [RationalField(), PrimeField(2), PrimeField(7), BinaryField(0b111), BinaryField.gf256()]


@pytest.fixture(params=fields, ids=repr, scope="session")
def field(request: pytest.FixtureRequest):
    """Provide session-level fixture for parametrized fields."""
    return request.param


@pytest.fixture(scope="session")
def rational() -> RationalField:
    return RationalField()


@pytest.fixture(scope="session")
def gf2() -> PrimeField:
    return PrimeField(2)


@pytest.fixture(scope="session")
def gf7() -> PrimeField:
    return PrimeField(7)


@pytest.fixture(scope="session")
def gf256() -> BinaryField:
    return BinaryField.gf256()


def random_element(field, rng):
    if isinstance(field, RationalField):
        return Fraction(rng.randint(-9, 9), rng.randint(1, 4))
    elif isinstance(field, PrimeField):
        return rng.randrange(field.p)
    else:
        return rng.randrange(field.size)


def random_nonzero_element(field, rng):
    while True:
        value = random_element(field, rng)
        if not field.is_zero(value):
            return value


@pytest.fixture
def rng():
    return random.Random(20160817)


@pytest.fixture
def random_matrix(rng):
    """Provide a factory for fully set matrices with reproducible random entries."""

    def make(rows, cols, field):
        matrix = Matrix(rows, cols, field)
        for i in range(rows):
            for j in range(cols):
                matrix.set(i, j, random_element(field, rng))
        return matrix

    return make


@pytest.fixture
def random_value(rng):
    """Provide a factory for random field elements."""
    return lambda field: random_element(field, rng)


@pytest.fixture
def random_nonzero(rng):
    """Provide a factory for random non-zero field elements."""
    return lambda field: random_nonzero_element(field, rng)


@pytest.fixture(scope="session")
def assert_rref():
    """Provide a check that a matrix is in reduced row echelon form."""
    return check_rref


def check_rref(matrix):
    f = matrix.field
    last_pivot = -1
    seen_zero_row = False
    for i in range(matrix.row_count()):
        row = [matrix.get(i, j) for j in range(matrix.column_count())]
        nonzero = [j for j, value in enumerate(row) if not f.is_zero(value)]
        if not nonzero:
            seen_zero_row = True
            continue
        assert not seen_zero_row, "non-zero row below a zero row"
        pivot = nonzero[0]
        assert pivot > last_pivot, "pivot columns must increase"
        last_pivot = pivot
        assert f.equals(row[pivot], f.one())
        for k in range(matrix.row_count()):
            if k != i:
                assert f.is_zero(matrix.get(k, pivot)), "pivot must be the only non-zero entry in its column"
