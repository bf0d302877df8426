"""Test the field factory, the numpy, scipy and sympy conversions and logging control."""
import logging
import pytest
import numpy as np
import sympy
from fractions import Fraction
from scipy import sparse
import fieldmatrix as fm
from fieldmatrix import Matrix, UNSET, RationalField, PrimeField, BinaryField


def test_create_field():
    assert fm.create_field(fm.RATIONAL) is RationalField()
    assert fm.create_field('prime', characteristic=7) == PrimeField(7)
    assert fm.create_field('binary', modulus=0b111) == BinaryField(0b111)
    assert fm.create_field('GF256') == BinaryField(0x11D)


def test_create_field_errors():
    with pytest.raises(fm.MissingArgument):
        fm.create_field(fm.PRIME)
    with pytest.raises(fm.MissingArgument):
        fm.create_field(fm.BINARY)
    with pytest.raises(ValueError):
        fm.create_field('complex')


def test_matrix_from_numpy(rational, gf7):
    m = fm.matrix_from_numpy(np.array([[1, 2], [3, 4]]), rational)
    assert m == Matrix.from_rows([[1, 2], [3, 4]], rational)
    assert isinstance(m.get(0, 0), Fraction)
    f = fm.matrix_from_numpy(np.array([[0.5, -1.25]]), rational)
    assert f.to_rows() == [[Fraction(1, 2), Fraction(-5, 4)]]
    g = fm.matrix_from_numpy(np.array([[8, -1]], dtype=np.int64), gf7)
    assert g.to_rows() == [[1, 6]]
    o = fm.matrix_from_numpy([[Fraction(1, 3), 2]], rational)
    assert o.to_rows() == [[Fraction(1, 3), Fraction(2)]]


def test_matrix_from_numpy_rejects_bad_shapes(rational):
    with pytest.raises(fm.InvalidDimensions):
        fm.matrix_from_numpy(np.array([1, 2, 3]), rational)
    with pytest.raises(fm.InvalidDimensions):
        fm.matrix_from_numpy(np.zeros((0, 3)), rational)
    with pytest.raises(fm.MissingArgument):
        fm.matrix_from_numpy(None, rational)


def test_matrix_to_numpy(rational):
    m = Matrix.from_rows([[1, UNSET], [Fraction(1, 2), 3]], rational)
    array = fm.matrix_to_numpy(m)
    assert array.shape == (2, 2)
    assert array.dtype == object
    assert array[1, 0] == Fraction(1, 2)
    assert array[0, 1] is UNSET


def test_matrix_from_sparse(rational, gf256):
    sp = sparse.csr_matrix(np.array([[0, 3], [2, 0], [0, 0]]))
    m = fm.matrix_from_sparse(sp, rational)
    assert m == Matrix.from_rows([[0, 3], [2, 0], [0, 0]], rational)
    g = fm.matrix_from_sparse(sparse.coo_matrix(([0x80, 0x01], ([0, 1], [1, 0])), shape=(2, 2)), gf256)
    assert g.to_rows() == [[0, 0x80], [1, 0]]
    with pytest.raises(TypeError):
        fm.matrix_from_sparse(np.eye(2), rational)


def test_matrix_from_float_sparse(gf7, gf256, rational):
    m = fm.matrix_from_sparse(sparse.eye(2), gf7)
    assert m == Matrix.identity(2, gf7)
    assert m.to_rows() == [[1, 0], [0, 1]]
    g = fm.matrix_from_sparse(sparse.csr_matrix(np.array([[0.0, 3.0], [255.0, 0.0]])), gf256)
    assert g.to_rows() == [[0, 3], [255, 0]]
    assert fm.matrix_from_sparse(sparse.eye(2) * 0.5, rational).get(0, 0) == Fraction(1, 2)
    with pytest.raises(TypeError):
        fm.matrix_from_sparse(sparse.eye(2) * 0.5, gf7)


def test_sympy_round_trip(rational):
    s = sympy.Matrix([[sympy.Rational(1, 2), 1], [0, -3]])
    m = fm.matrix_from_sympy(s, rational)
    assert m.to_rows() == [[Fraction(1, 2), Fraction(1)], [Fraction(0), Fraction(-3)]]
    assert fm.matrix_to_sympy(m) == s
    with pytest.raises(fm.UnsetElementError):
        fm.matrix_to_sympy(Matrix(1, 1, rational))


def test_sympy_rref_agrees(rational, random_matrix):
    m = random_matrix(4, 5, rational)
    reduced, _ = fm.matrix_to_sympy(m).rref()
    m.reduced_row_echelon_form()
    assert fm.matrix_to_sympy(m) == reduced


def test_disable_logger(rational, caplog):
    with caplog.at_level(logging.WARNING):
        with fm.DisableLogger():
            rational.value_of(0.1)
    assert "approximated" not in caplog.text
    with caplog.at_level(logging.WARNING):
        rational.value_of(0.1)
    assert "approximated" in caplog.text


def test_rref_logs_rank(rational, caplog):
    with caplog.at_level(logging.DEBUG, logger="fieldmatrix"):
        Matrix.from_rows([[1, 2], [2, 4]], rational).reduced_row_echelon_form()
    assert "1 pivots" in caplog.text


def test_float_array_conversion_logs(rational, caplog):
    with caplog.at_level(logging.INFO, logger="fieldmatrix.matrixtools"):
        fm.matrix_from_numpy(np.array([[0.5, 1.0]]), rational)
    assert any(r.name == "fieldmatrix.matrixtools" and "float array" in r.getMessage() for r in caplog.records)
