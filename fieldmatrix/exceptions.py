#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Exceptions raised by the fieldmatrix package

Every error derives from FieldMatrixError and from the built-in exception that
describes the same condition, so callers may catch either one.
"""


class FieldMatrixError(Exception):
    """Base class for all errors raised by fieldmatrix"""


class InvalidDimensions(FieldMatrixError, ValueError):
    """A matrix was requested with a non-positive number of rows or columns"""


class IndexOutOfRange(FieldMatrixError, IndexError):
    """A row or column index lies outside the extent of a matrix"""


class IncompatibleDimensions(FieldMatrixError, ValueError):
    """Two matrices do not have matching shapes for the requested operation"""


class MissingArgument(FieldMatrixError, TypeError):
    """A required matrix or field argument was None"""


class UnsetElementError(FieldMatrixError, LookupError):
    """An arithmetic operation read a matrix cell that was never assigned"""

    def __init__(self, row: int, col: int):
        super().__init__(f"Matrix element ({row}, {col}) is unset")
        self.row = row
        self.col = col


class SingularMatrixError(FieldMatrixError, ArithmeticError):
    """A square matrix has no inverse"""


class InconsistentSystemError(FieldMatrixError, ArithmeticError):
    """A linear system has no solution"""
