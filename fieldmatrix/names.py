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
"""Static strings and constants used in the fieldmatrix package

    Field kinds

        RATIONAL = 'rational'

        PRIME = 'prime'

        BINARY = 'binary'

        GF256 = 'gf256'

    Field parameters

        MODULUS = 'modulus'

        CHARACTERISTIC = 'characteristic'

        GF256_POLY = 0x11D

        DEFAULT_MAX_DENOMINATOR = 1000000

    Formatting

        UNSET_REPR = 'UNSET'
"""

# Field kinds
RATIONAL = 'rational'
PRIME = 'prime'
BINARY = 'binary'
GF256 = 'gf256'
FIELD_KINDS = (RATIONAL, PRIME, BINARY, GF256)

# Field parameters
MODULUS = 'modulus'
CHARACTERISTIC = 'characteristic'
GF256_POLY = 0x11D  # x^8 + x^4 + x^3 + x^2 + 1
DEFAULT_MAX_DENOMINATOR = 1000000

# Formatting
UNSET_REPR = 'UNSET'
