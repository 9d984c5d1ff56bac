#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyCubicEOS - Cubic Equation of State and Vapor Pressure Utilities
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

import numpy as np
import numpy.typing as npt
from typing import List

from pycubiceos.constants import SQRT3, IMAG_TOL
from pycubiceos.validate import InvalidInputError

# Primitive cube roots of unity
W1 = complex(-0.5, SQRT3 / 2)
W2 = complex(-0.5, -SQRT3 / 2)


def _depressed(a: float, b: float, c: float):
    # x^3 + a*x^2 + b*x + c = 0 shifted to t^3 + 3*p*t + 2*q = 0 with x = t - a/3
    p = (3 * b - a * a) / 9
    q = (27 * c + a * (2 * a * a - 9 * b)) / 54
    return p, q


def cubic_roots(a: float, b: float, c: float) -> np.ndarray:
    """ Returns the three complex roots of x^3 + a*x^2 + b*x + c = 0 using Cardano's formula
        a: Coefficient of x^2
        b: Coefficient of x
        c: Constant term

        The square root of the discriminant and both cube roots are taken in complex arithmetic
        whatever the sign of the discriminant, so one formula covers three real roots, one real root
        with a complex conjugate pair, and repeated roots alike.
        The second cube root is paired to the first through u1 * u2 = -p, which keeps the principal
        branch of u1 valid when the radicand is a negative real.
    """
    p, q = _depressed(a, b, c)
    disc = p * p * p + q * q

    s = np.sqrt(complex(disc, 0))
    r1, r2 = -q + s, -q - s
    w = r1 if abs(r1) >= abs(r2) else r2   # Larger radicand avoids cancellation

    if w == 0:  # p = q = 0, triple root
        u1 = u2 = 0j
    else:
        u1 = np.power(w, 1.0 / 3.0)
        u2 = -p / u1

    shift = a / 3
    x1 = u1 + u2 - shift
    x2 = W1 * u1 + W2 * u2 - shift
    x3 = W2 * u1 + W1 * u2 - shift
    return np.array([x1, x2, x3], dtype=complex)


def real_roots(a: float, b: float, c: float, tol: float = IMAG_TOL) -> List[float]:
    """ Returns real roots of x^3 + a*x^2 + b*x + c = 0 in ascending order
        Roots with an imaginary part smaller than tol are treated as real. Repeated roots appear once per multiplicity.
    """
    x = cubic_roots(a, b, c)
    return sorted(float(xi.real) for xi in x if abs(xi.imag) < tol)


def count_real_roots(a: float, b: float, c: float) -> int:
    """ Returns the number of distinct real roots of x^3 + a*x^2 + b*x + c = 0 from the discriminant sign alone
        disc = 0, p = 0 : One triple root
        disc = 0, p != 0: One double root and one single root
        disc < 0        : Three distinct real roots
        disc > 0        : One real root and a complex conjugate pair
    """
    p, q = _depressed(a, b, c)
    disc = p * p * p + q * q

    if disc == 0:
        if p == 0:
            return 1
        else:
            return 2
    elif disc < 0:
        return 3
    else:
        return 1


def polynomial_real_roots(coeffs: npt.ArrayLike, tol: float = IMAG_TOL) -> List[float]:
    """ Returns real roots in ascending order of coeffs[0] + coeffs[1]*x + ... + coeffs[N-1]*x^(N-1) = 0
        Uses the eigenvalues of the companion matrix (numpy.roots). Zero leading coefficients are ignored.
    """
    coeffs = np.trim_zeros(np.atleast_1d(np.asarray(coeffs, dtype=float)), 'b')
    if coeffs.size < 2:
        raise InvalidInputError("Polynomial must be at least of first degree")
    x = np.roots(coeffs[::-1])   # numpy expects highest order first
    return sorted(float(xi.real) for xi in x if abs(xi.imag) < tol)
