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

# Constants
R = 8.31446261815324  # Universal gas constant, J/(mol·K)
SQRT2 = np.sqrt(2.0)
SQRT3 = np.sqrt(3.0)
IMAG_TOL = 1e-10  # Largest imaginary part of a root still treated as real
