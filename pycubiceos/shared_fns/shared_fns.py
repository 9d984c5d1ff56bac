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

def convert_to_numpy(input_data: npt.ArrayLike) -> np.ndarray:
    # Lists, tuples and scalars all become float arrays with at least one element
    return np.atleast_1d(np.asarray(input_data, dtype=float))

def is_scalar(input_data) -> bool:
    return np.ndim(input_data) == 0

def process_output(output, is_scalar_input: bool):
    # Hand back a float for scalar input, otherwise a numpy array
    output = np.asarray(output, dtype=float)
    if is_scalar_input:
        return float(output.reshape(-1)[0])
    return output
