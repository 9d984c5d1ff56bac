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

from pycubiceos.classes import class_dic


class InvalidInputError(ValueError):
    """ Raised when an argument lies outside the physical domain of a calculation """


def validate_methods(names, variables):
    """ Converts method names given as strings into their Enum members """
    for m, method in enumerate(names):
        if type(variables[m]) == str:
            try:
                variables[m] = class_dic[method][variables[m].upper()]
            except KeyError:
                options = ', '.join(class_dic[method].__members__)
                raise InvalidInputError(f"Unknown {method}: '{variables[m]}'. Choose from {options}")
    if len(variables) == 1:
        return variables[0]
    else:
        return variables

def check_positive(**kwargs):
    for name, value in kwargs.items():
        if value is None or not np.all(np.asarray(value) > 0):
            raise InvalidInputError(f"{name} must be positive, got {value}")

def check_subcritical(t, tc):
    """ Vapor pressure is only defined at or below the critical temperature """
    if np.any(np.asarray(t) > tc):
        raise InvalidInputError(f"Temperature {t} K is above the critical temperature {tc} K")
