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

from enum import Enum

class eos_model(Enum):  # Cubic equation of state family
    VDW = 0
    PR = 1
    SRK = 2

class flash_status(Enum):  # Terminal state of a vapor pressure flash
    SUCCESS = 0
    MAX_ITER_REACHED = 1
    INSUFFICIENT_ROOTS = 2

class_dic = {
    "eosmodel": eos_model,
}
