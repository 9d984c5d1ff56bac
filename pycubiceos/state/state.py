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
from dataclasses import dataclass
from typing import Any, List, Optional

from pycubiceos.constants import R
from pycubiceos.roots import real_roots


@dataclass(frozen=True)
class IsobaricIsothermalState:
    """ Reduced, dimensionless state of a pure fluid at fixed pressure and temperature

        eos: Equation of state supplying the formula set
        t: Temperature (K)
        a: Reduced attraction parameter, a*P/(R*T)^2
        b: Reduced repulsion parameter, b*P/(R*T)
        beta: d(ln alpha)/d(ln Tr). None for models without temperature correction
    """
    eos: Any
    t: float
    a: float
    b: float
    beta: Optional[float] = None

    def _correction(self):
        # Temperature corrected formula sets take beta as their last argument
        return () if self.beta is None else (self.beta,)

    def cubic_coefficients(self):
        return self.eos.zfactor_cubic_eq(self.a, self.b)

    def zfactor(self) -> List[float]:
        """ Returns all real Z-factor roots in ascending order """
        return real_roots(*self.cubic_coefficients())

    def ln_fugacity_coeff(self, z: float) -> float:
        return self.eos.ln_fugacity_coeff(z, self.a, self.b)

    def fugacity_coeff(self, z: float) -> float:
        return np.exp(self.ln_fugacity_coeff(z))

    def residual_enthalpy(self, z: float) -> float:
        """ Residual enthalpy (J/mol) of the phase with Z-factor z """
        return self.eos.residual_enthalpy(z, self.t, self.a, self.b, *self._correction())

    def residual_entropy(self, z: float) -> float:
        """ Residual entropy (J/mol/K) of the phase with Z-factor z """
        return self.eos.residual_entropy(z, self.a, self.b, *self._correction())

    def residual_helmholtz_energy(self, z: float) -> float:
        return self.eos.residual_helmholtz_energy(z, self.t, self.a, self.b)

    def residual_gibbs_energy(self, z: float) -> float:
        return R * self.t * self.ln_fugacity_coeff(z)


@dataclass(frozen=True)
class IsothermalLine:
    """ Pressure-volume isotherm. a and b are the dimensional attraction (Pa·m6/mol2) and repulsion (m3/mol) parameters """
    eos: Any
    t: float
    a: float
    b: float

    def pressure(self, v):
        """ Returns pressure (Pa) at molar volume v (m3/mol) """
        return self.eos.pressure_formula(self.t, v, self.a, self.b)
