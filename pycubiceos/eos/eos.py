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

import abc
import numpy as np
from typing import List, Optional, Tuple

from pycubiceos.classes import eos_model
from pycubiceos.constants import R, SQRT2
from pycubiceos.validate import InvalidInputError, validate_methods, check_positive
from pycubiceos.state import IsobaricIsothermalState, IsothermalLine


class CubicEOSBase(abc.ABC):
    """ Critical point scaling shared by every cubic equation of state

        Concrete families define the class constants omega_a and omega_b and the formula set:
            - pressure_formula(t, v, a, b)
            - zfactor_cubic_eq(a, b)
            - ln_fugacity_coeff(z, a, b)
            - residual_enthalpy(z, t, a, b[, beta])
            - residual_entropy(z, a, b[, beta])
            - residual_helmholtz_energy(z, t, a, b)
        where t is temperature (K), v molar volume (m3/mol), a and b the attraction and repulsion
        parameters (dimensional in pressure_formula, reduced elsewhere), z the Z-factor and beta
        the temperature correction d(ln alpha)/d(ln Tr).
    """
    omega_a = None
    omega_b = None

    def __init__(self, pc: float, tc: float):
        self._set_critical(pc, tc)

    @classmethod
    def critical_attraction_param(cls, pc: float, tc: float) -> float:
        return (cls.omega_a * R * R) * tc * tc / pc

    @classmethod
    def critical_repulsion_param(cls, pc: float, tc: float) -> float:
        return (cls.omega_b * R) * tc / pc

    @classmethod
    def reduced_attraction_param(cls, pr: float, tr: float) -> float:
        """ Reduced attraction parameter without temperature correction """
        return cls.omega_a * pr / (tr * tr)

    @classmethod
    def reduced_repulsion_param(cls, pr: float, tr: float) -> float:
        return cls.omega_b * pr / tr

    def _set_critical(self, pc, tc):
        check_positive(pc=pc, tc=tc)
        ac = self.critical_attraction_param(pc, tc)
        bc = self.critical_repulsion_param(pc, tc)
        self._pc, self._tc, self._ac, self._bc = pc, tc, ac, bc

    @property
    def pc(self) -> float:
        return self._pc

    @property
    def tc(self) -> float:
        return self._tc

    @property
    def ac(self) -> float:
        """ Critical attraction parameter (Pa·m6/mol2) """
        return self._ac

    @property
    def bc(self) -> float:
        """ Critical repulsion parameter (m3/mol) """
        return self._bc

    def reduced_pressure(self, p: float) -> float:
        return p / self._pc

    def reduced_temperature(self, t: float) -> float:
        return t / self._tc

    def zfactor(self, p: float, t: float) -> List[float]:
        """ Returns all real Z-factor roots at pressure p (Pa) and temperature t (K), in ascending order """
        return self.state(p, t).zfactor()

    @abc.abstractmethod
    def state(self, p: float, t: float) -> IsobaricIsothermalState:
        pass

    @abc.abstractmethod
    def isothermal_line(self, t: float) -> IsothermalLine:
        pass

    @abc.abstractmethod
    def pressure(self, t: float, v: float) -> float:
        pass

    @staticmethod
    @abc.abstractmethod
    def pressure_formula(t: float, v: float, a: float, b: float) -> float:
        pass

    @staticmethod
    @abc.abstractmethod
    def zfactor_cubic_eq(a: float, b: float) -> Tuple[float, float, float]:
        pass

    @staticmethod
    @abc.abstractmethod
    def ln_fugacity_coeff(z: float, a: float, b: float) -> float:
        pass

    @classmethod
    def fugacity_coeff(cls, z: float, a: float, b: float) -> float:
        return np.exp(cls.ln_fugacity_coeff(z, a, b))

    def __repr__(self):
        return f"{type(self).__name__}(pc={self._pc}, tc={self._tc})"


class CubicEOS(CubicEOSBase):
    """ Two-parameter cubic EoS: the attraction parameter carries no temperature correction """

    def set_params(self, pc: float, tc: float):
        self._set_critical(pc, tc)

    def state(self, p: float, t: float) -> IsobaricIsothermalState:
        """ Returns the reduced isobaric-isothermal state at pressure p (Pa) and temperature t (K) """
        check_positive(p=p, t=t)
        pr = self.reduced_pressure(p)
        tr = self.reduced_temperature(t)
        return IsobaricIsothermalState(self, t, self.reduced_attraction_param(pr, tr), self.reduced_repulsion_param(pr, tr))

    def isothermal_line(self, t: float) -> IsothermalLine:
        check_positive(t=t)
        return IsothermalLine(self, t, self._ac, self._bc)

    def pressure(self, t: float, v: float) -> float:
        """ Returns pressure (Pa) at temperature t (K) and molar volume v (m3/mol) """
        return self.pressure_formula(t, v, self._ac, self._bc)


class CorrectedCubicEOS(CubicEOSBase):
    """ Three-parameter cubic EoS: attraction scaled by alpha(Tr), a function of the acentric factor

        Concrete families define m(omega); alpha and beta follow the Soave form
            alpha = (1 + m(1 - sqrt(Tr)))^2
            beta  = d(ln alpha)/d(ln Tr) = -m sqrt(Tr) / (1 + m(1 - sqrt(Tr)))
    """

    def __init__(self, pc: float, tc: float, omega: float):
        self.set_params(pc, tc, omega)

    @staticmethod
    @abc.abstractmethod
    def m(omega: float) -> float:
        pass

    def set_params(self, pc: float, tc: float, omega: float):
        if omega is None:
            raise InvalidInputError(f"{type(self).__name__} requires an acentric factor")
        m = self.m(omega)
        self._set_critical(pc, tc)
        self._omega, self._m = omega, m

    @property
    def omega(self) -> float:
        """ Acentric factor """
        return self._omega

    def alpha(self, tr: float) -> float:
        """ Correction factor for the attraction parameter at reduced temperature tr """
        a = 1 + self._m * (1 - np.sqrt(tr))
        return a * a

    def beta(self, tr: float) -> float:
        """ d(ln alpha)/d(ln Tr) at reduced temperature tr
            This is the logarithmic derivative used by the residual enthalpy and entropy. It differs from
            d(alpha)/d(ln Tr) = -m sqrt(Tr) (1 + m(1 - sqrt(Tr))) by the factor 1/alpha.
        """
        sqrt_tr = np.sqrt(tr)
        return -self._m * sqrt_tr / (1 + self._m * (1 - sqrt_tr))

    def state(self, p: float, t: float) -> IsobaricIsothermalState:
        """ Returns the reduced isobaric-isothermal state at pressure p (Pa) and temperature t (K) """
        check_positive(p=p, t=t)
        pr = self.reduced_pressure(p)
        tr = self.reduced_temperature(t)
        ar = self.alpha(tr) * self.reduced_attraction_param(pr, tr)
        br = self.reduced_repulsion_param(pr, tr)
        return IsobaricIsothermalState(self, t, ar, br, self.beta(tr))

    def isothermal_line(self, t: float) -> IsothermalLine:
        check_positive(t=t)
        return IsothermalLine(self, t, self.alpha(self.reduced_temperature(t)) * self._ac, self._bc)

    def pressure(self, t: float, v: float) -> float:
        """ Returns pressure (Pa) at temperature t (K) and molar volume v (m3/mol) """
        a = self.alpha(self.reduced_temperature(t)) * self._ac
        return self.pressure_formula(t, v, a, self._bc)

    def __repr__(self):
        return f"{type(self).__name__}(pc={self._pc}, tc={self._tc}, omega={self._omega})"


class VanDerWaalsEOS(CubicEOS):
    """ Van der Waals (1873) equation of state """
    omega_a = 27 / 64
    omega_b = 1 / 8

    @staticmethod
    def pressure_formula(t, v, a, b):
        return R * t / (v - b) - a / (v * v)

    @staticmethod
    def zfactor_cubic_eq(a, b):
        return (-b - 1, a, -a * b)

    @staticmethod
    def ln_fugacity_coeff(z, a, b):
        return z - 1 - np.log(z - b) - a / z

    @staticmethod
    def residual_enthalpy(z, t, a, b):
        return R * t * (z - 1 - a / z)

    @staticmethod
    def residual_entropy(z, a, b):
        return R * np.log(z - b)

    @staticmethod
    def residual_helmholtz_energy(z, t, a, b):
        return -R * t * (np.log(z - b) + a / z)


class PengRobinsonEOS(CorrectedCubicEOS):
    """ Peng & Robinson (1976) equation of state, with the 1978 m(omega) polynomial """
    omega_a = 0.45724
    omega_b = 0.07780

    DELTA1 = 1 + SQRT2
    DELTA2 = 1 - SQRT2

    @staticmethod
    def m(omega):
        return 0.3796 + omega * (1.485 - omega * (0.1644 - 0.01667 * omega))

    @staticmethod
    def pressure_formula(t, v, a, b):
        return R * t / (v - b) - a / (v * (v + b) + b * (v - b))

    @staticmethod
    def zfactor_cubic_eq(a, b):
        return (b - 1, a - (3 * b + 2) * b, (-a + b + b * b) * b)

    @classmethod
    def q(cls, z, a, b):
        # Common term of the fugacity coefficient and residual properties
        return a / (2 * SQRT2 * b) * np.log((z + cls.DELTA1 * b) / (z + cls.DELTA2 * b))

    @classmethod
    def ln_fugacity_coeff(cls, z, a, b):
        return z - 1 - np.log(z - b) - cls.q(z, a, b)

    @classmethod
    def residual_enthalpy(cls, z, t, a, b, beta):
        return R * t * (z - 1 - (1 - beta) * cls.q(z, a, b))

    @classmethod
    def residual_entropy(cls, z, a, b, beta):
        return R * (np.log(z - b) + beta * cls.q(z, a, b))

    @classmethod
    def residual_helmholtz_energy(cls, z, t, a, b):
        return -R * t * (np.log(z - b) + cls.q(z, a, b))


class SoaveRedlichKwongEOS(CorrectedCubicEOS):
    """ Soave (1972) modification of the Redlich-Kwong equation of state """
    omega_a = 0.42748
    omega_b = 0.08664

    @staticmethod
    def m(omega):
        return 0.480 + omega * (1.574 - 0.176 * omega)

    @staticmethod
    def pressure_formula(t, v, a, b):
        return R * t / (v - b) - a / (v * (v + b))

    @staticmethod
    def zfactor_cubic_eq(a, b):
        return (-1.0, a - b - b * b, -a * b)

    @staticmethod
    def q(z, a, b):
        return a / b * np.log(1 + b / z)

    @classmethod
    def ln_fugacity_coeff(cls, z, a, b):
        return z - 1 - np.log(z - b) - cls.q(z, a, b)

    @classmethod
    def residual_enthalpy(cls, z, t, a, b, beta):
        return R * t * (z - 1 - (1 - beta) * cls.q(z, a, b))

    @classmethod
    def residual_entropy(cls, z, a, b, beta):
        return R * (np.log(z - b) + beta * cls.q(z, a, b))

    @classmethod
    def residual_helmholtz_energy(cls, z, t, a, b):
        return -R * t * (np.log(z - b) + cls.q(z, a, b))


def make_van_der_waals_eos(pc: float, tc: float) -> VanDerWaalsEOS:
    """ Returns a van der Waals EoS
        pc: Critical pressure (Pa)
        tc: Critical temperature (K)
    """
    return VanDerWaalsEOS(pc, tc)

def make_peng_robinson_eos(pc: float, tc: float, omega: float) -> PengRobinsonEOS:
    """ Returns a Peng-Robinson EoS
        pc: Critical pressure (Pa)
        tc: Critical temperature (K)
        omega: Acentric factor
    """
    return PengRobinsonEOS(pc, tc, omega)

def make_soave_redlich_kwong_eos(pc: float, tc: float, omega: float) -> SoaveRedlichKwongEOS:
    """ Returns a Soave-Redlich-Kwong EoS
        pc: Critical pressure (Pa)
        tc: Critical temperature (K)
        omega: Acentric factor
    """
    return SoaveRedlichKwongEOS(pc, tc, omega)

def make_model(eosmodel: eos_model, pc: float, tc: float, omega: Optional[float] = None) -> CubicEOSBase:
    """ Returns a cubic EoS of the requested family
        eosmodel: Equation of state family
                  'VDW' van der Waals (1873), two-parameter. omega is ignored
                  'PR' Peng & Robinson (1976), requires omega
                  'SRK' Soave-Redlich-Kwong (1972), requires omega
        pc: Critical pressure (Pa)
        tc: Critical temperature (K)
        omega: Acentric factor
    """
    eosmodel = validate_methods(["eosmodel"], [eosmodel])
    if eosmodel == eos_model.VDW:
        return make_van_der_waals_eos(pc, tc)
    if eosmodel == eos_model.PR:
        return make_peng_robinson_eos(pc, tc, omega)
    if eosmodel == eos_model.SRK:
        return make_soave_redlich_kwong_eos(pc, tc, omega)
    raise InvalidInputError(f"Unknown eosmodel: {eosmodel}")
