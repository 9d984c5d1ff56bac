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

from dataclasses import dataclass

from pycubiceos.classes import eos_model
from pycubiceos.eos import CubicEOSBase, make_model
from pycubiceos.validate import InvalidInputError


@dataclass(frozen=True)
class ComponentProperties:
    """Critical properties and parameters for a component."""
    name: str
    Tc: float      # Critical temperature (K)
    Pc: float      # Critical pressure (Pa)
    omega: float   # Acentric factor
    MW: float      # Molecular weight (g/mol)


# Tc, Pc, omega from Soreide & Whitson (1992) Table 5; H2 from NIST
COMPONENTS = {
    'H2O': ComponentProperties('Water', 647.3, 22.12e6, 0.3434, 18.015),
    'H2': ComponentProperties('Hydrogen', 33.145, 1.2964e6, -0.219, 2.016),
    'CO2': ComponentProperties('Carbon Dioxide', 304.2, 7.38e6, 0.2273, 44.01),
    'H2S': ComponentProperties('Hydrogen Sulfide', 373.2, 8.94e6, 0.1081, 34.082),
    'N2': ComponentProperties('Nitrogen', 126.1, 3.40e6, 0.0403, 28.014),
    'CH4': ComponentProperties('Methane', 190.6, 4.60e6, 0.0108, 16.043),
    'C2H6': ComponentProperties('Ethane', 305.4, 4.88e6, 0.0986, 30.07),
    'C3H8': ComponentProperties('Propane', 369.8, 4.25e6, 0.1524, 44.097),
    'IC4H10': ComponentProperties('i-Butane', 408.1, 3.65e6, 0.1770, 58.123),
    'NC4H10': ComponentProperties('n-Butane', 425.2, 3.80e6, 0.1931, 58.123),
    'IC5H12': ComponentProperties('i-Pentane', 460.4, 3.38e6, 0.2270, 72.15),
    'NC5H12': ComponentProperties('n-Pentane', 469.6, 3.37e6, 0.2510, 72.15),
    'NC6H14': ComponentProperties('n-Hexane', 507.4, 3.01e6, 0.2990, 86.18),
    'NC7H16': ComponentProperties('n-Heptane', 540.3, 2.74e6, 0.3490, 100.2),
    'NC8H18': ComponentProperties('n-Octane', 568.8, 2.49e6, 0.3980, 114.2),
    'NC10H22': ComponentProperties('n-Decane', 617.7, 2.10e6, 0.4900, 142.3),
}


def component_props(comp: str) -> ComponentProperties:
    """ Returns critical properties of a library component. Lookup is case insensitive, e.g. 'CH4', 'nC4H10' """
    try:
        return COMPONENTS[comp.upper()]
    except KeyError:
        raise InvalidInputError(f"Unknown component: {comp}. Supported: {list(COMPONENTS.keys())}")

def component_eos(comp: str, eosmodel: eos_model = eos_model.PR) -> CubicEOSBase:
    """ Returns a cubic EoS parameterized with the critical properties of a library component
        comp: Component name, e.g. 'CH4'
        eosmodel: 'PR' (default), 'SRK' or 'VDW'
    """
    props = component_props(comp)
    return make_model(eosmodel, props.Pc, props.Tc, props.omega)
