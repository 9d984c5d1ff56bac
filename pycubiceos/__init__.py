"""
pycubiceos
===================================

-----------------------------------------------------------
Cubic Equation of State and Vapor Pressure Utilities
-----------------------------------------------------------

Thermodynamic state of a pure fluid from two- and three-parameter cubic equations of state,
and vapor pressure by successive substitution flash.

Includes functions to perform calculations including;

- Real and complex roots of cubic (and general) polynomials by closed form solution
- Z-Factor roots, fugacity coefficients and residual enthalpy, entropy and Helmholtz energy
  from van der Waals, Peng-Robinson and Soave-Redlich-Kwong EOS
- Wilson vapor pressure estimate
- Vapor pressure flash, and tables of saturation properties along temperature
- Return critical parameters for typical components

All quantities are SI: Pa, K, m3/mol, J/mol.
"""

submodules = [
    'classes',
    'constants',
    'eos',
    'flash',
    'library',
    'roots',
    'shared_fns',
    'state',
    'validate'
]

__all__ = submodules 

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pycubiceos.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pycubiceos' has no attribute '{name}'"
            )
