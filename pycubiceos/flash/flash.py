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

import logging
import numpy as np
import numpy.typing as npt
import pandas as pd
from dataclasses import dataclass
from tabulate import tabulate
from typing import Optional, Tuple

from pycubiceos.classes import flash_status
from pycubiceos.eos import CubicEOSBase, CorrectedCubicEOS
from pycubiceos.shared_fns import convert_to_numpy, is_scalar, process_output
from pycubiceos.validate import check_positive, check_subcritical

logger = logging.getLogger(__name__)


def estimate_vapor_pressure(t: npt.ArrayLike, pc: float, tc: float, omega: float):
    """ Returns estimated vapor pressure (Pa) of a pure component from the Wilson (1968) correlation
        t: Temperature (K), scalar or array. Must not exceed tc
        pc: Critical pressure (Pa)
        tc: Critical temperature (K)
        omega: Acentric factor
    """
    scalar = is_scalar(t)
    t = convert_to_numpy(t)
    check_positive(t=t, pc=pc, tc=tc)
    check_subcritical(t, tc)
    return process_output(pc * np.power(10.0, 7.0 / 3.0 * (1 + omega) * (1 - tc / t)), scalar)


@dataclass
class FlashReport:
    """ Outcome of a vapor pressure calculation
        residual: Relative residual |1 - phi_liq/phi_vap| at termination
        iterations: Number of successive substitution steps performed
        status: Terminal state
    """
    residual: float
    iterations: int
    status: flash_status

    @property
    def converged(self) -> bool:
        return self.status == flash_status.SUCCESS


class Flash:
    """ Vapor-liquid flash of a pure component by successive substitution on the equal fugacity condition

        eos: Fully parameterized cubic EoS
        tol: Convergence tolerance on the relative fugacity residual. Defaults to 1e-6
        max_iter: Maximum number of iterations. Defaults to 100
    """

    def __init__(self, eos: CubicEOSBase, tol: float = 1e-6, max_iter: int = 100):
        self.eos = eos
        self.tol = tol
        self.max_iter = max_iter

    def vapor_pressure(self, p_init: float, t: float) -> Tuple[float, FlashReport]:
        """ Returns vapor pressure (Pa) and iteration report. Pressure is 0 unless the report status is SUCCESS
            p_init: Initial pressure estimate (Pa)
            t: Temperature (K). Must not exceed the critical temperature
        """
        check_positive(p_init=p_init, t=t)
        check_subcritical(t, self.eos.tc)

        p = p_init
        eps = 1.0
        niter = 0

        while eps > self.tol and niter < self.max_iter:
            state = self.eos.state(p, t)
            z = state.zfactor()

            if len(z) < 2:
                logger.warning("Multiple roots not found in Z-factor at P=%g Pa, T=%g K", p, t)
                return 0.0, FlashReport(eps, niter, flash_status.INSUFFICIENT_ROOTS)

            z_vap, z_liq = z[-1], z[0]
            if z_liq <= state.b:  # Liquid root must lie above the co-volume
                logger.warning("Unphysical liquid Z-factor %g (B=%g) at P=%g Pa, T=%g K", z_liq, state.b, p, t)
                return 0.0, FlashReport(eps, niter, flash_status.INSUFFICIENT_ROOTS)

            ratio = state.fugacity_coeff(z_liq) / state.fugacity_coeff(z_vap)
            if not np.isfinite(ratio):
                logger.warning("Non-finite fugacity ratio at P=%g Pa, T=%g K", p, t)
                return 0.0, FlashReport(eps, niter, flash_status.INSUFFICIENT_ROOTS)
            eps = abs(1 - ratio)

            # Update vapor pressure by successive substitution
            p *= ratio
            niter += 1
            logger.debug("Iteration %d: P=%g Pa, residual=%g", niter, p, eps)

        if not eps <= self.tol:
            logger.warning("Max iteration reached (%d) with residual %g", niter, eps)
            return 0.0, FlashReport(eps, niter, flash_status.MAX_ITER_REACHED)

        return p, FlashReport(eps, niter, flash_status.SUCCESS)


def vapor_pressure(eos: CubicEOSBase, p_init: float, t: float, tol: float = 1e-6, max_iter: int = 100) -> Tuple[float, FlashReport]:
    """ Returns vapor pressure (Pa) and iteration report for a pure component described by eos
        eos: Fully parameterized cubic EoS
        p_init: Initial pressure estimate (Pa), e.g. from estimate_vapor_pressure
        t: Temperature (K). Must not exceed the critical temperature
        tol: Convergence tolerance. Defaults to 1e-6
        max_iter: Maximum iterations. Defaults to 100
    """
    return Flash(eos, tol, max_iter).vapor_pressure(p_init, t)


def saturation_table(
    eos: CubicEOSBase,
    degk: npt.ArrayLike,
    omega: Optional[float] = None,
    tol: float = 1e-6,
    max_iter: int = 100,
    silent: bool = True,
) -> pd.DataFrame:
    """ Returns a DataFrame of saturation properties along a list of temperatures
        Each flash is seeded with the Wilson vapor pressure estimate.

        eos: Fully parameterized cubic EoS
        degk: Temperatures (K), all at or below the critical temperature
        omega: Acentric factor for the Wilson estimate. Defaults to that of eos, or zero for two-parameter models
        tol: Convergence tolerance. Defaults to 1e-6
        max_iter: Maximum iterations per temperature. Defaults to 100
        silent: If False, also prints the table

        Columns: T (K), Psat (Pa), Zl, Zv, Hvap (J/mol), Iterations, Status
        Properties are NaN where the flash did not succeed.
    """
    degk = convert_to_numpy(degk)
    if omega is None:
        omega = eos.omega if isinstance(eos, CorrectedCubicEOS) else 0.0

    flash = Flash(eos, tol, max_iter)
    rows = []
    for t in degk:
        p_init = estimate_vapor_pressure(t, eos.pc, eos.tc, omega)
        p, report = flash.vapor_pressure(p_init, t)
        zl = zv = hvap = np.nan
        if report.converged:
            state = eos.state(p, t)
            z = state.zfactor()
            zl, zv = z[0], z[-1]
            hvap = state.residual_enthalpy(zv) - state.residual_enthalpy(zl)
        else:
            p = np.nan
        rows.append([t, p, zl, zv, hvap, report.iterations, report.status.name])

    df = pd.DataFrame(rows, columns=['T', 'Psat', 'Zl', 'Zv', 'Hvap', 'Iterations', 'Status'])
    if not silent:
        print(tabulate(df, headers='keys', showindex=False))
    return df
