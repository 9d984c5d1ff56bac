from .constants import R, SQRT2, SQRT3, IMAG_TOL
