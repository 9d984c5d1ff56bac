from .eos import (CubicEOSBase, CubicEOS, CorrectedCubicEOS, VanDerWaalsEOS, PengRobinsonEOS, SoaveRedlichKwongEOS,
                  make_van_der_waals_eos, make_peng_robinson_eos, make_soave_redlich_kwong_eos, make_model)
