from .state import IsobaricIsothermalState, IsothermalLine
