from .flash import estimate_vapor_pressure, FlashReport, Flash, vapor_pressure, saturation_table
