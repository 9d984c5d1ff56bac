from .validate import InvalidInputError, validate_methods, check_positive, check_subcritical
