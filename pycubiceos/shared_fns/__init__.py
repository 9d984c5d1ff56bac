from .shared_fns import convert_to_numpy, is_scalar, process_output
