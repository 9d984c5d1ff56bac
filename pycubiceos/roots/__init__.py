from .roots import cubic_roots, real_roots, count_real_roots, polynomial_real_roots
