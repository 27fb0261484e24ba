"""Numerical analysis routines: RK4 integration, polynomial interpolation and root finding."""

__version__ = "0.1.0"