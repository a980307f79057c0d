"""
rcc Command-Line Interface
==========================

This package provides the ``rcc`` command-line tool, a Click-based
application that drives the compiler front end and reports errors.
"""

__all__ = ["rcc"]
