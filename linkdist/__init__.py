"""Top-level package for linkdist."""

__author__ = """Knut Rand"""
__email__ = 'knutdrand@gmail.com'
__version__ = '0.0.1'
