"""Ghan-foot calculator: volume of timber logs from length and circumference."""
__version__ = "0.1.0"
