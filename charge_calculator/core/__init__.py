"""
Core modules for Charge Calculator.

This package contains the charge formula and its input records.
"""
