"""
Core type definitions for structured-json.

This module contains type aliases shared across the package for type safety
and consistency between the value model, the navigator and the facade.
"""

PythonValue = str | int | float | bool | list | dict | None

PathListing = dict[str, PythonValue]
