"""
Top‑level package for the Employee Directory API.

This file makes ``employee_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``employee_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
