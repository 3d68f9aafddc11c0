"""
Top‑level package for the NexaOps API.

This file makes ``nexaops_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``nexaops_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
