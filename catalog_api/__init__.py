"""
Top-level package for the Catalog API.

Makes ``catalog_api`` importable so modules can be referenced with
fully qualified names such as ``catalog_api.app.main``.  All
functionality lives in submodules under ``app``.
"""

__all__ = []
