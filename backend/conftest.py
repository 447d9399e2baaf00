"""Root pytest configuration (kept intentionally minimal).

The application package resides in the nested `receipt_processor/`
directory; `tests/conftest.py` puts this backend directory on `sys.path`
so the package imports without being installed.
"""
