# Este archivo permite ejecutar el servidor como módulo Python usando: python -m mock_http

"""
Entry point for running the mock HTTP server as a Python module.

Usage:
    python -m mock_http
"""

from .server import main

if __name__ == "__main__":
    main()
