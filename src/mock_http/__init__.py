# Este archivo marca el paquete mock_http y expone la versión del proyecto.

"""
Mock HTTP Server - configurable responder for manual and integration testing.

Serves fixed contact fixtures and a catch-all echo endpoint whose delay,
status and body are controlled through query parameters.
"""

__version__ = "0.1.0"
__description__ = "Configurable mock HTTP responder"

# Expose main components for easier imports
from .server import create_app, main

__all__ = ["create_app", "main", "__version__"]
