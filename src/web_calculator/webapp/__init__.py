"""
Web application front-end for the calculator.

Provides the calculator page and the JSON API it talks to.
"""

from .server import app, run_server

__all__ = ["app", "run_server"]
