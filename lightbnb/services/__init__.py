"""
Service layer. Currently holds centralized error response handling.
"""

from .error_handler import ErrorHandlerService

__all__ = ["ErrorHandlerService"]
