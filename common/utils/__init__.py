"""
Utilities module - Common HTTP exceptions.
"""

from common.utils.exceptions import APIException, UnauthorizedException

__all__ = [
    "APIException",
    "UnauthorizedException",
]
