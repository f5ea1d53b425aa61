"""
Pydantic models for Jira API responses.

Vendor entities are passed through as plain JSON; only the uniform
pagination envelope is modelled here.
"""

from .base import ApiModel
from .pagination import PaginatedResponse

__all__ = ["ApiModel", "PaginatedResponse"]
