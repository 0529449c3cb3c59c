"""
describo — core object model public API.

File: src/describo/core/__init__.py
Last updated: 2026-10-19

Purpose
- Export validators, validations, descriptions, object descriptions, the result
  envelope, and the helper attachment entry points.
"""

from describo.core.attach import attach, detach
from describo.core.description import Description, NegatedDescription
from describo.core.errors import ConfigurationError
from describo.core.object_description import ObjectDescription, read_property
from describo.core.results import ResultKind, ValidationResult
from describo.core.validation import Validation
from describo.core.validator import Validator

__all__ = [
    "ConfigurationError",
    "Description",
    "NegatedDescription",
    "ObjectDescription",
    "ResultKind",
    "ValidationResult",
    "Validation",
    "Validator",
    "attach",
    "detach",
    "read_property",
]
