"""
describo — composable validation descriptions

File: src/describo/__init__.py
Last updated: 2026-10-19

Purpose
- Package root. Exposes the validator/validation/description object model and the
  configuration type threaded through it.

Import boundary rules
- No side effects at import time (no logging setup, no environment reads).
"""

from describo.config.schema import DEFAULT_CONFIG, DescriboConfig
from describo.core.attach import attach, detach
from describo.core.description import Description, NegatedDescription
from describo.core.errors import ConfigurationError
from describo.core.object_description import ObjectDescription
from describo.core.results import ResultKind, ValidationResult
from describo.core.validation import Validation
from describo.core.validator import Validator

__version__ = "0.4.0"

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationError",
    "DescriboConfig",
    "Description",
    "NegatedDescription",
    "ObjectDescription",
    "ResultKind",
    "ValidationResult",
    "Validation",
    "Validator",
    "__version__",
    "attach",
    "detach",
]
