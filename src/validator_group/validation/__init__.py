"""
Validation engine and reference rules.

- group.py: ValidationGroup (field registry + filter/validate engine)
- filters.py: Reference filters (Trim, ToInt, ToUpper, Negate, CallableFilter)
- validators.py: Reference validators (NumberBetween, StringLength,
  CallableValidator, UploadedFileValid)
"""

from ..contracts import Filter, Validator
from .filters import CallableFilter, Negate, ToInt, ToUpper, Trim
from .group import ValidationGroup
from .validators import CallableValidator, NumberBetween, StringLength, UploadedFileValid

__all__ = [
    # Engine
    "ValidationGroup",
    # Contracts
    "Filter",
    "Validator",
    # Filters
    "Trim",
    "ToUpper",
    "ToInt",
    "Negate",
    "CallableFilter",
    # Validators
    "NumberBetween",
    "StringLength",
    "CallableValidator",
    "UploadedFileValid",
]
