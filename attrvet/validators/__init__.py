# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Built-in validators and the registry that names them."""

from .base import BaseValidator, FunctionValidator
from .datetime import DatetimeValidator, DateValidator, format_iso, parse_iso
from .equality import EqualityValidator
from .length import LengthValidator
from .membership import ExclusionValidator, InclusionValidator
from .numericality import NumericalityValidator
from .patterns import EmailValidator, FormatValidator, UrlValidator
from .presence import PresenceValidator
from .registry import (
    ValidatorLike,
    ValidatorRegistry,
    get_validator_registry,
    reset_validator_registry,
    set_validator_registry,
)
from .types import TypeValidator


def build_default_validators() -> ValidatorRegistry:
    """A fresh registry holding one new instance of every built-in validator."""

    datetime_validator = DatetimeValidator()
    return ValidatorRegistry(
        {
            "presence": PresenceValidator(),
            "length": LengthValidator(),
            "numericality": NumericalityValidator(),
            "datetime": datetime_validator,
            "date": DateValidator(datetime_validator),
            "format": FormatValidator(),
            "inclusion": InclusionValidator(),
            "exclusion": ExclusionValidator(),
            "email": EmailValidator(),
            "equality": EqualityValidator(),
            "url": UrlValidator(),
            "type": TypeValidator(),
        }
    )


__all__ = [
    "BaseValidator",
    "DateValidator",
    "DatetimeValidator",
    "EmailValidator",
    "EqualityValidator",
    "ExclusionValidator",
    "FormatValidator",
    "FunctionValidator",
    "InclusionValidator",
    "LengthValidator",
    "NumericalityValidator",
    "PresenceValidator",
    "TypeValidator",
    "UrlValidator",
    "ValidatorLike",
    "ValidatorRegistry",
    "build_default_validators",
    "format_iso",
    "get_validator_registry",
    "parse_iso",
    "reset_validator_registry",
    "set_validator_registry",
]
