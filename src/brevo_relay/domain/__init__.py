"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.models` - Contact, FieldError, FieldWarning, SendResult
    * :mod:`.validation` - Email syntax checker and structural validator
    * :mod:`.templates` - Known template registry and parameter schemas
    * :mod:`.envelope` - Provider envelope builder
    * :mod:`.enums` - Domain enumerations
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import LookupStatus, OutputFormat, StoreBackend
from .envelope import build_envelope
from .errors import ConfigurationError, DeliveryError, StoreError
from .models import Contact, FieldError, FieldWarning, SendResult
from .templates import KNOWN_TEMPLATES, TemplateSchema, coerce_template_id, lookup_template
from .validation import (
    as_recipient_list,
    default_reply_to,
    is_empty,
    is_valid_email,
    validate_content,
    validate_request,
)

__all__ = [
    # Models
    "Contact",
    "FieldError",
    "FieldWarning",
    "SendResult",
    # Validation
    "as_recipient_list",
    "default_reply_to",
    "is_empty",
    "is_valid_email",
    "validate_content",
    "validate_request",
    # Templates
    "KNOWN_TEMPLATES",
    "TemplateSchema",
    "coerce_template_id",
    "lookup_template",
    # Envelope
    "build_envelope",
    # Enums
    "LookupStatus",
    "OutputFormat",
    "StoreBackend",
    # Errors
    "ConfigurationError",
    "DeliveryError",
    "StoreError",
]
