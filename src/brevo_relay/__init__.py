"""Public package surface exposing the relay, its results, and configuration.

Routes imports through the architectural layers:
- Application exports: the EmailRelay entry operations
- Domain exports: result and contact value objects
- Composition exports: wired adapter services (configuration)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.relay import EmailRelay

# Composition exports (wired adapters)
from .composition import build_production, get_config

# Domain exports
from .domain.models import Contact, FieldError, FieldWarning, SendResult
from .domain.validation import is_valid_email

__all__ = [
    "Contact",
    "EmailRelay",
    "FieldError",
    "FieldWarning",
    "SendResult",
    "build_production",
    "get_config",
    "is_valid_email",
    "print_info",
]
