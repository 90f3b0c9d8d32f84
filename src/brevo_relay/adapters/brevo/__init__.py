"""Brevo adapter - transactional email over HTTP.

Structure:
    * :mod:`.config` - BrevoConfig model and loader
    * :mod:`.transport` - httpx POST of a single envelope
"""

from __future__ import annotations

from .config import BrevoConfig, load_brevo_config_from_dict
from .transport import dispatch_envelope

__all__ = [
    "BrevoConfig",
    "dispatch_envelope",
    "load_brevo_config_from_dict",
]
