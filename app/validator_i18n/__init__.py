"""Localized validation message resolution.

Resolves per-locale message templates for validator identities and error
codes, with override layering and parent-locale fallback.
"""

__version__ = "0.1.0"
