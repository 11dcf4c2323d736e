"""
Person Domain

Canonical person identity merged from one or more System of Record views:
- Names (at least one at all times)
- Identifiers
- Roles derived from SOR roles
- Activation keys
"""
