"""
SOR App Configuration
"""

from django.apps import AppConfig


class SorConfig(AppConfig):
    """Configuration for the System of Record app"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'registry.sor'
    label = 'sor'
    verbose_name = 'System of Record'
