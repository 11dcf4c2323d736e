from django.apps import AppConfig


class ReferenceConfig(AppConfig):
    """Configuration for the reference data app"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core.reference'
    label = 'reference'
    verbose_name = 'Reference Data'
