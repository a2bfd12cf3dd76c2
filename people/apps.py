"""
People App Configuration
"""

from django.apps import AppConfig


class PeopleConfig(AppConfig):
    """Configuration for the People app"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'people'
    label = 'people'
    verbose_name = 'People'
