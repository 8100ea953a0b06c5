from django.apps import AppConfig
from django.utils.module_loading import autodiscover_modules


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.core'
    verbose_name = 'ERP Portal Core'

    def ready(self):
        # Each domain app registers its entity pages in resources.py
        autodiscover_modules('resources')
