from django.apps import AppConfig


class MasterConfig(AppConfig):
    name = 'apps.master'
    verbose_name = 'Master Data'
