from django.apps import AppConfig


class PricingConfig(AppConfig):
    name = 'apps.pricing'
    verbose_name = 'Pricing'
