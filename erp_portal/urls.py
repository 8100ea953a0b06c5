"""
ERP Portal URL Configuration
"""
from django.urls import include, path

urlpatterns = [
    # Dashboard, lookups autofill
    path('', include('apps.core.urls')),

    path('master/', include('apps.master.urls')),
    path('pricing/', include('apps.pricing.urls')),
    path('transaction/', include('apps.transactions.urls')),

    # Rewrite proxy: /api/<path> -> <upstream>/api/v1/<path>
    path('api/', include('apps.core.api.urls')),
]
