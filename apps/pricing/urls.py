from apps.core.urls import resource_urlpatterns

app_name = 'pricing'

urlpatterns = resource_urlpatterns('pricing')
