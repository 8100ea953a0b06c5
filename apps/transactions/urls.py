from apps.core.urls import resource_urlpatterns

app_name = 'transaction'

urlpatterns = resource_urlpatterns('transaction')
