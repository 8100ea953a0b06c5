from django.urls import path

from . import views

app_name = 'api'

urlpatterns = [
    path('<path:path>', views.rewrite_proxy, name='proxy'),
]
