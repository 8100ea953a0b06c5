from django.urls import path

from apps.core.urls import resource_urlpatterns

from . import views

app_name = 'master'

urlpatterns = [
    path('products/code-name/', views.product_code_name, name='product_code_name'),
] + resource_urlpatterns('master')
