from django.urls import path

from . import views

app_name = 'core'

urlpatterns = [
    path('', views.dashboard, name='dashboard'),
    path('lookups/<slug:kind>/', views.lookup_autofill, name='lookup_autofill'),
]


def resource_urlpatterns(section):
    """Generic LDM routes for every resource registered under ``section``."""
    kwargs = {'section': section}
    return [
        path('', views.section_index, kwargs, name='section_index'),
        path('<slug:key>/', views.collection_list, kwargs, name='collection_list'),
        path('<slug:key>/add/', views.record_create, kwargs, name='record_create'),
        path('<slug:key>/<str:code>/edit/', views.record_edit, kwargs, name='record_edit'),
        path('<slug:key>/<str:code>/delete/', views.record_delete, kwargs, name='record_delete'),

        # Master-detail
        path('<slug:key>/<str:code>/details/', views.detail_overlay, kwargs, name='detail_overlay'),
        path('<slug:key>/<str:code>/details/close/', views.detail_close, kwargs, name='detail_close'),
        path('<slug:key>/<str:code>/details/add/', views.detail_create, kwargs, name='detail_create'),
        path('<slug:key>/<str:code>/details/export.<slug:fmt>', views.detail_export, kwargs,
             name='detail_export'),
        path('<slug:key>/<str:code>/details/<str:child>/edit/', views.detail_edit, kwargs,
             name='detail_edit'),
        path('<slug:key>/<str:code>/details/<str:child>/delete/', views.detail_delete, kwargs,
             name='detail_delete'),
    ]
