import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'erp_portal.settings')

app = Celery('erp_portal')
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()
