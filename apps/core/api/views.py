"""
Rewrite proxy: ``/api/<path>`` -> ``<API_UPSTREAM_URL>/api/v1/<path>``

Browsers (and the old front-end bundles) talk to the portal's own origin; the
proxy forwards method, query string, body and content type unchanged and
hands back whatever the upstream answered.
"""
import logging

import requests
from django.conf import settings
from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt

logger = logging.getLogger(__name__)

FORWARDED_HEADERS = ('Accept', 'Authorization')


def upstream_url(path):
    return f"{settings.API_UPSTREAM_URL}/api/v1/{path.lstrip('/')}"


@csrf_exempt
def rewrite_proxy(request, path):
    url = upstream_url(path)
    headers = {name: request.headers[name] for name in FORWARDED_HEADERS if name in request.headers}
    if request.body:
        headers['Content-Type'] = request.content_type or 'application/json'

    try:
        upstream = requests.request(
            request.method,
            url,
            params=dict(request.GET.lists()),
            data=request.body or None,
            headers=headers,
            timeout=settings.API_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.warning(f"Proxy {request.method} {url} failed: {e}")
        return JsonResponse(
            {'status': {'code': 502, 'message': 'The ERP backend could not be reached.'}},
            status=502,
        )

    logger.debug(f"Proxy {request.method} {url} -> {upstream.status_code}")
    return HttpResponse(
        upstream.content,
        status=upstream.status_code,
        content_type=upstream.headers.get('Content-Type', 'application/json'),
    )
