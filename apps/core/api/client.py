"""
ERP Backend Client - Fetcher and Mutator for every page

Every collection lives under ``/{domain}/{collection}`` and every record under
``/{domain}/{collection}/{code}``. Answers are wrapped in an envelope:

    list    {"data": [...]}
    detail  {"data": {...}}
    error   {"status": {"message": "..."}} or {"message": "..."}

The client unwraps the envelope, runs each record through the resource
serializer and turns every failure into an ``ApiError`` subclass. It never
retries.
"""
import logging
from concurrent.futures import ThreadPoolExecutor

import requests
from django.conf import settings

from .errors import (
    ApiError,
    DecodeError,
    HTTPStatusError,
    JoinError,
    TransportError,
    extract_message,
)

logger = logging.getLogger(__name__)

JOIN_ERROR_MESSAGE = "Failed to fetch required data."


def decode(serializer_class, raw):
    """
    Validate one record against its serializer.

    Declared fields come back coerced; undeclared keys (embedded objects such
    as ``City`` or ``Forwarder``) are passed through untouched.
    """
    if not isinstance(raw, dict):
        raise DecodeError("Unexpected record shape from the server.", payload=raw)
    if serializer_class is None:
        return dict(raw)

    serializer = serializer_class(data=raw)
    if not serializer.is_valid():
        logger.error(f"Decode failed for {serializer_class.__name__}: {serializer.errors}")
        raise DecodeError(
            "Unexpected data received from the server.",
            errors=serializer.errors,
            payload=raw,
        )
    record = dict(raw)
    record.update(serializer.validated_data)
    return record


class ApiClient:
    """Thin wrapper around ``requests.Session`` bound to the ERP backend."""

    def __init__(self, base_url=None, timeout=None, session=None, max_workers=None):
        self.base_url = (settings.API_BASE_URL if base_url is None else base_url).rstrip('/')
        self.timeout = timeout or settings.API_TIMEOUT
        self.max_workers = max_workers or settings.API_MAX_WORKERS
        self.session = session or requests.Session()
        self.session.headers.setdefault('Accept', 'application/json')

    def url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def request(self, method, path, default_error="Request failed.", **kwargs):
        """Send one request and return the decoded JSON body (or None)."""
        url = self.url(path)
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise TransportError(default_error) from e

        body = self._json(response)

        if not response.ok:
            message = extract_message(body, default_error)
            logger.warning(f"{method} {url} -> {response.status_code}: {message}")
            raise HTTPStatusError(message, status_code=response.status_code, payload=body)

        # Some endpoints report failures inside a 200 answer.
        status = body.get('status') if isinstance(body, dict) else None
        if isinstance(status, dict) and not self._is_success(status.get('code')):
            message = extract_message(body, default_error)
            logger.warning(f"{method} {url} -> status.code {status['code']}: {message}")
            raise HTTPStatusError(message, status_code=status['code'], payload=body)

        return body

    @staticmethod
    def _is_success(code):
        """A missing ``status.code`` or any 2xx one (201 Created included) is a success."""
        if code is None:
            return True
        try:
            return 200 <= int(code) < 300
        except (TypeError, ValueError):
            return False

    @staticmethod
    def _json(response):
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _unwrap(body, expected, default_error):
        if not isinstance(body, dict) or 'data' not in body:
            raise DecodeError(default_error, payload=body)
        data = body['data']
        if data is None and expected is list:
            return []
        if not isinstance(data, expected):
            raise DecodeError(default_error, payload=body)
        return data

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------

    def list(self, path, serializer_class=None, default_error="Failed to fetch data."):
        body = self.request('GET', path, default_error=default_error)
        items = self._unwrap(body, list, default_error)
        return [decode(serializer_class, item) for item in items]

    def get(self, path, code, serializer_class=None, default_error="Failed to fetch record."):
        body = self.request('GET', f"{path.rstrip('/')}/{code}", default_error=default_error)
        return decode(serializer_class, self._unwrap(body, dict, default_error))

    def fetch_many(self, requests_by_name):
        """
        Fetch several collections concurrently and join.

        ``requests_by_name`` maps a name to ``(path, serializer_class)``.
        Either every collection comes back or ``JoinError`` is raised; there
        is no partial success.
        """
        if not requests_by_name:
            return {}

        workers = min(len(requests_by_name), self.max_workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = {
                name: pool.submit(self.list, path, serializer_class, f"Failed to fetch {name}.")
                for name, (path, serializer_class) in requests_by_name.items()
            }

        results, errors = {}, {}
        for name, future in futures.items():
            try:
                results[name] = future.result()
            except ApiError as e:
                errors[name] = e

        if errors:
            logger.warning(f"Concurrent fetch failed for: {', '.join(sorted(errors))}")
            raise JoinError(JOIN_ERROR_MESSAGE, errors)
        return results

    # ------------------------------------------------------------------
    # Mutator
    # ------------------------------------------------------------------

    def create(self, path, payload, default_error="Failed to create record."):
        body = self.request('POST', path, default_error=default_error, json=payload)
        logger.info(f"Created record at {path}")
        return body.get('data') if isinstance(body, dict) else None

    def update(self, path, code, payload, default_error="Failed to update record."):
        body = self.request('PUT', f"{path.rstrip('/')}/{code}", default_error=default_error, json=payload)
        logger.info(f"Updated {path}/{code}")
        return body.get('data') if isinstance(body, dict) else None

    def delete(self, path, code, default_error="Failed to delete record."):
        self.request('DELETE', f"{path.rstrip('/')}/{code}", default_error=default_error)
        logger.info(f"Deleted {path}/{code}")
