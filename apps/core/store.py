"""
Local Store - the collection behind one list page.

Holds the fetched rows, a loading flag and an error message for the lifetime
of a page view. A full navigation to a list page always re-fetches; the
snapshot kept in the session only serves follow-up htmx actions issued from
that same page (flipping pages, deleting a row), so a delete patches the rows
locally instead of reloading them.
"""
import json
import logging

from django.core.serializers.json import DjangoJSONEncoder

from .api.client import ApiClient
from .api.errors import ApiError
from .cascade import same_code
from .pagination import paginate

logger = logging.getLogger(__name__)

SESSION_PREFIX = 'ldm'


def sort_by_status(items):
    """Active rows before Non-Active ones (plain string order); stable within each group."""
    return sorted(items, key=lambda item: str(item.get('Status') or ''))


class CollectionStore:
    def __init__(self, resource, client=None):
        self.resource = resource
        self.client = client or ApiClient()
        self.items = []
        self.loading = False
        self.error = None

    @property
    def session_key(self):
        return f"{SESSION_PREFIX}:{self.resource.key}"

    def load(self):
        self.loading = True
        self.error = None
        try:
            items = self.client.list(
                self.resource.path,
                self.resource.serializer,
                default_error=self.resource.fetch_error,
            )
        except ApiError as e:
            logger.warning(f"Loading {self.resource.key} failed: {e}")
            self.items = []
            self.error = e.message
        else:
            self.items = sort_by_status(items) if self.resource.has_status else items
        finally:
            self.loading = False
        return self

    def window(self, offset=0, page_size=None):
        return paginate(self.items, offset, page_size)

    def delete(self, code):
        """
        Delete ``code`` on the server, then drop it locally.

        ``ApiError`` propagates untouched and the local rows stay as they
        were.
        """
        self.client.delete(self.resource.path, code, default_error=self.resource.delete_error)
        self.remove(code)

    def remove(self, code):
        self.items = [item for item in self.items if not same_code(item.get('Code'), code)]

    # Session snapshot

    def save(self, session):
        # Decimals from the serializers are not JSON-native.
        session[self.session_key] = json.loads(json.dumps(self.items, cls=DjangoJSONEncoder))

    @classmethod
    def restore(cls, resource, session, client=None):
        """Rebuild the store from the page's snapshot, or None when there is none."""
        items = session.get(f"{SESSION_PREFIX}:{resource.key}")
        if items is None:
            return None
        store = cls(resource, client=client)
        store.items = items
        return store
