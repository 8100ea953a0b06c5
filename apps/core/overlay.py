"""
Master-Detail Overlay

    CLOSED --open()--> LOADING --+--> POPULATED
                                 +--> EMPTY      (fetch ok, no rows)
                                 +--> ERRORED    (fetch failed)
    any state --close()--> CLOSED

EMPTY and ERRORED render the same "no details" panel with an "Add Detail"
button; ERRORED keeps the error message so the page can say what broke.
Child mutations patch ``rows`` locally, never by reloading the parent page.
"""
import json
import logging
from enum import Enum

from django.core.serializers.json import DjangoJSONEncoder

from .api.client import ApiClient, decode
from .api.errors import ApiError, DecodeError
from .cascade import coerce_code, same_code

logger = logging.getLogger(__name__)

SESSION_PREFIX = 'overlay'


class OverlayState(Enum):
    CLOSED = 'closed'
    LOADING = 'loading'
    POPULATED = 'populated'
    EMPTY = 'empty'
    ERRORED = 'errored'


def row_key(row):
    """Child rows are keyed by ``Id``, falling back to ``Code``."""
    key = row.get('Id')
    return row.get('Code') if key is None else key


class DetailOverlay:
    def __init__(self, detail, client=None):
        self.detail = detail
        self.client = client or ApiClient()
        self.state = OverlayState.CLOSED
        self.parent_id = None
        self.rows = []
        self.error = None

    @property
    def is_open(self):
        return self.state != OverlayState.CLOSED

    @property
    def offers_first_detail(self):
        return self.state in (OverlayState.EMPTY, OverlayState.ERRORED)

    def open(self, parent_id):
        self.parent_id = coerce_code(parent_id)
        self.state = OverlayState.LOADING
        self.rows = []
        self.error = None
        try:
            rows = self.client.list(
                self.detail.children_url(parent_id),
                self.detail.serializer,
                default_error=f"Failed to fetch {self.detail.label.lower()}.",
            )
        except ApiError as e:
            logger.warning(f"Details for {self.detail.key}/{parent_id} failed to load: {e}")
            self.error = e.message
            self.state = OverlayState.ERRORED
        else:
            self.rows = rows
            self.state = OverlayState.POPULATED if rows else OverlayState.EMPTY
        return self

    def close(self):
        self.state = OverlayState.CLOSED
        self.parent_id = None
        self.rows = []
        self.error = None
        return self

    def _require_open(self):
        if self.parent_id is None or self.state in (OverlayState.CLOSED, OverlayState.LOADING):
            raise ValueError("Detail overlay is not open")

    def find(self, child_id):
        for row in self.rows:
            if same_code(row_key(row), child_id):
                return row
        return None

    # Child mutations

    def add_child(self, payload):
        self._require_open()
        body = {**payload, self.detail.parent_field: self.parent_id}
        created = self.client.create(
            self.detail.path, body,
            default_error=f"Failed to create {self.detail.label.lower()}.",
        )
        row = dict(created) if isinstance(created, dict) else body
        try:
            row = decode(self.detail.serializer, row)
        except DecodeError:
            # The server accepted the row but echoed nothing usable back.
            row = dict(body)
        self.rows.append(row)
        self.state = OverlayState.POPULATED
        self.error = None
        return row

    def update_child(self, child_id, payload):
        self._require_open()
        updated = self.client.update(
            self.detail.path, child_id, payload,
            default_error=f"Failed to update {self.detail.label.lower()}.",
        )
        changes = updated if isinstance(updated, dict) else payload
        for index, row in enumerate(self.rows):
            if same_code(row_key(row), child_id):
                self.rows[index] = {**row, **changes}
                return self.rows[index]
        return None

    def delete_child(self, child_id):
        self._require_open()
        self.client.delete(
            self.detail.path, child_id,
            default_error=f"Failed to delete {self.detail.label.lower()}.",
        )
        self.rows = [row for row in self.rows if not same_code(row_key(row), child_id)]
        if not self.rows:
            self.state = OverlayState.EMPTY

    # Session snapshot

    @property
    def session_key(self):
        return f"{SESSION_PREFIX}:{self.detail.key}"

    def save(self, session):
        session[self.session_key] = {
            'parent_id': self.parent_id,
            'state': self.state.value,
            'error': self.error,
            'rows': json.loads(json.dumps(self.rows, cls=DjangoJSONEncoder)),
        }

    @classmethod
    def restore(cls, detail, session, parent_id, client=None):
        """The overlay as last rendered for ``parent_id``, or None."""
        snapshot = session.get(f"{SESSION_PREFIX}:{detail.key}")
        if not snapshot or not same_code(snapshot.get('parent_id'), parent_id):
            return None
        overlay = cls(detail, client=client)
        overlay.parent_id = snapshot['parent_id']
        overlay.state = OverlayState(snapshot['state'])
        overlay.error = snapshot.get('error')
        overlay.rows = snapshot.get('rows') or []
        return overlay
