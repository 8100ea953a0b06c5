"""
Resource registry - one entry per entity page.

A ``Resource`` tells the generic LDM views where the collection lives on the
backend, how to decode it, which form edits it and which columns the table
shows. Resources with child rows (invoices, orders, price lists) carry a
``DetailSpec``. Each domain app declares its resources in ``resources.py``;
``CoreConfig.ready`` imports them.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from django.http import Http404
from django.urls import reverse

SECTIONS = {
    'master': 'Master Data',
    'pricing': 'Pricing',
    'transaction': 'Transactions',
}

# Generic route names shared by every section (see apps.core.urls)
ROUTES = {
    'list': 'collection_list',
    'add': 'record_create',
    'edit': 'record_edit',
    'delete': 'record_delete',
    'details': 'detail_overlay',
    'details_close': 'detail_close',
    'detail_add': 'detail_create',
    'detail_edit': 'detail_edit',
    'detail_delete': 'detail_delete',
    'export': 'detail_export',
}

_registry = {}


@dataclass(frozen=True)
class Column:
    field: str
    label: str
    # Dotted paths reach into embedded objects, e.g. "Forwarder.Name".
    fallback: str = ''

    def value(self, record):
        value = record
        for part in self.field.split('.'):
            if not isinstance(value, dict):
                return self.fallback
            value = value.get(part)
        if value is None or value == '':
            return self.fallback
        return value


@dataclass(frozen=True)
class DetailSpec:
    key: str
    label: str
    path: str
    children_path: str
    parent_field: str
    serializer: type
    columns: Tuple[Column, ...]
    form_class: Optional[type] = None
    export_columns: Tuple[Column, ...] = ()

    def children_url(self, parent_id):
        return self.children_path.format(parent=parent_id)

    @property
    def exported_columns(self):
        return self.export_columns or self.columns


@dataclass(frozen=True)
class Resource:
    key: str
    label: str
    plural: str
    section: str
    path: str
    serializer: type
    columns: Tuple[Column, ...]
    form_class: Optional[type] = None
    description: str = ''
    has_status: bool = True
    featured: bool = False
    detail: Optional[DetailSpec] = None

    @property
    def fetch_error(self):
        return f"Failed to fetch {self.plural.lower()}."

    @property
    def delete_error(self):
        return f"Failed to delete {self.label.lower()}."

    def url(self, action='list', *args):
        """Reverse one of the generic routes, e.g. ``url('edit', code)``."""
        return reverse(f"{self.section}:{ROUTES[action]}", args=[self.key, *args])


def register(*resources):
    for resource in resources:
        if resource.section not in SECTIONS:
            raise ValueError(f"Unknown section '{resource.section}' for {resource.key}")
        if resource.key in _registry:
            raise ValueError(f"Resource '{resource.key}' registered twice")
        _registry[resource.key] = resource
    return resources


def get_resource(key, section=None):
    resource = _registry.get(key)
    if resource is None or (section is not None and resource.section != section):
        raise Http404(f"Unknown resource: {key}")
    return resource


def find_resource(key):
    return _registry.get(key)


def section_resources(section):
    return [r for r in _registry.values() if r.section == section]


def all_resources():
    return list(_registry.values())
