from django import template

from ..overlay import row_key
from ..serializers import STATUS_ACTIVE

register = template.Library()


@register.filter
def column_value(record, column):
    """Value of a ``Column`` for one row, following dotted paths."""
    return column.value(record)


@register.filter
def status_badge(status):
    """Bootstrap badge class for an entity Status."""
    if status == STATUS_ACTIVE:
        return 'bg-success'
    if not status:
        return 'bg-light text-dark'
    return 'bg-secondary'


@register.filter
def detail_key(row):
    return row_key(row)


@register.simple_tag
def resource_url(resource, action='list', *args):
    return resource.url(action, *args)
