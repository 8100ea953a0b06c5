"""
Record schemas for payloads coming back from the ERP backend.

These are plain DRF serializers with no models behind them; ``decode`` in
``apps.core.api.client`` runs every record through one before a page sees it.
Field names follow the backend (PascalCase).
"""
from django.utils.dateparse import parse_date, parse_datetime
from rest_framework import serializers

from .cascade import coerce_code

STATUS_ACTIVE = 'Active'
STATUS_INACTIVE = 'Non-Active'
STATUS_CHOICES = [STATUS_ACTIVE, STATUS_INACTIVE]


class CodeField(serializers.Field):
    """Record identifier; integers for most entities, strings for a few."""

    default_error_messages = {
        'invalid': 'Code must be an integer or a non-empty string.',
    }

    def to_internal_value(self, data):
        if isinstance(data, bool):
            self.fail('invalid')
        if isinstance(data, int):
            return data
        if isinstance(data, str):
            value = data.strip()
            if not value and self.allow_null:
                return None
            if value:
                return coerce_code(value)
        self.fail('invalid')

    def to_representation(self, value):
        return value


class ReferenceField(CodeField):
    """Bare foreign key, optional."""

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)


class TextField(serializers.CharField):
    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        kwargs.setdefault('allow_blank', True)
        super().__init__(**kwargs)


class AmountField(serializers.DecimalField):
    """Money and measurements; the backend sends numbers or numeric strings."""

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        super().__init__(max_digits=None, decimal_places=None, **kwargs)

    def to_internal_value(self, data):
        if isinstance(data, str) and not data.strip() and self.allow_null:
            return None
        return super().to_internal_value(data)


class IsoDateField(serializers.Field):
    """Dates arrive either as ``YYYY-MM-DD`` or as full ISO timestamps."""

    default_error_messages = {
        'invalid': 'Date must be an ISO 8601 date or timestamp.',
    }

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid')
        value = data.strip()
        if not value and self.allow_null:
            return None
        try:
            parsed = parse_datetime(value)
            if parsed is not None:
                return parsed.date()
            parsed = parse_date(value)
        except ValueError:
            parsed = None
        if parsed is None:
            self.fail('invalid')
        return parsed

    def to_representation(self, value):
        return value.isoformat() if value else value


class EntitySerializer(serializers.Serializer):
    """Shared by every master entity: immutable Code, Status and free-text Notes."""
    Code = CodeField()
    Status = serializers.ChoiceField(choices=STATUS_CHOICES, required=False, allow_null=True)
    Notes = TextField()


class NamedEntitySerializer(EntitySerializer):
    Name = serializers.CharField(allow_blank=True)


class DetailSerializer(serializers.Serializer):
    """Child rows are keyed by ``Id`` on some endpoints and ``Code`` on others."""
    Id = ReferenceField()
    Code = ReferenceField()

    def validate(self, attrs):
        if attrs.get('Id') is None and attrs.get('Code') is None:
            raise serializers.ValidationError('Detail row has neither Id nor Code.')
        return attrs
