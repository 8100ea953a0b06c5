"""
Base form for entity pages.

Entity forms are plain ``forms.Form`` classes whose field names are the
backend field names. Dropdowns backed by a lookup collection are declared with
``LookupChoiceField``; the view fetches every lookup a form needs in one
concurrent round trip and hands them in as ``lookups``.
"""
from datetime import date, datetime
from decimal import Decimal

from django import forms
from django.urls import reverse

from .cascade import coerce_code
from .serializers import STATUS_ACTIVE, STATUS_CHOICES

INPUT_CLASS = 'form-control'
SELECT_CLASS = 'form-select'

STATUS_FIELD_CHOICES = [(status, status) for status in STATUS_CHOICES]
CONTACT_METHOD_CHOICES = [('Email', 'Email'), ('Telephone', 'Telephone'), ('WA', 'WA')]


class LookupChoiceField(forms.TypedChoiceField):
    """Select whose options come from a cached lookup collection."""

    def __init__(self, lookup, label_field='Name', value_field='Code', autofill=None, **kwargs):
        self.lookup = lookup
        self.label_field = label_field
        self.value_field = value_field
        # Cascade kind ('city', 'channel'...) resolved live by /lookups/<kind>/
        self.autofill = autofill
        kwargs.setdefault('coerce', coerce_code)
        kwargs.setdefault('empty_value', None)
        super().__init__(choices=[], **kwargs)

    def set_records(self, records):
        options = [('', '---------')]
        for record in records:
            value = record.get(self.value_field)
            if value in (None, ''):
                continue
            options.append((str(value), str(record.get(self.label_field) or value)))
        self.choices = options


def _json_value(value):
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


class ResourceForm(forms.Form):
    """
    Base class for every entity and detail form.

    ``derived_fields`` are read-only fields recomputed in ``clean()`` from the
    parent selection (see ``apps.core.cascade``) or from other inputs. They
    are submitted with the payload unless also listed in
    ``display_only_fields``.
    """
    derived_fields = ()
    display_only_fields = ()
    # Set on create only; Code is immutable once the record exists
    create_only_fields = ()

    def __init__(self, *args, lookups=None, editing=False, **kwargs):
        self.lookups = lookups or {}
        self.editing = editing
        super().__init__(*args, **kwargs)
        if editing:
            for name in self.create_only_fields:
                self.fields.pop(name, None)
        for name, field in self.fields.items():
            if isinstance(field, LookupChoiceField):
                field.set_records(self.lookups.get(field.lookup, []))
                if field.autofill:
                    field.widget.attrs['data-autofill'] = reverse('core:lookup_autofill', args=[field.autofill])
            css = SELECT_CLASS if isinstance(field.widget, forms.Select) else INPUT_CLASS
            field.widget.attrs.setdefault('class', css)
            if name in self.derived_fields:
                field.required = False
                field.widget.attrs['readonly'] = True
        if not self.is_bound and self.initial:
            self.apply_patch(self.initial, self.cascade(self.initial))

    def cascade(self, values):
        """Patch of derived fields for ``values``; forms without any return {}."""
        return {}

    def clean(self):
        cleaned_data = super().clean()
        return self.apply_patch(cleaned_data, self.cascade(cleaned_data))

    @classmethod
    def lookup_names(cls):
        return [
            field.lookup for field in cls.base_fields.values()
            if isinstance(field, LookupChoiceField)
        ] + list(getattr(cls, 'extra_lookups', ()))

    @classmethod
    def initial_from_record(cls, record):
        """Edit-form initial data: the record's values for the form's fields."""
        initial = {}
        for name in cls.base_fields:
            value = record.get(name)
            if value is not None:
                initial[name] = value
        return initial

    def lookup_records(self, lookup):
        return self.lookups.get(lookup, [])

    def apply_patch(self, cleaned_data, patch):
        """Overwrite derived fields with a resolver patch; other keys are ignored."""
        for name, value in patch.items():
            if name not in self.derived_fields or name not in self.fields:
                continue
            if name.endswith('Id'):
                value = coerce_code(value) if value else None
            cleaned_data[name] = value
        return cleaned_data

    def error_message(self, message):
        """Hook for rewording backend error messages before they are shown."""
        return message

    def to_payload(self):
        """JSON body for POST/PUT; empty optional values are sent as null."""
        payload = {}
        for name, value in self.cleaned_data.items():
            if name in self.display_only_fields:
                continue
            if value == '' and not self.fields[name].required and name not in self.derived_fields:
                value = None
            payload[name] = _json_value(value)
        return payload


def status_field():
    return forms.ChoiceField(choices=STATUS_FIELD_CHOICES, initial=STATUS_ACTIVE)


def notes_field(label='Notes'):
    return forms.CharField(label=label, required=False, widget=forms.Textarea(attrs={'rows': 3}))
