import random
import string

from django import forms

from apps.core.cascade import resolve_channel, resolve_city, resolve_province
from apps.core.forms import (
    CONTACT_METHOD_CHOICES,
    LookupChoiceField,
    ResourceForm,
    notes_field,
    status_field,
)

CODE_NAME_ALPHABET = string.ascii_uppercase + string.digits
DUPLICATE_NAME_MESSAGE = "The name is Duplicate"


def generate_code_name(name, rng=random):
    """
    Barcode-friendly code name: the first three words of ``name`` joined by
    dashes plus a random 4-character suffix, e.g. ``Cotton-Bath-Towel-7QX2``.
    """
    words = name.split()[:3]
    suffix = ''.join(rng.choice(CODE_NAME_ALPHABET) for _ in range(4))
    return '-'.join(words + [suffix])


def decimal_field(**kwargs):
    kwargs.setdefault('required', False)
    return forms.DecimalField(**kwargs)


class NamedEntityForm(ResourceForm):
    """Companies, stores, banks, currencies, variants and countries."""
    Name = forms.CharField(max_length=255)
    Notes = notes_field()
    Status = status_field()


class ContactFormMixin(forms.Form):
    Department = forms.CharField(required=False)
    ContactMethod = forms.ChoiceField(choices=[('', '---------')] + CONTACT_METHOD_CHOICES, required=False)
    Description = forms.CharField(required=False, widget=forms.Textarea(attrs={'rows': 2}))
    BankId = LookupChoiceField('banks', label='Bank', required=False)
    AccountNumber = forms.CharField(required=False)
    Website = forms.CharField(required=False)
    Wechat = forms.CharField(required=False)
    ShippingMark = forms.CharField(required=False)


class SupplierForm(ContactFormMixin, ResourceForm):
    Name = forms.CharField(max_length=255)
    Address = forms.CharField(required=False, widget=forms.Textarea(attrs={'rows': 2}))
    CityId = LookupChoiceField('cities', label='City', autofill='city')
    ProvinceId = forms.CharField(label='Province Id', required=False)
    ProvinceName = forms.CharField(label='Province', required=False)
    CountryId = forms.CharField(label='Country Id', required=False)
    CountryName = forms.CharField(label='Country', required=False)
    PostalCode = forms.CharField(required=False)
    Notes = notes_field()
    Status = status_field()

    derived_fields = ('ProvinceId', 'ProvinceName', 'CountryId', 'CountryName')
    display_only_fields = ('ProvinceName', 'CountryName')
    extra_lookups = ('provinces', 'countries')

    def cascade(self, values):
        return resolve_city(
            values.get('CityId'),
            self.lookup_records('cities'),
            self.lookup_records('provinces'),
            self.lookup_records('countries'),
        )


class ForwarderForm(ContactFormMixin, ResourceForm):
    Name = forms.CharField(max_length=255)
    CountryId = LookupChoiceField('countries', label='Country', required=False)
    AddressIndonesia = forms.CharField(required=False, widget=forms.Textarea(attrs={'rows': 2}))
    CoordinateIndonesia = forms.CharField(required=False)
    Notes = notes_field()
    Status = status_field()


class WarehouseForm(ResourceForm):
    Name = forms.CharField(max_length=255)
    Address = forms.CharField(widget=forms.Textarea(attrs={'rows': 2}))
    Notes = notes_field()
    Status = status_field()


class CostForm(ResourceForm):
    Name = forms.CharField(max_length=255)
    Percentage = forms.DecimalField(min_value=0, max_value=100)
    Note = notes_field('Note')
    Status = status_field()


class PpnSettingForm(ResourceForm):
    Name = forms.CharField(max_length=255)
    Rate = forms.DecimalField(min_value=0, max_value=100)
    Status = status_field()


class ProvinceForm(ResourceForm):
    Name = forms.CharField(max_length=255)
    CountryId = LookupChoiceField('countries', label='Country')
    Status = status_field()


class CityForm(ResourceForm):
    Name = forms.CharField(max_length=255)
    ProvinceId = LookupChoiceField('provinces', label='Province', autofill='province')
    CountryId = forms.CharField(label='Country Id', required=False)
    CountryName = forms.CharField(label='Country', required=False)
    Status = status_field()

    derived_fields = ('CountryId', 'CountryName')
    display_only_fields = ('CountryName',)
    extra_lookups = ('countries',)

    def cascade(self, values):
        return resolve_province(
            values.get('ProvinceId'),
            self.lookup_records('provinces'),
            self.lookup_records('countries'),
        )


class ChannelForm(ResourceForm):
    Name = forms.CharField(max_length=255)
    Initial = forms.CharField(max_length=10)
    Category = forms.CharField(initial='Parent')
    Notes = notes_field()
    Status = status_field()


class CategoryForm(ResourceForm):
    Name = forms.CharField(max_length=255)
    SKUCode = forms.CharField(label='SKU Code', required=False)
    Notes = notes_field()
    Status = status_field()


class UomForm(ResourceForm):
    Code = forms.CharField(max_length=20)
    Name = forms.CharField(max_length=255)
    Notes = notes_field()
    Status = status_field()

    create_only_fields = ('Code',)


class ProductForm(ResourceForm):
    Name = forms.CharField(max_length=255)
    CodeName = forms.CharField(
        label='Code Name',
        required=False,
        help_text='Left empty, a code name is generated from the product name.',
    )
    SKUCode = forms.CharField(label='SKU Code', required=False)
    CompanyCode = LookupChoiceField('companies', label='Company')
    CategoryCode = LookupChoiceField('categories', label='Category')
    VariantId = LookupChoiceField('variants', label='Variant', required=False)
    UoM = LookupChoiceField('uoms', label='UoM')
    StoreName = LookupChoiceField('stores', label='Store')
    Channel = LookupChoiceField('channels', autofill='channel')
    InitialChannel = forms.CharField(label='Initial Channel', required=False)
    CategoryFromChannel = forms.CharField(label='Channel Category', required=False)
    SKUCodeEcommerce = forms.CharField(label='SKU Code E-commerce', required=False)
    Length = decimal_field(min_value=0)
    Width = decimal_field(min_value=0)
    Height = decimal_field(min_value=0)
    Weight = decimal_field(min_value=0)
    Keyword = forms.CharField(required=False)
    Parameter = forms.CharField(required=False)
    Content = forms.CharField(required=False, widget=forms.Textarea(attrs={'rows': 3}))
    Notes = notes_field()
    Status = status_field()

    derived_fields = ('InitialChannel', 'CategoryFromChannel', 'SKUCodeEcommerce')
    # The backend derives these itself from Channel
    display_only_fields = derived_fields

    def cascade(self, values):
        return resolve_channel(
            values.get('Channel'),
            self.lookup_records('channels'),
            values.get('SKUCode') or '',
        )

    def clean(self):
        cleaned_data = super().clean()
        if cleaned_data.get('Name') and not cleaned_data.get('CodeName'):
            cleaned_data['CodeName'] = generate_code_name(cleaned_data['Name'])
        return cleaned_data

    def error_message(self, message):
        if 'already exists' in message:
            return DUPLICATE_NAME_MESSAGE
        return message
