"""
Master data pages: business partners, products, regions and finance settings.
"""
from apps.core.resources import Column, Resource, register
from apps.core.serializers import NamedEntitySerializer

from . import forms, serializers

CODE = Column('Code', 'Code')
NAME = Column('Name', 'Name')
NOTES = Column('Notes', 'Notes', fallback='N/A')
STATUS = Column('Status', 'Status')


def simple(key, label, plural, description='', featured=False):
    """Entities with nothing but Name, Notes and Status."""
    return Resource(
        key=key,
        label=label,
        plural=plural,
        section='master',
        path=f'/master/{key}',
        serializer=NamedEntitySerializer,
        columns=(CODE, NAME, NOTES, STATUS),
        form_class=forms.NamedEntityForm,
        description=description,
        featured=featured,
    )


register(
    Resource(
        key='suppliers',
        label='Supplier',
        plural='Suppliers',
        section='master',
        path='/master/suppliers',
        serializer=serializers.SupplierSerializer,
        columns=(
            CODE, NAME,
            Column('City.Name', 'City'),
            Column('Province.Name', 'Province'),
            Column('Country.Name', 'Country'),
            Column('ContactMethod', 'Contact'),
            STATUS,
        ),
        form_class=forms.SupplierForm,
        description='Vendors products are bought from.',
        featured=True,
    ),
    Resource(
        key='forwarders',
        label='Forwarder',
        plural='Forwarders',
        section='master',
        path='/master/forwarders',
        serializer=serializers.ForwarderSerializer,
        columns=(
            CODE, NAME,
            Column('Country.Name', 'Country'),
            Column('AddressIndonesia', 'Address (Indonesia)'),
            Column('ContactMethod', 'Contact'),
            STATUS,
        ),
        form_class=forms.ForwarderForm,
        description='Freight forwarders handling cross-border shipping.',
        featured=True,
    ),
    simple('companies', 'Company', 'Companies', 'Legal entities that own products.', featured=True),
    simple('stores', 'Store', 'Stores', 'Sales storefronts.', featured=True),
    Resource(
        key='warehouses',
        label='Warehouse',
        plural='Warehouses',
        section='master',
        path='/master/warehouses',
        serializer=serializers.WarehouseSerializer,
        columns=(CODE, NAME, Column('Address', 'Address'), NOTES, STATUS),
        form_class=forms.WarehouseForm,
        featured=True,
    ),
    Resource(
        key='products',
        label='Product',
        plural='Products',
        section='master',
        path='/master/products',
        serializer=serializers.ProductSerializer,
        columns=(
            CODE, NAME,
            Column('CodeName', 'Code Name'),
            Column('SKUCode', 'SKU Code'),
            Column('Category.Name', 'Category'),
            Column('Variant.Name', 'Variant'),
            Column('UoM', 'UoM'),
            STATUS,
        ),
        form_class=forms.ProductForm,
        featured=True,
    ),
    Resource(
        key='categories',
        label='Category',
        plural='Categories',
        section='master',
        path='/master/categories',
        serializer=serializers.CategorySerializer,
        columns=(CODE, NAME, Column('SKUCode', 'SKU Code'), NOTES, STATUS),
        form_class=forms.CategoryForm,
    ),
    Resource(
        key='channels',
        label='Channel',
        plural='Channels',
        section='master',
        path='/master/channels',
        serializer=serializers.ChannelSerializer,
        columns=(CODE, NAME, Column('Initial', 'Initial'), Column('Category', 'Category'), NOTES, STATUS),
        form_class=forms.ChannelForm,
    ),
    Resource(
        key='uoms',
        label='UoM',
        plural='UoMs',
        section='master',
        path='/master/uoms',
        serializer=NamedEntitySerializer,
        columns=(CODE, NAME, NOTES, STATUS),
        form_class=forms.UomForm,
        description='Units of measure.',
    ),
    simple('variants', 'Variant', 'Variants'),
    simple('countries', 'Country', 'Countries'),
    Resource(
        key='provinces',
        label='Province',
        plural='Provinces',
        section='master',
        path='/master/provinces',
        serializer=serializers.ProvinceSerializer,
        columns=(CODE, NAME, Column('Country.Name', 'Country'), STATUS),
        form_class=forms.ProvinceForm,
    ),
    Resource(
        key='cities',
        label='City',
        plural='Cities',
        section='master',
        path='/master/cities',
        serializer=serializers.CitySerializer,
        columns=(CODE, NAME, Column('Province.Name', 'Province'), Column('Country.Name', 'Country'), STATUS),
        form_class=forms.CityForm,
    ),
    simple('banks', 'Bank', 'Banks'),
    simple('currencies', 'Currency', 'Currencies'),
    Resource(
        key='costs',
        label='Cost',
        plural='Costs',
        section='master',
        path='/master/costs',
        serializer=serializers.CostSerializer,
        columns=(CODE, NAME, Column('Percentage', 'Percentage (%)'), Column('Note', 'Note', fallback='N/A'), STATUS),
        form_class=forms.CostForm,
    ),
    Resource(
        key='ppn-settings',
        label='PPN Setting',
        plural='PPN Settings',
        section='master',
        path='/master/ppn-settings',
        serializer=serializers.PpnSettingSerializer,
        columns=(CODE, NAME, Column('Rate', 'Rate (%)'), STATUS),
        form_class=forms.PpnSettingForm,
        description='Value added tax rates.',
    ),
)
