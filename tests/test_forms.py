import random
import re
from decimal import Decimal

from apps.master.forms import DUPLICATE_NAME_MESSAGE, ProductForm, SupplierForm, UomForm, generate_code_name
from apps.pricing.forms import SettingPriceDetailForm
from apps.transactions.forms import (
    ProformaInvoiceDetailForm,
    PurchaseOrderDetailForm,
    PurchaseOrderForm,
    estimated_cbm_total,
    price_per_carton,
)
from tests.factories import (
    ChannelFactory,
    CityFactory,
    CountryFactory,
    ProductFactory,
    ProformaInvoiceDetailFactory,
    ProvinceFactory,
    SupplierFactory,
)

REGION_LOOKUPS = {
    'cities': [CityFactory()],
    'provinces': [ProvinceFactory()],
    'countries': [CountryFactory()],
    'banks': [],
}

PRODUCT_LOOKUPS = {
    'companies': [{'Code': 1, 'Name': 'PT Tekstil Nusantara'}],
    'categories': [{'Code': 2, 'Name': 'Towels'}],
    'variants': [],
    'uoms': [{'Code': 'PCS', 'Name': 'Pieces'}],
    'stores': [{'Code': 1, 'Name': 'Main Store'}],
    'channels': [ChannelFactory()],
}


class TestSupplierForm:
    def test_lookup_names(self):
        assert set(SupplierForm.lookup_names()) == {'banks', 'cities', 'provinces', 'countries'}

    def test_city_fills_province_and_country(self):
        form = SupplierForm({'Name': 'Acme', 'CityId': '3', 'Status': 'Active'}, lookups=REGION_LOOKUPS)
        assert form.is_valid(), form.errors

        payload = form.to_payload()
        assert payload['CityId'] == 3
        assert payload['ProvinceId'] == 2
        assert payload['CountryId'] == 1
        assert 'ProvinceName' not in payload
        assert 'CountryName' not in payload
        assert payload['Address'] is None
        assert payload['BankId'] is None

    def test_unknown_city_is_rejected(self):
        form = SupplierForm({'Name': 'Acme', 'CityId': '99', 'Status': 'Active'}, lookups=REGION_LOOKUPS)
        assert not form.is_valid()
        assert 'CityId' in form.errors

    def test_edit_initial_shows_derived_names(self):
        supplier = SupplierFactory(Code=4)
        form = SupplierForm(initial=SupplierForm.initial_from_record(supplier), lookups=REGION_LOOKUPS, editing=True)
        assert form.initial['ProvinceName'] == 'DKI Jakarta'
        assert form.initial['CountryName'] == 'Indonesia'
        assert form.fields['ProvinceName'].widget.attrs['readonly']

    def test_autofill_url_on_city_select(self):
        form = SupplierForm(lookups=REGION_LOOKUPS)
        assert form.fields['CityId'].widget.attrs['data-autofill'] == '/lookups/city/'


class TestProductForm:
    data = {
        'Name': 'Cotton Bath Towel Premium',
        'SKUCode': 'TWL-001',
        'CompanyCode': '1',
        'CategoryCode': '2',
        'UoM': 'PCS',
        'StoreName': '1',
        'Channel': '9',
        'Status': 'Active',
    }

    def test_code_name_generated_when_blank(self):
        form = ProductForm(self.data, lookups=PRODUCT_LOOKUPS)
        assert form.is_valid(), form.errors
        assert re.fullmatch(r'Cotton-Bath-Towel-[A-Z0-9]{4}', form.cleaned_data['CodeName'])

    def test_typed_code_name_is_kept(self):
        form = ProductForm({**self.data, 'CodeName': 'TOWEL-01'}, lookups=PRODUCT_LOOKUPS)
        assert form.is_valid(), form.errors
        assert form.cleaned_data['CodeName'] == 'TOWEL-01'

    def test_channel_fields_are_display_only(self):
        form = ProductForm(self.data, lookups=PRODUCT_LOOKUPS)
        assert form.is_valid(), form.errors
        assert form.cleaned_data['SKUCodeEcommerce'] == 'TWL-001-SHP'
        assert form.cleaned_data['InitialChannel'] == 'SHP'

        payload = form.to_payload()
        assert payload['Channel'] == 9
        assert payload['StoreName'] == 1
        assert payload['UoM'] == 'PCS'
        assert 'SKUCodeEcommerce' not in payload

    def test_duplicate_name_message(self):
        form = ProductForm(lookups=PRODUCT_LOOKUPS)
        assert form.error_message('Product with this Name already exists') == DUPLICATE_NAME_MESSAGE
        assert form.error_message('Database offline') == 'Database offline'


def test_generate_code_name():
    code_name = generate_code_name('Towel', rng=random.Random(7))
    assert re.fullmatch(r'Towel-[A-Z0-9]{4}', code_name)


def test_uom_code_is_create_only():
    assert 'Code' in UomForm().fields
    assert 'Code' not in UomForm(editing=True).fields


class TestOrderLines:
    def test_carton_maths(self):
        assert price_per_carton('2.345', 1) == Decimal('2.35')
        assert price_per_carton('2.50', '') == Decimal('0.00')
        assert estimated_cbm_total(50, 40, 30, 10) == Decimal('6000.000')
        assert estimated_cbm_total('', None, 30, 10) == Decimal('0.000')

    def test_purchase_order_line(self):
        form = PurchaseOrderDetailForm({
            'SKUCode': 'TWL-001',
            'QTY': '100',
            'UnitPrice': '2.5',
            'CartonP': '50', 'CartonL': '40', 'CartonT': '30', 'CartonQty': '10',
            'PricePerCarton': '1',
        }, lookups={'products': [ProductFactory()]})
        assert form.is_valid(), form.errors

        payload = form.to_payload()
        assert payload['ProductName'] == 'Cotton Bath Towel'
        assert payload['Variant'] == 'White / Large'
        assert payload['ProductImage'] == 'https://cdn.example.com/towel-1.jpg'
        assert payload['PricePerCarton'] == 25.0
        assert payload['EstimatedCBMTotal'] == 6000.0
        assert payload['QTY'] == 100.0

    def test_proforma_line_prices_cartons_from_ordered_price(self):
        row = ProformaInvoiceDetailFactory(PricePerCarton='0')
        form = ProformaInvoiceDetailForm(
            initial=ProformaInvoiceDetailForm.initial_from_record(row),
            lookups={'products': [ProductFactory()]},
            editing=True,
        )
        assert form.initial['PricePerCarton'] == Decimal('25.00')
        assert 'Id' not in form.initial


def test_setting_price_keeps_typed_selling_price():
    form = SettingPriceDetailForm(
        {'SKUCode': 'TWL-001', 'SellingPrice': '95000'},
        lookups={'products': [ProductFactory()]},
    )
    assert form.is_valid(), form.errors
    assert form.cleaned_data['SellingPrice'] == Decimal('95000')
    assert form.cleaned_data['SKUFull'] == 'TWL-001-WHT-L'
    assert form.cleaned_data['ProductName'] == 'Cotton Bath Towel'


def test_header_dates_are_sent_as_iso_strings():
    form = PurchaseOrderForm({'Date': '2024-03-01', 'SupplierId': '1'}, lookups={'suppliers': [SupplierFactory(Code=1)]})
    assert form.is_valid(), form.errors
    assert form.to_payload() == {'Date': '2024-03-01', 'SupplierId': 1, 'Notes': None}


def test_store_options_post_the_store_code():
    form = ProductForm(lookups=PRODUCT_LOOKUPS)
    assert ('1', 'Main Store') in form.fields['StoreName'].choices
