from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from django import forms

from apps.core.cascade import resolve_product
from apps.core.forms import LookupChoiceField, ResourceForm, notes_field

from .serializers import PAYMENT_STATUSES

PAYMENT_STATUS_CHOICES = [(status, status) for status in PAYMENT_STATUSES]

TWO_PLACES = Decimal('0.01')
THREE_PLACES = Decimal('0.001')


def to_decimal(value):
    """Blank or unparsable inputs count as zero, like an untouched number box."""
    if value in (None, ''):
        return Decimal(0)
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal(0)


def price_per_carton(unit_price, carton_qty):
    return (to_decimal(unit_price) * to_decimal(carton_qty)).quantize(TWO_PLACES, ROUND_HALF_UP)


def estimated_cbm_total(length, width, height, carton_qty):
    """Cartons are measured in centimetres (P x L x T)."""
    volume = to_decimal(length) * to_decimal(width) * to_decimal(height) * to_decimal(carton_qty)
    return (volume / 100).quantize(THREE_PLACES, ROUND_HALF_UP)


def number_field(**kwargs):
    kwargs.setdefault('required', False)
    kwargs.setdefault('min_value', 0)
    return forms.DecimalField(**kwargs)


def date_field():
    return forms.DateField(widget=forms.DateInput(attrs={'type': 'date'}))


# Headers

class PurchaseOrderForm(ResourceForm):
    Date = date_field()
    SupplierId = LookupChoiceField('suppliers', label='Supplier')
    Notes = notes_field()


class ProformaInvoiceForm(ResourceForm):
    Date = date_field()
    PONumber = LookupChoiceField('purchase-orders', label='PO Number', label_field='Code')
    SupplierId = LookupChoiceField('suppliers', label='Supplier')
    Notes = notes_field()


class PiPaymentForm(ResourceForm):
    Date = date_field()
    SupplierId = LookupChoiceField('suppliers', label='Supplier')
    Notes = notes_field()
    Status = forms.ChoiceField(choices=PAYMENT_STATUS_CHOICES, initial='Unpaid')


class GoodsReceiptForm(ResourceForm):
    Date = date_field()
    ForwarderId = LookupChoiceField('forwarders', label='Forwarder')
    LMCode = LookupChoiceField('last-mile', label='Last Mile', label_field='Code')
    WarehouseId = LookupChoiceField('warehouses', label='Warehouse')
    Notes = notes_field()


class LastMileForm(ResourceForm):
    Date = date_field()
    Notes = notes_field()


class CxQuotationForm(ResourceForm):
    Date = date_field()
    ForwarderId = LookupChoiceField('forwarders', label='Forwarder')
    Notes = notes_field()


class CxInvoiceForm(ResourceForm):
    Date = date_field()
    ForwarderId = LookupChoiceField('forwarders', label='Forwarder')
    Notes = notes_field()
    Status = forms.ChoiceField(choices=PAYMENT_STATUS_CHOICES, initial='Unpaid')


# Detail rows

class OrderLineForm(ResourceForm):
    """
    Shared by PO and PI lines. Picking a SKU fills the product name, variant
    and image; carton inputs drive PricePerCarton and EstimatedCBMTotal.
    """
    unit_price_field = None

    SKUCode = LookupChoiceField(
        'products', label='SKU Code', label_field='Name', value_field='SKUCode',
        autofill='product', coerce=str,
    )
    ProductName = forms.CharField(label='Product', required=False)
    Variant = forms.CharField(required=False)
    ProductImage = forms.CharField(label='Image', required=False)
    CartonP = number_field(label='Carton P (cm)')
    CartonL = number_field(label='Carton L (cm)')
    CartonT = number_field(label='Carton T (cm)')
    CartonQty = number_field(label='Carton Qty')
    PricePerCarton = number_field(label='Price per Carton')
    EstimatedCBMTotal = number_field(label='Estimated CBM Total')
    CartonWeight = number_field(label='Carton Weight')
    MarkingNumber = forms.CharField(label='Marking Number', required=False)
    Credit = number_field()
    Note = notes_field('Note')

    derived_fields = ('ProductName', 'Variant', 'ProductImage', 'PricePerCarton', 'EstimatedCBMTotal')

    def cascade(self, values):
        patch = resolve_product(values.get('SKUCode'), self.lookup_records('products'))
        patch['PricePerCarton'] = price_per_carton(values.get(self.unit_price_field), values.get('CartonQty'))
        patch['EstimatedCBMTotal'] = estimated_cbm_total(
            values.get('CartonP'), values.get('CartonL'), values.get('CartonT'), values.get('CartonQty'),
        )
        return patch


class PurchaseOrderDetailForm(OrderLineForm):
    unit_price_field = 'UnitPrice'

    QTY = number_field(label='Qty')
    UnitPrice = number_field(label='Unit Price')


class ProformaInvoiceDetailForm(OrderLineForm):
    unit_price_field = 'UnitPriceOrdered'

    QTYOrdered = number_field(label='Qty Ordered')
    QTYApproved = number_field(label='Qty Approved')
    UnitPriceOrdered = number_field(label='Unit Price Ordered')
    UnitPriceApproved = number_field(label='Unit Price Approved')
    FirstMile = number_field(label='First Mile')


class PiPaymentDetailForm(ResourceForm):
    PICode = LookupChoiceField('proforma-invoices', label='PI Code', label_field='Code')
    Rate = number_field()
    ProductPriceRupiah = number_field(label='Product Price (IDR)')
    FirstMileCostRupiah = number_field(label='First Mile Cost (IDR)')
    PaymentRupiah = number_field(label='Payment (IDR)')


class LastMileDetailForm(ResourceForm):
    CXCode = forms.CharField(label='CX Code')
    LastMileTracking = forms.CharField(label='Tracking', required=False)
    FreightCode = forms.CharField(label='Freight Code', required=False)
    WarehouseCode = LookupChoiceField('warehouses', label='Warehouse', required=False)
    WarehouseAddress = forms.CharField(label='Warehouse Address', required=False)
    Courier = forms.CharField(required=False)
    ShippingCost = number_field(label='Shipping Cost')
    AdditionalCost = number_field(label='Additional Cost')


class CxQuotationDetailForm(ResourceForm):
    PICode = LookupChoiceField('proforma-invoices', label='PI Code', label_field='Code')
    ProductName = forms.CharField(label='Product', required=False)
    QTY = number_field(label='Qty')
    CartonP = number_field(label='Carton P (cm)')
    CartonL = number_field(label='Carton L (cm)')
    CartonT = number_field(label='Carton T (cm)')
    CartonQty = number_field(label='Carton Qty')
    CrossBorderFee = number_field(label='Cross Border Fee')
    ImportDuties = number_field(label='Import Duties')
    DiscountAndFees = number_field(label='Discount and Fees')
    CXCost = number_field(label='CX Cost')


class CxInvoiceDetailForm(ResourceForm):
    CXCode = forms.CharField(label='CX Code')
    AWB = forms.CharField(required=False)
    FreightCode = forms.CharField(label='Freight Code', required=False)
    Rate = number_field()
    CXCostRupiah = number_field(label='CX Cost (IDR)')
    PaymentRupiah = number_field(label='Payment (IDR)')
