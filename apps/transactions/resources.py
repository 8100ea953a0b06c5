"""
Transaction pages: the import pipeline from purchase order to last-mile
delivery. Every header except goods receipts has detail rows.
"""
from apps.core.resources import Column, DetailSpec, Resource, register

from . import forms, serializers

CODE = Column('Code', 'Code')
DATE = Column('Date', 'Date')
NOTES = Column('Notes', 'Notes', fallback='N/A')
STATUS = Column('Status', 'Status')
SUPPLIER = Column('Supplier.Name', 'Supplier')
FORWARDER = Column('Forwarder.Name', 'Forwarder')

CARTON_COLUMNS = (
    Column('CartonP', 'P'),
    Column('CartonL', 'L'),
    Column('CartonT', 'T'),
    Column('CartonQty', 'Cartons'),
)


def details(key, label, collection, parent_field, serializer, columns, form_class, by):
    """Detail rows at ``/transaction/<collection>``, listed per parent ``by-<by>/<id>``."""
    return DetailSpec(
        key=key,
        label=label,
        path=f'/transaction/{collection}',
        children_path=f'/transaction/{collection}/by-{by}/{{parent}}',
        parent_field=parent_field,
        serializer=serializer,
        columns=columns,
        form_class=form_class,
    )


purchase_order_details = details(
    'purchase-order-details', 'PO Detail', 'purchase-order-details', 'PurchaseOrderId',
    serializers.PurchaseOrderDetailSerializer,
    (
        Column('SKUCode', 'SKU'),
        Column('ProductName', 'Product'),
        Column('Variant', 'Variant'),
        Column('QTY', 'Qty'),
        Column('UnitPrice', 'Unit Price'),
        *CARTON_COLUMNS,
        Column('PricePerCarton', 'Price/Carton'),
        Column('EstimatedCBMTotal', 'CBM'),
        Column('MarkingNumber', 'Marking'),
        Column('Note', 'Note'),
    ),
    forms.PurchaseOrderDetailForm,
    by='purchase-order',
)

proforma_invoice_details = details(
    'proforma-invoice-details', 'PI Detail', 'proforma-invoice-details', 'ProformaInvoiceId',
    serializers.ProformaInvoiceDetailSerializer,
    (
        Column('SKUCode', 'SKU'),
        Column('ProductName', 'Product'),
        Column('Variant', 'Variant'),
        Column('QTYOrdered', 'Qty Ordered'),
        Column('QTYApproved', 'Qty Approved'),
        Column('UnitPriceOrdered', 'Price Ordered'),
        Column('UnitPriceApproved', 'Price Approved'),
        *CARTON_COLUMNS,
        Column('PricePerCarton', 'Price/Carton'),
        Column('EstimatedCBMTotal', 'CBM'),
        Column('FirstMile', 'First Mile'),
        Column('Credit', 'Credit'),
    ),
    forms.ProformaInvoiceDetailForm,
    by='proforma-invoice',
)

pi_payment_details = details(
    'pi-payment-details', 'PI Payment Detail', 'pi-payment-details', 'PiPaymentId',
    serializers.PiPaymentDetailSerializer,
    (
        Column('PICode', 'PI Code'),
        Column('Rate', 'Rate'),
        Column('ProductPriceRupiah', 'Product Price (IDR)'),
        Column('FirstMileCostRupiah', 'First Mile (IDR)'),
        Column('PaymentRupiah', 'Payment (IDR)'),
    ),
    forms.PiPaymentDetailForm,
    by='pi-payment',
)

last_mile_details = details(
    'last-mile-details', 'Last Mile Detail', 'last-mile-details', 'TransaksiLastMileId',
    serializers.LastMileDetailSerializer,
    (
        Column('CXCode', 'CX Code'),
        Column('LastMileTracking', 'Tracking'),
        Column('FreightCode', 'Freight Code'),
        Column('WarehouseCode', 'Warehouse'),
        Column('WarehouseAddress', 'Warehouse Address'),
        Column('Courier', 'Courier'),
        Column('ShippingCost', 'Shipping'),
        Column('AdditionalCost', 'Additional'),
    ),
    forms.LastMileDetailForm,
    by='last-mile',
)

cx_quotation_details = details(
    'cx-quotation-details', 'CX Quotation Detail', 'cx-quotation-details', 'CxQuotationId',
    serializers.CxQuotationDetailSerializer,
    (
        Column('PICode', 'PI Code'),
        Column('ProductName', 'Product'),
        Column('QTY', 'Qty'),
        *CARTON_COLUMNS,
        Column('CrossBorderFee', 'Cross Border'),
        Column('ImportDuties', 'Import Duties'),
        Column('DiscountAndFees', 'Discount & Fees'),
        Column('CXCost', 'CX Cost'),
    ),
    forms.CxQuotationDetailForm,
    by='cx-quotation',
)

cx_invoice_details = details(
    'cx-invoice-details', 'CX Invoice Detail', 'cx-invoice-details', 'TransaksiCxInvoiceId',
    serializers.CxInvoiceDetailSerializer,
    (
        Column('CXCode', 'CX Code'),
        Column('AWB', 'AWB'),
        Column('FreightCode', 'Freight Code'),
        Column('Rate', 'Rate'),
        Column('CXCostRupiah', 'CX Cost (IDR)'),
        Column('PaymentRupiah', 'Payment (IDR)'),
    ),
    forms.CxInvoiceDetailForm,
    by='cx-invoice',
)


def transaction(key, label, plural, serializer, columns, form_class, detail=None,
                has_status=False, featured=True, description=''):
    return Resource(
        key=key,
        label=label,
        plural=plural,
        section='transaction',
        path=f'/transaction/{key}',
        serializer=serializer,
        columns=columns,
        form_class=form_class,
        description=description,
        has_status=has_status,
        featured=featured,
        detail=detail,
    )


register(
    transaction(
        'purchase-orders', 'Purchase Order', 'Purchase Orders',
        serializers.PurchaseOrderSerializer, (CODE, DATE, SUPPLIER, NOTES),
        forms.PurchaseOrderForm, purchase_order_details,
        description='Orders placed with suppliers.',
    ),
    transaction(
        'proforma-invoices', 'Proforma Invoice', 'Proforma Invoices',
        serializers.ProformaInvoiceSerializer,
        (CODE, DATE, Column('PONumber', 'PO Number'), SUPPLIER, NOTES),
        forms.ProformaInvoiceForm, proforma_invoice_details,
        description='Supplier-approved quantities and prices for a PO.',
    ),
    transaction(
        'pi-payments', 'PI Payment', 'PI Payments',
        serializers.PiPaymentSerializer, (CODE, DATE, SUPPLIER, NOTES, STATUS),
        forms.PiPaymentForm, pi_payment_details, has_status=True,
    ),
    transaction(
        'goods-receipts', 'Goods Receipt', 'Goods Receipts',
        serializers.GoodsReceiptSerializer,
        (CODE, DATE, FORWARDER, Column('LMCode', 'Last Mile'), Column('Warehouse.Name', 'Warehouse'), NOTES),
        forms.GoodsReceiptForm,
        description='Arrivals booked into a warehouse.',
    ),
    transaction(
        'last-mile', 'Last Mile', 'Last Mile Shipments',
        serializers.LastMileSerializer, (CODE, DATE, NOTES),
        forms.LastMileForm, last_mile_details,
    ),
    transaction(
        'cx-quotations', 'CX Quotation', 'CX Quotations',
        serializers.CxQuotationSerializer, (CODE, DATE, FORWARDER, NOTES),
        forms.CxQuotationForm, cx_quotation_details,
        description='Cross-border shipping quotes from forwarders.',
    ),
    transaction(
        'cx-invoices', 'CX Invoice', 'CX Invoices',
        serializers.CxInvoiceSerializer, (CODE, DATE, FORWARDER, NOTES, STATUS),
        forms.CxInvoiceForm, cx_invoice_details, has_status=True,
    ),
)
