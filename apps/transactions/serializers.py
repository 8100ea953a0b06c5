from rest_framework import serializers

from apps.core.serializers import (
    AmountField,
    CodeField,
    DetailSerializer,
    IsoDateField,
    ReferenceField,
    TextField,
)

# Payment and shipping progress of PI payments and CX invoices
PAYMENT_STATUSES = ['Unpaid', 'Paid', 'Shipped', 'Arrived', 'Inbound', 'Completed', 'Cancelled']


class TransactionSerializer(serializers.Serializer):
    """Time-stamped header record: a Code, a Date and free-text Notes."""
    Code = CodeField()
    Date = IsoDateField()
    Notes = TextField()


class PaymentTransactionSerializer(TransactionSerializer):
    Status = serializers.ChoiceField(choices=PAYMENT_STATUSES, required=False, allow_null=True)


class PurchaseOrderSerializer(TransactionSerializer):
    SupplierId = ReferenceField()


class ProformaInvoiceSerializer(TransactionSerializer):
    PONumber = ReferenceField()
    SupplierId = ReferenceField()


class PiPaymentSerializer(PaymentTransactionSerializer):
    SupplierId = ReferenceField()


class GoodsReceiptSerializer(TransactionSerializer):
    ForwarderId = ReferenceField()
    LMCode = ReferenceField()
    WarehouseId = ReferenceField()


class LastMileSerializer(TransactionSerializer):
    pass


class CxQuotationSerializer(TransactionSerializer):
    ForwarderId = ReferenceField()


class CxInvoiceSerializer(PaymentTransactionSerializer):
    ForwarderId = ReferenceField()


# Detail rows

class CartonSerializerMixin(serializers.Serializer):
    CartonP = AmountField()
    CartonL = AmountField()
    CartonT = AmountField()
    CartonQty = AmountField()


class OrderLineSerializerMixin(CartonSerializerMixin):
    SKUCode = TextField()
    ProductName = TextField()
    Variant = TextField()
    ProductImage = TextField()
    PricePerCarton = AmountField()
    EstimatedCBMTotal = AmountField()
    CartonWeight = AmountField()
    MarkingNumber = TextField()
    Credit = AmountField()
    Note = TextField()


class PurchaseOrderDetailSerializer(OrderLineSerializerMixin, DetailSerializer):
    PurchaseOrderId = ReferenceField()
    QTY = AmountField()
    UnitPrice = AmountField()


class ProformaInvoiceDetailSerializer(OrderLineSerializerMixin, DetailSerializer):
    ProformaInvoiceId = ReferenceField()
    QTYOrdered = AmountField()
    QTYApproved = AmountField()
    UnitPriceOrdered = AmountField()
    UnitPriceApproved = AmountField()
    FirstMile = AmountField()


class PiPaymentDetailSerializer(DetailSerializer):
    PiPaymentId = ReferenceField()
    PICode = ReferenceField()
    Rate = AmountField()
    ProductPriceRupiah = AmountField()
    FirstMileCostRupiah = AmountField()
    PaymentRupiah = AmountField()


class LastMileDetailSerializer(DetailSerializer):
    TransaksiLastMileId = ReferenceField()
    CXCode = ReferenceField()
    LastMileTracking = TextField()
    FreightCode = TextField()
    WarehouseCode = ReferenceField()
    WarehouseAddress = TextField()
    Courier = TextField()
    ShippingCost = AmountField()
    AdditionalCost = AmountField()


class CxQuotationDetailSerializer(CartonSerializerMixin, DetailSerializer):
    CxQuotationId = ReferenceField()
    PICode = ReferenceField()
    ProductName = TextField()
    QTY = AmountField()
    CrossBorderFee = AmountField()
    ImportDuties = AmountField()
    DiscountAndFees = AmountField()
    CXCost = AmountField()


class CxInvoiceDetailSerializer(DetailSerializer):
    TransaksiCxInvoiceId = ReferenceField()
    CXCode = ReferenceField()
    AWB = TextField()
    FreightCode = TextField()
    Rate = AmountField()
    CXCostRupiah = AmountField()
    PaymentRupiah = AmountField()
