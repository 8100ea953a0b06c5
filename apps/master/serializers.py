from rest_framework import serializers

from apps.core.serializers import (
    AmountField,
    NamedEntitySerializer,
    ReferenceField,
    TextField,
)


class ContactSerializerMixin(serializers.Serializer):
    """Contact and banking block shared by suppliers and forwarders."""
    Department = TextField()
    ContactMethod = TextField()
    Description = TextField()
    BankId = ReferenceField()
    AccountNumber = TextField()
    Website = TextField()
    Wechat = TextField()
    ShippingMark = TextField()


class SupplierSerializer(ContactSerializerMixin, NamedEntitySerializer):
    Address = TextField()
    CityId = ReferenceField()
    ProvinceId = ReferenceField()
    CountryId = ReferenceField()
    PostalCode = TextField()


class ForwarderSerializer(ContactSerializerMixin, NamedEntitySerializer):
    CountryId = ReferenceField()
    AddressIndonesia = TextField()
    CoordinateIndonesia = TextField()


class WarehouseSerializer(NamedEntitySerializer):
    Address = TextField()


class CostSerializer(NamedEntitySerializer):
    Percentage = AmountField()
    Note = TextField()


class PpnSettingSerializer(NamedEntitySerializer):
    Rate = AmountField()


class ProvinceSerializer(NamedEntitySerializer):
    CountryId = ReferenceField()


class CitySerializer(NamedEntitySerializer):
    ProvinceId = ReferenceField()
    CountryId = ReferenceField()


class ChannelSerializer(NamedEntitySerializer):
    Initial = TextField()
    Category = TextField()


class CategorySerializer(NamedEntitySerializer):
    SKUCode = TextField()


class ProductSerializer(NamedEntitySerializer):
    CodeName = TextField()
    SKUCode = TextField()
    SKUFull = TextField()
    SKUParent = TextField()
    SKUCodeChild = TextField()
    CompanyCode = ReferenceField()
    CategoryCode = ReferenceField()
    VariantId = ReferenceField()
    UoM = TextField()
    StoreName = TextField()
    Channel = TextField()
    Content = TextField()
    ImageURL = TextField()
    Keyword = TextField()
    Parameter = TextField()
    Length = AmountField()
    Width = AmountField()
    Height = AmountField()
    Weight = AmountField()
    SellingPrice = AmountField()
