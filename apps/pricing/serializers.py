from apps.core.serializers import (
    AmountField,
    DetailSerializer,
    EntitySerializer,
    IsoDateField,
    ReferenceField,
    TextField,
)


class BuyingPriceSerializer(EntitySerializer):
    Date = IsoDateField()
    WarehouseId = ReferenceField()
    Note = TextField()


class SKUSerializerMixin(DetailSerializer):
    SKUFull = TextField()
    SKUParent = TextField()
    SKUCode = TextField()
    SKUCodeChild = TextField()


class BuyingPriceDetailSerializer(SKUSerializerMixin):
    BuyingPriceId = ReferenceField()
    PICode = TextField()
    Name = TextField()
    ProdCost = AmountField()
    FirstMileCost = AmountField()
    LastMileCost = AmountField()
    DDPCost = AmountField()
    TrueCost = AmountField()
    SellingPrice = AmountField()


class SettingPriceSerializer(EntitySerializer):
    Date = IsoDateField()
    BPCode = ReferenceField()
    Note = TextField()


class SettingPriceDetailSerializer(SKUSerializerMixin):
    SettingPriceId = ReferenceField()
    ProductName = TextField()
    SellingPrice = AmountField()
    NormalPrice = AmountField()
    StrikethroughPrice = AmountField()
    CampaignPrice = AmountField()
    BottomPrice = AmountField()
