"""
Pricing pages: buying price sheets (landed cost per SKU) and the selling
price settings derived from them.
"""
from apps.core.resources import Column, DetailSpec, Resource, register

from . import forms, serializers

SKU_COLUMNS = (
    Column('SKUFull', 'SKU Full'),
    Column('SKUParent', 'SKU Parent'),
    Column('SKUCode', 'SKU Code'),
    Column('SKUCodeChild', 'SKU Child'),
)

buying_price_details = DetailSpec(
    key='buying-price-details',
    label='Buying Price Detail',
    path='/product_pricing/buying-price-details',
    children_path='/product_pricing/buying-price-details/{parent}',
    parent_field='BuyingPriceId',
    serializer=serializers.BuyingPriceDetailSerializer,
    columns=(
        Column('PICode', 'PI Code'),
        *SKU_COLUMNS,
        Column('Name', 'Name'),
        Column('ProdCost', 'Prod Cost'),
        Column('FirstMileCost', 'First Mile'),
        Column('LastMileCost', 'Last Mile'),
        Column('DDPCost', 'DDP'),
        Column('TrueCost', 'True Cost'),
        Column('SellingPrice', 'Selling Price'),
    ),
    form_class=forms.BuyingPriceDetailForm,
)

setting_price_details = DetailSpec(
    key='setting-price-details',
    label='Setting Price Detail',
    path='/product_pricing/setting-price-details',
    children_path='/product_pricing/setting-price-details/by-setting-price/{parent}',
    parent_field='SettingPriceId',
    serializer=serializers.SettingPriceDetailSerializer,
    columns=(
        *SKU_COLUMNS,
        Column('ProductName', 'Product'),
        Column('SellingPrice', 'Selling'),
        Column('NormalPrice', 'Normal'),
        Column('StrikethroughPrice', 'Strikethrough'),
        Column('CampaignPrice', 'Campaign'),
        Column('BottomPrice', 'Bottom'),
    ),
    form_class=forms.SettingPriceDetailForm,
)

register(
    Resource(
        key='buying-prices',
        label='Buying Price',
        plural='Buying Prices',
        section='pricing',
        path='/product_pricing/buying-prices',
        serializer=serializers.BuyingPriceSerializer,
        columns=(
            Column('Code', 'Code'),
            Column('Date', 'Date'),
            Column('Warehouse.Name', 'Warehouse'),
            Column('Note', 'Note', fallback='N/A'),
        ),
        form_class=forms.BuyingPriceForm,
        description='Landed cost of each SKU per proforma invoice.',
        has_status=False,
        featured=True,
        detail=buying_price_details,
    ),
    Resource(
        key='setting-prices',
        label='Setting Price',
        plural='Setting Prices',
        section='pricing',
        path='/product_pricing/setting-prices',
        serializer=serializers.SettingPriceSerializer,
        columns=(
            Column('Code', 'Code'),
            Column('Date', 'Date'),
            Column('BPCode', 'Buying Price'),
            Column('Note', 'Note', fallback='N/A'),
        ),
        form_class=forms.SettingPriceForm,
        description='Marketplace selling, campaign and bottom prices.',
        has_status=False,
        featured=True,
        detail=setting_price_details,
    ),
)
