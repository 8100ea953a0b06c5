from django import forms

from apps.core.cascade import resolve_product
from apps.core.forms import LookupChoiceField, ResourceForm, notes_field


def money_field(**kwargs):
    kwargs.setdefault('required', False)
    kwargs.setdefault('min_value', 0)
    kwargs.setdefault('decimal_places', 2)
    return forms.DecimalField(**kwargs)


class BuyingPriceForm(ResourceForm):
    Date = forms.DateField(widget=forms.DateInput(attrs={'type': 'date'}))
    WarehouseId = LookupChoiceField('warehouses', label='Warehouse')
    Note = notes_field('Note')


class BuyingPriceDetailForm(ResourceForm):
    PICode = forms.CharField(label='PI Code')
    SKUFull = forms.CharField(label='SKU Full', required=False)
    SKUParent = forms.CharField(label='SKU Parent', required=False)
    SKUCode = forms.CharField(label='SKU Code')
    SKUCodeChild = forms.CharField(label='SKU Code Child', required=False)
    Name = forms.CharField(max_length=255)
    ProdCost = money_field(label='Production Cost')
    FirstMileCost = money_field(label='First Mile Cost')
    LastMileCost = money_field(label='Last Mile Cost')
    DDPCost = money_field(label='DDP Cost')
    TrueCost = money_field(label='True Cost')
    SellingPrice = money_field(label='Selling Price')


class SettingPriceForm(ResourceForm):
    Date = forms.DateField(widget=forms.DateInput(attrs={'type': 'date'}))
    BPCode = LookupChoiceField('buying-prices', label='Buying Price', label_field='Code')
    Note = notes_field('Note')


class SettingPriceDetailForm(ResourceForm):
    SKUCode = LookupChoiceField(
        'products', label='SKU Code', label_field='Name', value_field='SKUCode',
        autofill='product', coerce=str,
    )
    SKUFull = forms.CharField(label='SKU Full', required=False)
    SKUParent = forms.CharField(label='SKU Parent', required=False)
    SKUCodeChild = forms.CharField(label='SKU Code Child', required=False)
    ProductName = forms.CharField(label='Product', required=False)
    SellingPrice = money_field(label='Selling Price')
    NormalPrice = money_field(label='Normal Price')
    StrikethroughPrice = money_field(label='Strikethrough Price')
    CampaignPrice = money_field(label='Campaign Price')
    BottomPrice = money_field(label='Bottom Price')

    derived_fields = ('SKUFull', 'SKUParent', 'SKUCodeChild', 'ProductName')

    def cascade(self, values):
        return resolve_product(values.get('SKUCode'), self.lookup_records('products'))
