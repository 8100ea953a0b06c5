"""
Cascading selection resolvers.

Selecting a parent reference in a form (City, Province, Channel, Product)
fills dependent read-only fields from the parent's data, which is already in
memory. Every resolver returns a complete patch; an unknown id yields empty
strings for every field instead of raising.
"""
import json

CITY_FIELDS = ('ProvinceId', 'ProvinceName', 'CountryId', 'CountryName')
PROVINCE_FIELDS = ('CountryId', 'CountryName')
CHANNEL_FIELDS = ('InitialChannel', 'CategoryFromChannel', 'SKUCodeEcommerce')
PRODUCT_FIELDS = (
    'ProductName', 'Variant', 'ProductImage',
    'SKUFull', 'SKUParent', 'SKUCodeChild', 'SellingPrice',
)


def _blank(fields):
    return {name: '' for name in fields}


def _text(value):
    return '' if value is None else str(value)


def same_code(a, b):
    """Ids arrive as ints from JSON and as strings from form posts."""
    if a is None or b is None:
        return False
    a, b = str(a).strip(), str(b).strip()
    return bool(a) and a == b


def coerce_code(value):
    """
    Numeric codes from URLs and form posts become ints; others stay strings.

    Only canonical numbers convert; "007" stays a string code.
    """
    value = str(value).strip()
    if value.isascii() and value.isdigit() and str(int(value)) == value:
        return int(value)
    return value


def find_record(records, code, key='Code'):
    for record in records or ():
        if isinstance(record, dict) and same_code(record.get(key), code):
            return record
    return None


def _embedded(record, name):
    value = record.get(name)
    return value if isinstance(value, dict) else {}


def _reference(record, name, lookup):
    """
    Resolve ``<name>Id`` on ``record`` to ``(id, name, referenced_record)``.

    The embedded object wins; otherwise the bare id is joined against
    ``lookup``.
    """
    embedded = _embedded(record, name)
    ref_id = record.get(f'{name}Id')
    if ref_id in (None, ''):
        ref_id = embedded.get('Code')

    target = embedded or find_record(lookup, ref_id) or {}
    return _text(ref_id), _text(target.get('Name')), target


def resolve_province(province_id, provinces, countries=()):
    province = find_record(provinces, province_id)
    if province is None:
        return _blank(PROVINCE_FIELDS)
    country_id, country_name, _ = _reference(province, 'Country', countries)
    return {'CountryId': country_id, 'CountryName': country_name}


def resolve_city(city_id, cities, provinces=(), countries=()):
    city = find_record(cities, city_id)
    if city is None:
        return _blank(CITY_FIELDS)

    province_id, province_name, province = _reference(city, 'Province', provinces)
    country_id, country_name, _ = _reference(city, 'Country', countries)
    if not country_id and province:
        # Cities that only know their province inherit the province's country.
        country_id, country_name, _ = _reference(province, 'Country', countries)

    return {
        'ProvinceId': province_id,
        'ProvinceName': province_name,
        'CountryId': country_id,
        'CountryName': country_name,
    }


def resolve_channel(channel_id, channels, sku_code=''):
    channel = find_record(channels, channel_id)
    if channel is None:
        return _blank(CHANNEL_FIELDS)

    initial = _text(channel.get('Initial')).strip()
    sku_parts = [part for part in (_text(sku_code).strip(), initial) if part]
    return {
        'InitialChannel': initial,
        'CategoryFromChannel': _text(channel.get('Category')),
        'SKUCodeEcommerce': '-'.join(sku_parts),
    }


def first_image(image_url):
    """``ImageURL`` is either a plain URL or a JSON-encoded list of URLs."""
    if not image_url:
        return ''
    try:
        parsed = json.loads(image_url)
    except (TypeError, ValueError):
        return str(image_url)
    if isinstance(parsed, list):
        return str(parsed[0]) if parsed else ''
    return str(image_url)


def resolve_product(sku_code, products):
    product = find_record(products, sku_code, key='SKUCode')
    if product is None:
        return _blank(PRODUCT_FIELDS)

    return {
        'ProductName': _text(product.get('Name')),
        'Variant': _text(_embedded(product, 'Variant').get('Name')),
        'ProductImage': first_image(product.get('ImageURL')),
        'SKUFull': _text(product.get('SKUFull')),
        'SKUParent': _text(product.get('SKUParent')),
        'SKUCodeChild': _text(product.get('SKUCodeChild')),
        'SellingPrice': _text(product.get('SellingPrice')),
    }


RESOLVERS = {
    'city': resolve_city,
    'province': resolve_province,
    'channel': resolve_channel,
    'product': resolve_product,
}
