from apps.core.cascade import (
    coerce_code,
    find_record,
    first_image,
    resolve_channel,
    resolve_city,
    resolve_product,
    resolve_province,
    same_code,
)
from tests.factories import ChannelFactory, CityFactory, CountryFactory, ProductFactory, ProvinceFactory


class TestResolveCity:
    def test_fills_province_and_country_from_lookups(self):
        patch = resolve_city('3', [CityFactory()], [ProvinceFactory()], [CountryFactory()])
        assert patch == {
            'ProvinceId': '2',
            'ProvinceName': 'DKI Jakarta',
            'CountryId': '1',
            'CountryName': 'Indonesia',
        }

    def test_embedded_objects_win(self):
        city = CityFactory(
            Province={'Code': 2, 'Name': 'Jakarta Raya'},
            Country={'Code': 1, 'Name': 'Republic of Indonesia'},
        )
        patch = resolve_city(3, [city], [ProvinceFactory()], [CountryFactory()])
        assert patch['ProvinceName'] == 'Jakarta Raya'
        assert patch['CountryName'] == 'Republic of Indonesia'

    def test_country_inherited_from_province(self):
        city = CityFactory(CountryId=None)
        patch = resolve_city(3, [city], [ProvinceFactory()], [CountryFactory()])
        assert patch['CountryId'] == '1'
        assert patch['CountryName'] == 'Indonesia'

    def test_unknown_city_blanks_every_field(self):
        patch = resolve_city(99, [CityFactory()], [ProvinceFactory()], [CountryFactory()])
        assert patch == {'ProvinceId': '', 'ProvinceName': '', 'CountryId': '', 'CountryName': ''}


def test_resolve_province():
    assert resolve_province(2, [ProvinceFactory()], [CountryFactory()]) == {
        'CountryId': '1', 'CountryName': 'Indonesia',
    }
    assert resolve_province(None, [ProvinceFactory()]) == {'CountryId': '', 'CountryName': ''}


class TestResolveChannel:
    def test_sku_code_ecommerce_joins_sku_and_initial(self):
        patch = resolve_channel(9, [ChannelFactory()], 'TWL-001')
        assert patch == {
            'InitialChannel': 'SHP',
            'CategoryFromChannel': 'Parent',
            'SKUCodeEcommerce': 'TWL-001-SHP',
        }

    def test_missing_sku_code_leaves_initial_only(self):
        assert resolve_channel('9', [ChannelFactory()])['SKUCodeEcommerce'] == 'SHP'

    def test_unknown_channel(self):
        assert resolve_channel(1, [ChannelFactory()], 'TWL-001') == {
            'InitialChannel': '', 'CategoryFromChannel': '', 'SKUCodeEcommerce': '',
        }


class TestResolveProduct:
    def test_matches_on_sku_code(self):
        patch = resolve_product('TWL-001', [ProductFactory()])
        assert patch['ProductName'] == 'Cotton Bath Towel'
        assert patch['Variant'] == 'White / Large'
        assert patch['ProductImage'] == 'https://cdn.example.com/towel-1.jpg'
        assert patch['SKUFull'] == 'TWL-001-WHT-L'
        assert patch['SellingPrice'] == '89000'

    def test_unknown_sku(self):
        patch = resolve_product('NOPE', [ProductFactory()])
        assert set(patch.values()) == {''}


def test_first_image():
    assert first_image('["a.jpg", "b.jpg"]') == 'a.jpg'
    assert first_image('https://cdn.example.com/one.jpg') == 'https://cdn.example.com/one.jpg'
    assert first_image('[]') == ''
    assert first_image(None) == ''


def test_same_code_compares_ints_and_strings():
    assert same_code(3, '3')
    assert same_code(' 3 ', 3)
    assert not same_code(None, None)
    assert not same_code('', '')
    assert find_record([{'Code': 1}, {'Code': 2}], '2') == {'Code': 2}
    assert find_record(None, 1) is None


def test_coerce_code_keeps_zero_padded_codes():
    assert coerce_code('17') == 17
    assert coerce_code(' 17 ') == 17
    assert coerce_code('007') == '007'
    assert coerce_code('0') == 0
    assert coerce_code('PCS') == 'PCS'
    assert same_code('007', '007')
    assert not same_code('007', 7)
