import csv
import io
from decimal import Decimal

import openpyxl
import pytest

from apps.core.exports import DetailExporter, cell_text
from apps.core.resources import get_resource
from tests.factories import ProformaInvoiceDetailFactory


@pytest.fixture
def exporter():
    detail = get_resource('proforma-invoices').detail
    rows = [ProformaInvoiceDetailFactory(Id=101), ProformaInvoiceDetailFactory(Id=102, SKUCode='TWL-002')]
    return DetailExporter(detail, 17, rows)


def test_cell_text():
    assert cell_text(None) == ''
    assert cell_text(Decimal('2.50')) == '2.50'
    assert cell_text(120) == '120'


class TestDetailExporter:
    def test_pdf(self, exporter):
        filename, content_type, content = exporter.export('pdf')
        assert filename == 'proforma-invoice-details-17.pdf'
        assert content_type == 'application/pdf'
        assert content.startswith(b'%PDF')

    def test_pdf_without_rows(self):
        detail = get_resource('proforma-invoices').detail
        _, _, content = DetailExporter(detail, 17, []).export('pdf')
        assert content.startswith(b'%PDF')

    def test_csv_uses_the_detail_columns(self, exporter):
        filename, _, content = exporter.export('csv')
        assert filename == 'proforma-invoice-details-17.csv'

        rows = list(csv.reader(io.StringIO(content.decode('utf-8'))))
        assert rows[0][:3] == ['SKU', 'Product', 'Variant']
        assert [row[0] for row in rows[1:]] == ['TWL-001', 'TWL-002']

    def test_excel_header_is_bold(self, exporter):
        _, content_type, content = exporter.export('xlsx')
        assert content_type.startswith('application/vnd.openxmlformats')

        ws = openpyxl.load_workbook(io.BytesIO(content)).active
        assert ws.cell(row=1, column=1).value == 'SKU'
        assert ws.cell(row=1, column=1).font.bold
        assert ws.cell(row=3, column=1).value == 'TWL-002'

    def test_unknown_format(self, exporter):
        with pytest.raises(ValueError):
            exporter.export('docx')
