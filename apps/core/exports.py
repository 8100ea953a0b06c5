"""
Detail Exporter - printable tables of the detail rows currently loaded

Purely derived from rows already in memory: no network access, no mutation.
PDF is the primary format; CSV and Excel use the same fixed columns.
"""
import csv
import io
from datetime import date, datetime
from decimal import Decimal
from xml.sax.saxutils import escape

import openpyxl
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

CONTENT_TYPES = {
    'pdf': 'application/pdf',
    'csv': 'text/csv; charset=utf-8',
    'xlsx': 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
}


def cell_text(value):
    if value is None:
        return ''
    if isinstance(value, Decimal):
        return format(value, 'f')
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


class DetailExporter:
    """Export the rows of one parent record in a fixed column layout."""

    def __init__(self, detail, parent_id, rows):
        self.detail = detail
        self.parent_id = parent_id
        self.rows = list(rows)
        self.columns = list(detail.exported_columns)

    @property
    def title(self):
        return f"{self.detail.label} - {self.parent_id}"

    def filename(self, ext):
        return f"{self.detail.key}-{self.parent_id}.{ext}"

    def header(self):
        return [column.label for column in self.columns]

    def table_rows(self):
        return [[cell_text(column.value(row)) for column in self.columns] for row in self.rows]

    def export(self, fmt):
        """Return ``(filename, content_type, content)`` for ``fmt``."""
        exporters = {
            'pdf': self.export_pdf,
            'csv': self.export_csv,
            'xlsx': self.export_excel,
        }
        if fmt not in exporters:
            raise ValueError(f"Unsupported export format: {fmt}")
        return self.filename(fmt), CONTENT_TYPES[fmt], exporters[fmt]()

    def export_pdf(self):
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=landscape(A4),
            leftMargin=12 * mm, rightMargin=12 * mm,
            topMargin=15 * mm, bottomMargin=15 * mm,
            title=self.title,
        )
        styles = getSampleStyleSheet()
        cell_style = styles['BodyText'].clone('DetailCell', fontSize=7, leading=9)
        head_style = cell_style.clone('DetailHead', fontName='Helvetica-Bold', textColor=colors.white)

        data = [[Paragraph(escape(text), head_style) for text in self.header()]]
        for row in self.table_rows():
            data.append([Paragraph(escape(text), cell_style) for text in row])

        col_width = doc.width / max(len(self.columns), 1)
        table = Table(data, colWidths=[col_width] * len(self.columns), repeatRows=1)
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#212529')),
            ('GRID', (0, 0), (-1, -1), 0.25, colors.grey),
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.HexColor('#F1F3F5')]),
        ]))

        story = [Paragraph(escape(self.title), styles['Title']), Spacer(1, 4 * mm)]
        if self.rows:
            story.append(table)
        else:
            story.append(Paragraph("No details.", styles['BodyText']))

        doc.build(story, onFirstPage=self._footer, onLaterPages=self._footer)
        return buffer.getvalue()

    def _footer(self, canvas, doc):
        canvas.saveState()
        canvas.setFont('Helvetica', 7)
        canvas.drawRightString(doc.pagesize[0] - 12 * mm, 8 * mm, f"Page {doc.page}")
        canvas.drawString(12 * mm, 8 * mm, self.title)
        canvas.restoreState()

    def export_csv(self):
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(self.header())
        writer.writerows(self.table_rows())
        return output.getvalue().encode('utf-8')

    def export_excel(self):
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = self.detail.label[:31]

        for col, header in enumerate(self.header(), 1):
            cell = ws.cell(row=1, column=col, value=header)
            cell.font = openpyxl.styles.Font(bold=True)

        for row_num, row in enumerate(self.table_rows(), 2):
            for col, value in enumerate(row, 1):
                ws.cell(row=row_num, column=col, value=value)

        # Auto-width columns
        for col in ws.columns:
            max_length = max(len(str(cell.value or '')) for cell in col)
            ws.column_dimensions[col[0].column_letter].width = min(max_length + 2, 50)

        output = io.BytesIO()
        wb.save(output)
        return output.getvalue()
