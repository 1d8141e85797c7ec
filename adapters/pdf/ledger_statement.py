"""
원장 명세서 PDF 렌더링

계산된 LedgerStatement를 A4 PDF로 출력 (reportlab platypus).
금액/잔액 문자열은 core.ledger.formatting만 사용.
"""

import io
import logging
from datetime import date
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.pdfgen import canvas
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from core.constants import Defaults
from core.ledger.formatting import (
    format_amount,
    format_balance,
    format_entry_amount,
    format_report_date,
)
from core.ledger.statement import LedgerStatement, StatementRow
from core.ledger.types import EntrySide

logger = logging.getLogger(__name__)

PAGE_MARGIN = 30

# 열 너비 비율 (Particulars 생략 시 Narration이 그만큼 넓어짐)
DATE_RATIO = 0.12
VOUCHER_RATIO = 0.15
PARTICULARS_RATIO = 0.20
DEBIT_RATIO = 0.12
CREDIT_RATIO = 0.12
BALANCE_RATIO = 0.14

OPENING_DATE_LABEL = "O. Bal"
GRAND_TOTALS_LABEL = "GRAND TOTALS"


class NumberedCanvas(canvas.Canvas):
    """전체 페이지 수를 알아야 하는 "Page N of M" 푸터용 캔버스

    페이지 상태를 모아 두었다가 save() 시점에 번호를 그린다.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._saved_page_states: list[dict] = []

    def showPage(self) -> None:
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self) -> None:
        total_pages = len(self._saved_page_states)
        for state in self._saved_page_states:
            self.__dict__.update(state)
            self._draw_page_number(total_pages)
            super().showPage()
        super().save()

    def _draw_page_number(self, total_pages: int) -> None:
        self.setFont("Helvetica", 8)
        self.drawRightString(
            A4[0] - PAGE_MARGIN,
            15,
            f"Page {self._pageNumber} of {total_pages}",
        )


def statement_file_name(ledger_name: str, exported_on: date | None = None) -> str:
    """다운로드 파일명: Ledger_Statement_<계정명>_<M-D-YYYY>.pdf"""
    exported_on = exported_on or date.today()
    stamp = f"{exported_on.month}-{exported_on.day}-{exported_on.year}"
    return f"Ledger_Statement_{ledger_name}_{stamp}.pdf"


def _row_cells(
    row: StatementRow,
    print_particulars: bool,
    locale: str,
    styles: dict[str, ParagraphStyle],
) -> list:
    if row.is_opening:
        date_text = OPENING_DATE_LABEL
        voucher_text = row.voucher_no
        particulars = ""
    else:
        date_text = format_report_date(row.date)
        voucher_text = f"{row.voucher_no} ({row.voucher_type[:1]})"
        particulars = row.opponent_ledger_name or "-"

    narration = f"<b>{escape(row.narration)}</b>"
    if row.line_narration:
        narration += f"<br/><font size=7 color='#555555'>{escape(row.line_narration)}</font>"

    cells = [date_text, voucher_text]
    if print_particulars:
        cells.append(Paragraph(f"<b>{escape(particulars)}</b>", styles["cell"]))
    cells += [
        Paragraph(narration, styles["cell"]),
        format_entry_amount(row.debit, locale),
        format_entry_amount(row.credit, locale),
        format_balance(row.balance, locale),
    ]
    return cells


def _styles() -> dict[str, ParagraphStyle]:
    sample = getSampleStyleSheet()
    return {
        "title": ParagraphStyle(
            "title", parent=sample["Title"], fontSize=16, alignment=TA_CENTER, spaceAfter=4
        ),
        "sub": ParagraphStyle(
            "sub", parent=sample["Normal"], fontSize=11, alignment=TA_CENTER, spaceAfter=2
        ),
        "period": ParagraphStyle(
            "period", parent=sample["Normal"], fontName="Helvetica-Bold", fontSize=9,
            alignment=TA_CENTER, textColor=colors.HexColor("#333333"), spaceAfter=15,
        ),
        "info": ParagraphStyle(
            "info", parent=sample["Normal"], fontSize=9, backColor=colors.HexColor("#f5f5f5"),
            borderColor=colors.HexColor("#dddddd"), borderWidth=0.5, borderPadding=5,
        ),
        "cell": ParagraphStyle("cell", parent=sample["Normal"], fontSize=8, leading=10),
    }


def build_ledger_statement_pdf(
    statement: LedgerStatement,
    *,
    ledger_name: str,
    from_date: date | str | None = None,
    to_date: date | str | None = None,
    print_particulars: bool = True,
    locale: str = Defaults.LOCALE,
    currency_code: str = Defaults.CURRENCY_CODE,
) -> bytes:
    """원장 명세서 PDF 생성

    Args:
        statement: 계산된 명세서 (rows[0]은 기초잔액 행)
        ledger_name: 계정명
        from_date: 조회 시작일 (없으면 '-')
        to_date: 조회 종료일 (없으면 '-')
        print_particulars: 상대 계정(Particulars) 열 출력 여부
        locale: 금액 표시 로케일
        currency_code: 금액 열 머리글에 붙는 통화 코드

    Returns:
        PDF 바이트
    """
    styles = _styles()
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=PAGE_MARGIN,
        rightMargin=PAGE_MARGIN,
        topMargin=PAGE_MARGIN,
        bottomMargin=PAGE_MARGIN + 10,
        title=f"Ledger Statement for {ledger_name}",
    )

    opening_row = statement.opening_row
    opening_side = EntrySide.CREDIT if opening_row.credit > 0 else EntrySide.DEBIT
    opening_amount = opening_row.credit if opening_side is EntrySide.CREDIT else opening_row.debit

    story = [
        Paragraph(escape(f"Ledger Statement for {ledger_name}".upper()), styles["title"]),
        Paragraph(f"Account: {escape(ledger_name)}", styles["sub"]),
        Paragraph(
            f"Reporting Period: {format_report_date(from_date)} to {format_report_date(to_date)}",
            styles["period"],
        ),
        Paragraph(
            f"Opening Balance: {format_amount(opening_amount, locale)} {opening_side.value}",
            styles["info"],
        ),
        Spacer(1, 10),
    ]

    # 열 구성
    width = doc.width
    narration_ratio = 0.15 if print_particulars else 0.35
    headers = ["Date", "Voucher No"]
    ratios = [DATE_RATIO, VOUCHER_RATIO]
    if print_particulars:
        headers.append("Particulars")
        ratios.append(PARTICULARS_RATIO)
    headers += [
        "Narration & Details",
        f"Debit ({currency_code})",
        f"Credit ({currency_code})",
        f"Balance ({currency_code})",
    ]
    ratios += [narration_ratio, DEBIT_RATIO, CREDIT_RATIO, BALANCE_RATIO]
    col_widths = [width * ratio for ratio in ratios]

    data = [headers]
    data += [_row_cells(row, print_particulars, locale, styles) for row in statement.rows]

    # 합계 행: 금액 열 앞까지 병합
    label_span = len(headers) - 3
    totals = [GRAND_TOTALS_LABEL] + [""] * (label_span - 1) + [
        format_amount(statement.total_debit, locale),
        format_amount(statement.total_credit, locale),
        format_balance(statement.closing_balance, locale),
    ]
    data.append(totals)

    table = Table(data, colWidths=col_widths, repeatRows=1)
    table.setStyle(TableStyle([
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#e0e0e0")),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 9),
        ("FONTSIZE", (0, 1), (-1, -2), 8),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("ALIGN", (-3, 0), (-1, -1), "RIGHT"),
        ("SPAN", (0, -1), (label_span - 1, -1)),
        ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ("FONTSIZE", (0, -1), (-1, -1), 10),
        ("LINEABOVE", (0, -1), (-1, -1), 2, colors.black),
        ("LEFTPADDING", (0, 0), (-1, -1), 3),
        ("RIGHTPADDING", (0, 0), (-1, -1), 3),
    ]))
    story.append(table)

    doc.build(story, canvasmaker=NumberedCanvas)
    pdf = buffer.getvalue()
    logger.debug(f"명세서 PDF 생성: {ledger_name}, rows={len(statement.rows)}, bytes={len(pdf)}")
    return pdf
