"""
PDF 어댑터

원장 명세서 PDF 렌더링 (reportlab).
"""

from adapters.pdf.ledger_statement import build_ledger_statement_pdf, statement_file_name

__all__ = [
    "build_ledger_statement_pdf",
    "statement_file_name",
]
