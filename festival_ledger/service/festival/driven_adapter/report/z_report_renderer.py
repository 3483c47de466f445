"""
Z-report plain text export

    Z-REPORT — 2025-10-16

    By Show:
    IMP25-S01  003  EUR 75.00

    TOTAL: EUR 75.00

Deterministic for a given DailyReport; the file name is ZREPORT_{date}.txt.
"""

from festival_ledger.service.festival.domain.value_object.ledger_report import DailyReport


def render_z_report(report: DailyReport) -> str:
    lines = [f'Z-REPORT — {report.date}', '', 'By Show:']
    lines += [
        f'{line.show_id}  {line.count:03d}  EUR {line.amount:.2f}' for line in report.lines
    ]
    lines += ['', f'TOTAL: EUR {report.total:.2f}']
    return '\n'.join(lines)


def z_report_filename(date: str) -> str:
    return f'ZREPORT_{date}.txt'
