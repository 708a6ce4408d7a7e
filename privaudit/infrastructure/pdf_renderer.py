"""PDF rendering of treasury reports with fpdf2."""

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from privaudit.domain.models import (
    TreasuryReport,
    TreasurySnapshot,
    VerificationResult,
)
from privaudit.domain.services.recommendations import format_usd

FONT = "Helvetica"
BRAND_RGB = (37, 99, 235)
SUCCESS_RGB = (22, 163, 74)
DANGER_RGB = (220, 38, 38)
MUTED_RGB = (107, 114, 128)
TOP_ASSET_LIMIT = 10

_REPLACEMENTS = {
    "–": "-",
    "—": "-",
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
    "•": "-",
    "…": "...",
}


def sanitize_text(text: object) -> str:
    """Return text the core latin-1 fonts can draw."""
    value = str(text or "")
    for source, target in _REPLACEMENTS.items():
        value = value.replace(source, target)
    return value.encode("latin-1", "ignore").decode("latin-1")


class _ReportPdf(FPDF):
    def __init__(self, title: str) -> None:
        super().__init__()
        self._title = title
        self.set_auto_page_break(auto=True, margin=18)

    def header(self) -> None:
        self.set_font(FONT, "B", 16)
        self.set_text_color(*BRAND_RGB)
        self.cell(
            0,
            10,
            sanitize_text(self._title),
            align="C",
            new_x=XPos.LMARGIN,
            new_y=YPos.NEXT,
        )
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def footer(self) -> None:
        self.set_y(-15)
        self.set_font(FONT, "I", 8)
        self.set_text_color(*MUTED_RGB)
        self.cell(
            0,
            10,
            f"Generated by PrivAudit - page {self.page_no()}",
            align="C",
        )


class FpdfReportRenderer:
    """Render ``TreasuryReport`` objects into PDF bytes."""

    def __init__(self, title: str = "DAO Treasury Audit Report") -> None:
        self._title = title

    def render(
        self,
        report: TreasuryReport,
        snapshot: TreasurySnapshot | None = None,
        verification: VerificationResult | None = None,
    ) -> bytes:
        pdf = _ReportPdf(self._title)
        pdf.add_page()

        self._badge(pdf, report, verification)
        self._section(pdf, "DAO Information")
        self._rows(
            pdf,
            [
                ("Name", report.dao_name),
                ("Address", report.dao_address),
                ("Report date", report.report_date),
                ("Proof hash", report.proof_hash or "n/a"),
            ],
        )

        metrics = report.metrics
        ratio = (
            f"{metrics.solvency_ratio:.2f}"
            if metrics.solvency_ratio is not None
            else "Undefined (no liabilities)"
        )
        self._section(pdf, "Key Metrics")
        self._rows(
            pdf,
            [
                ("Total assets", format_usd(metrics.total_assets)),
                ("Total liabilities", format_usd(metrics.total_liabilities)),
                ("Net worth", format_usd(metrics.net_worth)),
                ("Solvency ratio", ratio),
                ("Runway", f"{metrics.runway_months} months"),
            ],
        )

        self._section(pdf, "Summary")
        pdf.set_font(FONT, "", 10)
        pdf.multi_cell(
            0,
            6,
            sanitize_text(report.summary),
            new_x=XPos.LMARGIN,
            new_y=YPos.NEXT,
        )

        if snapshot is not None and snapshot.assets:
            self._section(pdf, "Top Assets")
            self._asset_table(pdf, snapshot)

        risk = metrics.risk_metrics
        self._section(pdf, "Risk Assessment")
        self._rows(
            pdf,
            [
                ("Overall", report.risk_assessment),
                ("Concentration", risk.concentration_risk),
                ("Volatility", risk.volatility_risk),
                ("Liquidity", risk.liquidity_risk),
                ("Counterparty", risk.counterparty_risk),
            ],
        )

        self._section(pdf, "Recommendations")
        pdf.set_font(FONT, "", 10)
        for index, item in enumerate(report.recommendations, start=1):
            pdf.multi_cell(
                0,
                6,
                sanitize_text(f"{index}. {item}"),
                new_x=XPos.LMARGIN,
                new_y=YPos.NEXT,
            )
            pdf.ln(1)

        return bytes(pdf.output())

    @staticmethod
    def _badge(
        pdf: FPDF,
        report: TreasuryReport,
        verification: VerificationResult | None,
    ) -> None:
        verified = (
            verification.is_valid if verification else report.proof_verified
        )
        pdf.set_font(FONT, "B", 11)
        pdf.set_text_color(255, 255, 255)
        pdf.set_fill_color(*(SUCCESS_RGB if verified else DANGER_RGB))
        label = "PROOF VERIFIED" if verified else "PROOF NOT VERIFIED"
        solvency = "SOLVENT" if report.is_solvent else "INSOLVENT"
        pdf.cell(
            0,
            9,
            f"{label}  |  {solvency}",
            align="C",
            fill=True,
            new_x=XPos.LMARGIN,
            new_y=YPos.NEXT,
        )
        pdf.set_text_color(0, 0, 0)
        pdf.ln(3)

    @staticmethod
    def _section(pdf: FPDF, title: str) -> None:
        pdf.ln(2)
        pdf.set_font(FONT, "B", 12)
        pdf.set_text_color(*BRAND_RGB)
        pdf.cell(0, 8, title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_text_color(0, 0, 0)

    @staticmethod
    def _rows(pdf: FPDF, rows: list[tuple[str, str]]) -> None:
        for label, value in rows:
            pdf.set_font(FONT, "B", 10)
            pdf.cell(45, 6, sanitize_text(label))
            pdf.set_font(FONT, "", 10)
            pdf.multi_cell(
                0,
                6,
                sanitize_text(value),
                new_x=XPos.LMARGIN,
                new_y=YPos.NEXT,
            )

    @staticmethod
    def _asset_table(pdf: FPDF, snapshot: TreasurySnapshot) -> None:
        widths = (30, 60, 50, 40)
        pdf.set_font(FONT, "B", 10)
        pdf.set_fill_color(243, 244, 246)
        for width, heading in zip(
            widths,
            ("Symbol", "Balance", "Price (USD)", "Value (USD)"),
        ):
            pdf.cell(width, 7, heading, border=1, fill=True)
        pdf.ln()
        pdf.set_font(FONT, "", 10)
        for asset in snapshot.top_assets(TOP_ASSET_LIMIT):
            values = (
                asset.symbol,
                f"{asset.balance_formatted:,.4f}",
                format_usd(asset.price_usd),
                format_usd(asset.value_usd),
            )
            for width, value in zip(widths, values):
                pdf.cell(width, 7, sanitize_text(value), border=1)
            pdf.ln()


__all__ = ["FpdfReportRenderer", "sanitize_text"]
