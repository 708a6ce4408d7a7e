"""Streamlit dashboard entry point."""

import asyncio
from collections.abc import Sequence
from decimal import Decimal

import altair as alt
import streamlit as st

from privaudit.domain.errors import PrivAuditError
from privaudit.domain.models import (
    AssetDiversification,
    DataSource,
    TreasuryReportResult,
)
from privaudit.domain.services.recommendations import format_usd
from privaudit.infrastructure.container import (
    build_demo_report_use_case,
    build_pdf_use_case,
    build_treasury_report_use_case,
    load_demo_snapshot,
)

MODE_DEMO = "Demo treasury"
MODE_SIMPLE = "Public RPC"
MODE_FALLBACK = "Public RPC with demo fallback"
MODE_REAL = "Etherscan + RPC"
MODES = (MODE_DEMO, MODE_SIMPLE, MODE_FALLBACK, MODE_REAL)
MODE_SOURCES = {
    MODE_SIMPLE: DataSource.SIMPLE,
    MODE_FALLBACK: DataSource.FALLBACK_DEMO,
    MODE_REAL: DataSource.REAL,
}
PRESET_CUSTOM = "Custom address"
DAO_PRESETS = {
    "Uniswap DAO": "0x1f9840a85d5af5bf1d1762f925bdaddc4201f984",
    "MakerDAO": "0x6b175474e89094c44da98b954eedeac495271d0f",
    "Aave DAO": "0x7d2768de32b0b80b7a3454c06bdac94a69ddc7a9",
    "Chainlink DAO": "0x514910771af9ca656af840dff83e8264ecf986ca",
}
DIVERSIFICATION_LABELS = (
    ("stablecoins", "Stablecoins"),
    ("crypto", "Crypto"),
    ("nfts", "NFTs"),
    ("lp_tokens", "LP tokens"),
    ("other", "Other"),
)


def _fetch_report(
    mode: str,
    dao_address: str,
    etherscan_api_key: str | None,
    ai_api_key: str | None,
) -> TreasuryReportResult:
    """Run the report pipeline for the selected mode."""
    if mode == MODE_DEMO:
        pipeline = build_demo_report_use_case(ai_api_key=ai_api_key)
        return asyncio.run(pipeline.analyze(load_demo_snapshot()))
    pipeline = build_treasury_report_use_case(
        MODE_SOURCES[mode],
        etherscan_api_key=etherscan_api_key,
        ai_api_key=ai_api_key,
    )
    return asyncio.run(pipeline.execute(dao_address))


@st.cache_data(show_spinner=False, ttl=300)
def _load_report(
    mode: str,
    dao_address: str,
    etherscan_api_key: str | None,
    ai_api_key: str | None,
) -> TreasuryReportResult:
    """Cached wrapper around _fetch_report for Streamlit sessions."""
    return _fetch_report(mode, dao_address, etherscan_api_key, ai_api_key)


def _render_pdf(result: TreasuryReportResult) -> bytes:
    return build_pdf_use_case().execute(
        result.report,
        result.snapshot,
        result.verification,
    )


def _format_ratio(value: Decimal | None) -> str:
    if value is None:
        return "Undefined"
    return f"{value:.2f}"


def _prepare_donut_chart_data(
    diversification: AssetDiversification,
    total_assets: Decimal,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data, skipping empty categories.

    Args:
        diversification: Category percentages.
        total_assets: Total asset value used for the USD labels.

    Returns:
        Altair-ready chart rows.
    """
    data: list[dict[str, str | float]] = []
    for field_name, label in DIVERSIFICATION_LABELS:
        share = getattr(diversification, field_name)
        if share <= 0:
            continue
        amount = total_assets * share / Decimal("100")
        data.append(
            {
                "category": label,
                "amount": float(amount),
                "amount_label": format_usd(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _render_diversification_chart(
    result: TreasuryReportResult,
    chart_size: int = 320,
    palette: Sequence[str] | None = None,
) -> None:
    """Render a donut chart of the asset diversification."""
    metrics = result.report.metrics
    data = _prepare_donut_chart_data(
        metrics.asset_diversification,
        metrics.total_assets,
    )
    st.subheader("Asset Diversification")
    if not data:
        st.info("No priced assets to chart.")
        return

    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                range=list(
                    palette
                    or ["#1b9aaa", "#f4a261", "#457b9d", "#e76f51", "#6c8ead"]
                )
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )
    st.altair_chart(chart, width="stretch")


def _render_top_assets(result: TreasuryReportResult, limit: int = 10) -> None:
    st.subheader("Top Assets")
    assets = result.snapshot.top_assets(limit)
    if not assets:
        st.info("No assets found for this address.")
        return
    data = [
        {
            "Symbol": asset.symbol,
            "Name": asset.name,
            "Balance": f"{asset.balance_formatted:,.4f}",
            "Price": format_usd(asset.price_usd),
            "Value": format_usd(asset.value_usd),
        }
        for asset in assets
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_proof(result: TreasuryReportResult) -> None:
    st.subheader("Solvency Proof")
    verification = result.verification
    if verification.is_valid:
        st.success(
            f"Commitment verified in {verification.verification_time}ms"
        )
    else:
        st.error(f"Commitment not verified: {verification.error}")
    st.caption(f"Proof hash: {result.proof_artifact.proof_hash}")
    with st.expander("Proof artifact"):
        st.json(result.proof_artifact.to_dict())


def _render_recommendations(result: TreasuryReportResult) -> None:
    report = result.report
    st.subheader("Recommendations")
    st.caption(
        f"Overall risk: {report.risk_assessment} "
        f"(source: {report.recommendation_source})"
    )
    st.markdown(
        "\n".join(
            f"{index}. {item}"
            for index, item in enumerate(report.recommendations, start=1)
        )
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="PrivAudit", layout="wide")
    st.title("PrivAudit Treasury Dashboard")

    mode = st.sidebar.selectbox("Data source", MODES)
    preset = st.sidebar.selectbox(
        "Popular DAOs",
        (PRESET_CUSTOM, *DAO_PRESETS),
    )
    if preset == PRESET_CUSTOM:
        dao_address = st.sidebar.text_input(
            "DAO address",
            placeholder="0x...",
        ).strip()
    else:
        dao_address = DAO_PRESETS[preset]
        st.sidebar.caption(dao_address)
    etherscan_api_key = None
    if mode == MODE_REAL:
        etherscan_api_key = (
            st.sidebar.text_input("Etherscan API key", type="password")
            or None
        )
    ai_api_key = (
        st.sidebar.text_input("AI API key (optional)", type="password")
        or None
    )

    if mode != MODE_DEMO and not dao_address:
        st.info("Enter a DAO treasury address to generate a report.")
        return

    try:
        result = _load_report(mode, dao_address, etherscan_api_key, ai_api_key)
    except PrivAuditError as exc:
        st.error(str(exc))
        return

    report = result.report
    metrics = report.metrics
    data_source = result.metadata.get(
        "dataSource",
        result.snapshot.data_source,
    )
    st.caption(f"{report.dao_name} - data source: {data_source}")
    if "fallbackReason" in result.metadata:
        st.warning(
            "Live data was unavailable; showing demo data. "
            f"Reason: {result.metadata['fallbackReason']}"
        )

    assets_col, liabilities_col, net_worth_col, ratio_col = st.columns(4)
    assets_col.metric("Total Assets", format_usd(metrics.total_assets))
    liabilities_col.metric(
        "Total Liabilities",
        format_usd(metrics.total_liabilities),
    )
    net_worth_col.metric("Net Worth", format_usd(metrics.net_worth))
    ratio_col.metric(
        "Solvency Ratio",
        _format_ratio(metrics.solvency_ratio),
        f"Runway {metrics.runway_months} months",
        delta_color="off",
    )
    st.markdown(report.summary)

    chart_col, table_col = st.columns(2)
    with chart_col:
        _render_diversification_chart(result)
    with table_col:
        _render_top_assets(result)

    _render_proof(result)
    _render_recommendations(result)

    st.download_button(
        "Download PDF report",
        data=_render_pdf(result),
        file_name=f"treasury-report-{report.dao_address[:8]}.pdf",
        mime="application/pdf",
    )


if __name__ == "__main__":  # pragma: no cover
    main()
