"""CLI adapter running the whole pipeline on the demo treasury.

Writes ``demo-report.json`` and ``demo-report.pdf`` to the artifacts
directory and publishes the report to any configured storage gateway.
"""

import asyncio
from dataclasses import replace

import httpx

from privaudit.domain.models import TreasuryReportResult
from privaudit.infrastructure.artifact_store import (
    DEMO_PDF_NAME,
    DEMO_REPORT_NAME,
)
from privaudit.infrastructure.container import (
    build_artifact_store,
    build_demo_report_use_case,
    build_pdf_use_case,
    build_publishers,
    load_demo_snapshot,
)
from privaudit.infrastructure.logging.logger import get_app_logger


async def _run(logger) -> TreasuryReportResult:
    snapshot = load_demo_snapshot()
    logger.info(
        f"Demo treasury: {len(snapshot.assets)} assets, "
        f"{len(snapshot.liabilities)} liabilities"
    )
    result = await build_demo_report_use_case().analyze(snapshot)

    storage: dict[str, str] = {}
    for name, publisher in build_publishers().items():
        try:
            storage[name] = await publisher.publish(result.to_dict())
        except (httpx.HTTPError, KeyError, TypeError) as exc:
            logger.warning(f"Publishing to {name} failed: {exc}")
    if not storage:
        return result
    return replace(result, metadata={**result.metadata, "storage": storage})


def main() -> None:
    """Run the demo pipeline and save its outputs."""
    logger = get_app_logger()
    result = asyncio.run(_run(logger))

    store = build_artifact_store()
    json_path = store.save(DEMO_REPORT_NAME, result.to_dict())
    pdf = build_pdf_use_case().execute(
        result.report,
        result.snapshot,
        result.verification,
    )
    pdf_path = store.save_bytes(DEMO_PDF_NAME, pdf)

    report = result.report
    metrics = report.metrics
    ratio = (
        f"{metrics.solvency_ratio:.1f}:1"
        if metrics.solvency_ratio is not None
        else "undefined"
    )
    print(f"DAO: {report.dao_name}")
    print(f"Total assets: ${metrics.total_assets:,.2f}")
    print(f"Net worth: ${metrics.net_worth:,.2f}")
    print(f"Solvency ratio: {ratio}")
    print(f"Runway: {metrics.runway_months} months")
    print(f"Proof verified: {'yes' if report.proof_verified else 'no'}")
    for index, item in enumerate(report.recommendations, start=1):
        print(f"{index}. {item}")
    for name, content_id in result.metadata.get("storage", {}).items():
        print(f"Stored on {name}: {content_id}")
    print(f"JSON report saved: {json_path}")
    print(f"PDF report saved: {pdf_path}")


if __name__ == "__main__":  # pragma: no cover
    main()
