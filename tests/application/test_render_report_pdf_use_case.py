"""Tests for the RenderReportPdfUseCase."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from privaudit.application.use_cases.render_report_pdf import (
    RenderReportPdfUseCase,
)
from privaudit.domain.errors import ReportGenerationError


def test_execute_returns_renderer_bytes() -> None:
    """The renderer output should be returned unchanged."""
    renderer = MagicMock()
    renderer.render.return_value = b"%PDF-1.3 test"
    report = SimpleNamespace(dao_address="0xabc")

    content = RenderReportPdfUseCase(renderer, logger=MagicMock()).execute(
        report
    )

    assert content == b"%PDF-1.3 test"
    renderer.render.assert_called_once_with(report, None, None)


def test_renderer_failure_is_wrapped() -> None:
    """Unexpected renderer errors become ReportGenerationError."""
    renderer = MagicMock()
    renderer.render.side_effect = RuntimeError("font missing")
    logger = MagicMock()

    with pytest.raises(ReportGenerationError, match="font missing"):
        RenderReportPdfUseCase(renderer, logger=logger).execute(
            SimpleNamespace(dao_address="0xabc")
        )

    logger.error.assert_called_once()
