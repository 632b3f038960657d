from __future__ import annotations

from unittest.mock import patch

import pytest

from product_catalog.entrypoints.http import server


def test_main_runs_uvicorn_with_configured_address(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    with patch.object(server.uvicorn, "run") as mock_run, patch.object(
        server.logging, "basicConfig"
    ) as mock_basic_config:
        server.main()

    mock_basic_config.assert_called_once_with(level="WARNING", format=server.LOG_FORMAT)
    mock_run.assert_called_once_with(
        "product_catalog.entrypoints.http.app:app",
        host="127.0.0.1",
        port=9000,
        lifespan="on",
        log_level="warning",
    )
