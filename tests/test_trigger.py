"""
tests/test_trigger.py

Tests for the Firestore onCreate bridge in dispatcher/main.py.
"""

from unittest.mock import AsyncMock, patch

import pytest

from tests.fixtures import TEST_ALERT_ID, build_alert_data


@pytest.mark.asyncio
async def test_run_dispatch_forwards_document() -> None:
    data = build_alert_data()
    with patch(
        "dispatcher.main.dispatch_alert", new_callable=AsyncMock
    ) as mock_dispatch:
        from dispatcher.main import _run_dispatch

        await _run_dispatch(TEST_ALERT_ID, data)

        mock_dispatch.assert_awaited_once_with(TEST_ALERT_ID, data)


@pytest.mark.asyncio
async def test_run_dispatch_reraises_fatal_errors() -> None:
    """Infrastructure failures must reach the platform so it marks the run failed."""
    with patch(
        "dispatcher.main.dispatch_alert",
        new_callable=AsyncMock,
        side_effect=RuntimeError("write-back failed"),
    ):
        from dispatcher.main import _run_dispatch

        with pytest.raises(RuntimeError, match="write-back failed"):
            await _run_dispatch(TEST_ALERT_ID, build_alert_data())
