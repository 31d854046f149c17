"""
Tests for the startup connection check.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from db import database


@pytest.mark.asyncio
async def test_connect_database_pings_server():
    client = MagicMock()
    client.admin.command = AsyncMock(return_value={"ok": 1})

    with patch.object(database, "get_motor_client", return_value=client):
        result = await database.connect_database()

    assert result is None
    client.admin.command.assert_awaited_once_with("ping")


@pytest.mark.asyncio
async def test_connect_database_logs_unreachable_server(caplog):
    client = MagicMock()
    client.admin.command = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))

    with patch.object(database, "get_motor_client", return_value=client):
        result = await database.connect_database()

    assert result is None
    assert any(r.getMessage() == "store.connect_failed" for r in caplog.records)
