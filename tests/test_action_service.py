"""
Action acknowledgement tests.

Delays are shrunk to milliseconds; each test drives its own event loop.
"""
import asyncio
import time

import pytest

from app.exceptions import ActionTimeoutError, MalformedActionRequestError
from app.services.action_service import ActionService


def _fast_service(**kwargs):
    params = dict(delay_min=0.01, delay_max=0.02, timeout=1.0)
    params.update(kwargs)
    return ActionService(**params)


def test_acknowledges_with_echoed_parameters():
    service = _fast_service()
    result = asyncio.run(service.acknowledge("expand-teams", {"source": "dss-interface"}))

    assert result["success"] is True
    assert result["actionId"] == "expand-teams"
    assert result["parameters"] == {"source": "dss-interface"}
    assert "expand-teams" in result["message"]
    assert result["timestamp"].endswith("Z")
    assert service.pending_count == 0


@pytest.mark.parametrize("action_id", ["", "   "])
def test_blank_action_id_rejected(action_id):
    with pytest.raises(MalformedActionRequestError):
        asyncio.run(_fast_service().acknowledge(action_id, {}))


@pytest.mark.parametrize("parameters", [None, [], "x", 3])
def test_non_object_parameters_rejected(parameters):
    with pytest.raises(MalformedActionRequestError):
        asyncio.run(_fast_service().acknowledge("a", parameters))


def test_timeout_raises_and_clears_pending():
    service = ActionService(delay_min=0.5, delay_max=0.5, timeout=0.05)
    with pytest.raises(ActionTimeoutError):
        asyncio.run(service.acknowledge("slow", {}))
    assert service.pending_count == 0


def test_concurrent_actions_do_not_serialize():
    service = ActionService(delay_min=0.2, delay_max=0.2, timeout=5.0)

    async def run_many():
        return await asyncio.gather(*(service.acknowledge(f"a{i}", {}) for i in range(5)))

    started = time.monotonic()
    results = asyncio.run(run_many())
    elapsed = time.monotonic() - started

    assert [r["actionId"] for r in results] == [f"a{i}" for i in range(5)]
    assert elapsed < 0.9


def test_cancel_all_cancels_pending():
    service = ActionService(delay_min=5.0, delay_max=5.0, timeout=None)

    async def scenario():
        waiter = asyncio.create_task(service.acknowledge("long", {}))
        await asyncio.sleep(0.05)
        assert service.pending_count == 1
        cancelled = await service.cancel_all()
        with pytest.raises(asyncio.CancelledError):
            await waiter
        return cancelled

    assert asyncio.run(scenario()) == 1
    assert service.pending_count == 0


def test_invalid_delay_range():
    with pytest.raises(ValueError):
        ActionService(delay_min=2.0, delay_max=1.0)
