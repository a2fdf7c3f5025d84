"""
Action Service

Stateless acknowledgement of dashboard actions. Each request completes after
a short randomized delay that runs as its own asyncio task, so a slow
acknowledgement never blocks other requests. Requests that outlive the
configured timeout are cancelled; pending ones are cancelled on shutdown.
Nothing is persisted.
"""
import asyncio
import random
import uuid
from typing import Any, Dict, Optional

from app.exceptions import ActionTimeoutError, MalformedActionRequestError
from app.utils.helpers import utc_now_iso
from app.utils.logger import log


class ActionService:

    def __init__(
        self,
        delay_min: float = 0.5,
        delay_max: float = 2.5,
        timeout: Optional[float] = 10.0,
        rng: Optional[random.Random] = None
    ):
        if delay_min < 0 or delay_max < delay_min:
            raise ValueError(f"Invalid action delay range: {delay_min}-{delay_max}")
        self.delay_min = delay_min
        self.delay_max = delay_max
        self.timeout = timeout
        self.rng = rng or random.Random()
        self._pending: Dict[str, asyncio.Task] = {}

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    @staticmethod
    def validate(action_id: str, parameters: Any) -> None:
        if not action_id or not action_id.strip():
            raise MalformedActionRequestError("actionId must not be empty")
        if not isinstance(parameters, dict):
            raise MalformedActionRequestError("parameters must be a JSON object")

    async def _complete(self, action_id: str, parameters: Dict[str, Any], delay: float) -> Dict[str, Any]:
        await asyncio.sleep(delay)
        log.info(f"Action acknowledged: {action_id} after {delay:.2f}s")
        return {
            "success": True,
            "actionId": action_id,
            "message": f"Action '{action_id}' has been initiated successfully",
            "timestamp": utc_now_iso(),
            "parameters": parameters,
        }

    async def acknowledge(self, action_id: str, parameters: Any) -> Dict[str, Any]:
        """
        Validate and acknowledge an action request.

        Raises:
            MalformedActionRequestError: blank action id or non-object parameters
            ActionTimeoutError: the acknowledgement did not complete in time
        """
        self.validate(action_id, parameters)

        delay = self.rng.uniform(self.delay_min, self.delay_max)
        token = uuid.uuid4().hex
        task = asyncio.create_task(self._complete(action_id, parameters, delay))
        self._pending[token] = task

        try:
            return await asyncio.wait_for(task, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            log.warning(f"Action {action_id} timed out after {self.timeout}s")
            raise ActionTimeoutError(
                f"Action '{action_id}' timed out",
                {"timeout_seconds": self.timeout}
            ) from e
        finally:
            self._pending.pop(token, None)

    async def cancel_all(self) -> int:
        """Cancel every in-flight acknowledgement. Returns how many were cancelled."""
        tasks = list(self._pending.values())
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
            log.info(f"Cancelled {len(tasks)} pending action(s)")
        self._pending.clear()
        return len(tasks)
