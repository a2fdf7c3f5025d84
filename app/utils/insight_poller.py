"""
Insight poller

Client-side helper that refreshes the insight report on a fixed period, the
way the DSS dashboard does. A tick is skipped while the previous refresh is
still outstanding.
"""
import argparse
import asyncio
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

from app.config import get_settings
from app.utils.logger import log

ReportHandler = Callable[[Dict[str, Any]], Awaitable[None]]


class InsightPoller:

    def __init__(
        self,
        client: httpx.AsyncClient,
        on_report: ReportHandler,
        interval: Optional[float] = None,
        path: str = "/api/dss/insights"
    ):
        self.client = client
        self.on_report = on_report
        self.interval = interval if interval is not None else get_settings().insights_poll_seconds
        self.path = path
        self.last_report: Optional[Dict[str, Any]] = None
        self.skipped = 0
        self._refreshing = False
        self._task: Optional[asyncio.Task] = None
        self._inflight: Optional[asyncio.Task] = None

    @property
    def is_refreshing(self) -> bool:
        return self._refreshing

    async def refresh(self) -> bool:
        """
        Fetch one report. Returns False without fetching when a refresh is
        already in progress.
        """
        if self._refreshing:
            self.skipped += 1
            return False

        self._refreshing = True
        try:
            response = await self.client.get(self.path)
            response.raise_for_status()
            self.last_report = response.json()
            await self.on_report(self.last_report)
            return True
        except (httpx.HTTPError, ValueError) as e:
            log.error(f"Insight refresh failed: {str(e)}")
            return False
        except Exception:
            log.exception("Insight report handler raised")
            return False
        finally:
            self._refreshing = False

    async def _run(self):
        while True:
            await asyncio.sleep(self.interval)
            if self._refreshing:
                self.skipped += 1
                continue
            self._inflight = asyncio.create_task(self.refresh())

    def start(self):
        """Start periodic refresh on the running loop"""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._run())

    async def stop(self):
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None


async def _log_summary(report: Dict[str, Any]):
    metrics = report.get("metrics", {})
    log.info(
        f"Insights: confidence {metrics.get('aiConfidence')}%, "
        f"{metrics.get('criticalIssues')} critical, "
        f"{len(report.get('alerts', []))} alerts, "
        f"updated {metrics.get('lastUpdated')}"
    )


async def watch(base_url: str, interval: Optional[float] = None, once: bool = False):
    """Poll a running DSS service and log each report"""
    async with httpx.AsyncClient(base_url=base_url, timeout=30.0) as client:
        poller = InsightPoller(client, _log_summary, interval=interval)
        await poller.refresh()
        if once:
            return
        poller.start()
        try:
            await asyncio.Event().wait()
        finally:
            await poller.stop()


def main():
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Watch DSS insight reports")
    parser.add_argument(
        "--url",
        default=f"http://localhost:{settings.port}",
        help="Base URL of the DSS service"
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help=f"Seconds between refreshes (default: {settings.insights_poll_seconds})"
    )
    parser.add_argument("--once", action="store_true", help="Fetch a single report and exit")
    args = parser.parse_args()

    try:
        asyncio.run(watch(args.url, args.interval, args.once))
    except KeyboardInterrupt:
        log.info("Insight watcher stopped")


if __name__ == "__main__":
    main()
