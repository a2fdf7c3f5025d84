"""
Scheduler for periodic claims dataset reloads

Uses APScheduler. Disabled unless DATA_RELOAD_MINUTES > 0.
"""
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from app.config import get_settings
from app.exceptions import DataUnavailableError
from app.services.claims_repository import ClaimsRepository
from app.utils.logger import log

settings = get_settings()
scheduler = AsyncIOScheduler()


def reload_claims_data(repository: ClaimsRepository):
    """Reload the dataset; a failure keeps the current snapshot"""
    try:
        repository.reload()
    except DataUnavailableError:
        log.warning("Scheduled dataset reload failed, keeping previous snapshot")


def setup_scheduler(repository: ClaimsRepository, interval_minutes: int):
    """Register the reload job. One run at a time."""
    scheduler.add_job(
        reload_claims_data,
        trigger=IntervalTrigger(minutes=interval_minutes),
        args=[repository],
        id='claims_reload',
        name='Claims Dataset Reload',
        replace_existing=True,
        max_instances=1,
        coalesce=True
    )


def start_scheduler(repository: ClaimsRepository) -> bool:
    """Start the scheduler if reloads are enabled. Returns whether it started."""
    if settings.data_reload_minutes <= 0:
        log.info("Scheduled dataset reload disabled")
        return False

    setup_scheduler(repository, settings.data_reload_minutes)
    scheduler.start()
    log.info(f"Scheduler started (reload every {settings.data_reload_minutes} min)")
    return True


def stop_scheduler():
    """Stop the scheduler"""
    if scheduler.running:
        scheduler.shutdown()
        log.info("Scheduler stopped")


def get_scheduled_jobs() -> list:
    """
    Get list of all scheduled jobs

    Returns:
        List of job info dicts
    """
    jobs = []

    for job in scheduler.get_jobs():
        next_run = job.next_run_time

        jobs.append({
            'id': job.id,
            'name': job.name,
            'next_run': next_run.isoformat() if next_run else None,
            'trigger': str(job.trigger)
        })

    return jobs
