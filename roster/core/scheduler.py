"""Background job scheduler for team counter reconciliation."""
import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from sqlmodel import Session

from roster.core.config import settings
from roster.core.database import engine
from roster.ledger.counters import recount_all_teams

logger = logging.getLogger(__name__)

scheduler = AsyncIOScheduler()


def recount_job():
    """Recount every team's gender counters from its active members."""
    try:
        with Session(engine) as session:
            processed = recount_all_teams(session)
            logger.info(f"Counter reconciliation completed for {processed} teams")
    except Exception as e:
        logger.error(f"Counter reconciliation failed: {e}")


def start_scheduler() -> bool:
    """Start the background scheduler if reconciliation is enabled."""
    if settings.recount_interval_minutes <= 0 or not settings.gender_counting:
        logger.info("Counter reconciliation disabled")
        return False

    scheduler.add_job(
        recount_job,
        trigger=IntervalTrigger(minutes=settings.recount_interval_minutes),
        id="counter_reconciliation",
        replace_existing=True,
    )
    scheduler.start()
    logger.info(
        f"Scheduler started, reconciling counters every "
        f"{settings.recount_interval_minutes} minutes"
    )
    return True


def shutdown_scheduler():
    """Graceful shutdown."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler shut down")
