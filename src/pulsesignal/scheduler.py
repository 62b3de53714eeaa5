from __future__ import annotations

import logging

from apscheduler.schedulers.blocking import BlockingScheduler  # type: ignore[import-untyped]
from apscheduler.triggers.interval import IntervalTrigger  # type: ignore[import-untyped]

from pulsesignal.engine import SignalEngine

logger = logging.getLogger(__name__)

JOB_ID = "generate_signals"


class SignalScheduler:
    """Run ``SignalEngine.evaluate_all`` on a fixed minute cadence."""

    def __init__(
        self,
        engine: SignalEngine,
        interval_minutes: int = 2,
        scheduler: BlockingScheduler | None = None,
    ) -> None:
        if interval_minutes <= 0:
            raise ValueError("interval_minutes must be greater than zero")
        self.engine = engine
        self.interval_minutes = interval_minutes
        self.scheduler = scheduler or BlockingScheduler(timezone="UTC")

    def tick(self) -> int:
        results = self.engine.evaluate_all()
        logger.info("Generated %s signals", len(results))
        return len(results)

    def schedule(self) -> None:
        self.scheduler.add_job(
            func=self.tick,
            trigger=IntervalTrigger(minutes=self.interval_minutes),
            id=JOB_ID,
            name="Signal Generation",
            max_instances=1,
            coalesce=True,
            replace_existing=True,
        )

    def start(self, run_immediately: bool = True) -> None:
        if run_immediately:
            self.tick()
        self.schedule()
        logger.info("Signal generation scheduled every %s minutes", self.interval_minutes)
        try:
            self.scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")
