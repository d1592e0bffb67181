"""
Run orchestration: validate every task, one navigation at a time
"""
import time
from dataclasses import dataclass
from typing import Iterable, Optional

from tqdm import tqdm

import config
from redirect_validator.correlator import NavigationCorrelator
from redirect_validator.errors import NavigationError
from redirect_validator.evaluator import FAILURE, ValidationTask, Verdict, evaluate
from redirect_validator.resolver import redirect_chain, resolve_final
from redirect_validator.results import ResultWriter
from redirect_validator.utils import setup_logging

logger = setup_logging(__name__)


@dataclass
class RunSummary:
    processed: int = 0
    succeeded: int = 0
    failed: int = 0
    navigation_errors: int = 0


class RedirectValidator:
    """Validates redirection URLs against their expected destinations"""

    def __init__(self, browser, writer: ResultWriter, settle_seconds: float = config.SETTLE_SECONDS,
                 task_delay: float = config.TASK_DELAY, reset_between_tasks: bool = config.RESET_BETWEEN_TASKS):
        self.browser = browser
        self.writer = writer
        self.settle_seconds = settle_seconds
        self.task_delay = task_delay
        self.reset_between_tasks = reset_between_tasks
        self.navigation_errors = 0

    def validate(self, task: ValidationTask) -> Verdict:
        """
        Navigate to one redirection URL and judge where it ended up

        The settle window is a best-effort guess: a slow redirect chain that
        has not finished when it expires is judged on the hops seen so far.

        Args:
            task: Redirection URL and expected destination

        Returns:
            Verdict for the task. Navigation errors give a Failure with an
            empty final URL.
        """
        if self.reset_between_tasks:
            try:
                self.browser.reset()
            except NavigationError as e:
                logger.warning(f"Could not reset page before {task.redirection_url}: {e}")

        correlator = NavigationCorrelator()
        subscription = self.browser.subscribe(correlator.ingest)

        try:
            logger.info(f"Navigating to {task.redirection_url}")
            self.browser.navigate(task.redirection_url)
            self.browser.settle(self.settle_seconds)
        except NavigationError as e:
            logger.error(f"Error processing {task.redirection_url}: {e}")
            self.navigation_errors += 1
            return self._navigation_failure(task, correlator.primary_request_id)
        finally:
            correlator.seal()
            subscription.cancel()

        state = correlator.snapshot()
        logger.debug(f"Redirect chain for {task.redirection_url}: {redirect_chain(state)}")

        final_url = resolve_final(state)
        verdict = evaluate(task, final_url, state.primary_request_id)
        logger.info(f"{task.redirection_url} -> {final_url or '(none)'}: {verdict.final_status}")
        return verdict

    def _navigation_failure(self, task: ValidationTask, request_id: Optional[str]) -> Verdict:
        return Verdict(
            request_id=request_id or "",
            redirection_url=task.redirection_url,
            destination_url=task.destination_url,
            final_destination_url="",
            final_status=FAILURE,
        )

    def run(self, tasks: Iterable[ValidationTask]) -> RunSummary:
        """
        Validate all tasks in order, appending each verdict as it is computed

        Args:
            tasks: Tasks in input order

        Returns:
            Counters for the run

        Raises:
            OutputError: a verdict could not be written
        """
        tasks = list(tasks)
        summary = RunSummary()
        errors_before = self.navigation_errors

        logger.info("=" * 50)
        logger.info(f"Validating {len(tasks)} redirection URL(s)")
        logger.info("=" * 50)

        with tqdm(total=len(tasks), desc="Validating URLs") as pbar:
            for task in tasks:
                verdict = self.validate(task)
                self.writer.append(verdict)

                summary.processed += 1
                if verdict.succeeded:
                    summary.succeeded += 1
                else:
                    summary.failed += 1
                summary.navigation_errors = self.navigation_errors - errors_before
                pbar.update(1)
                pbar.set_postfix({'Success': summary.succeeded, 'Failed': summary.failed})

                if self.task_delay:
                    time.sleep(self.task_delay)

        logger.info(f"Processed URLs: {summary.processed} / {len(tasks)}")
        logger.info(
            f"Completed: {summary.succeeded} successful, {summary.failed} failed "
            f"({summary.navigation_errors} navigation error(s))"
        )
        return summary
