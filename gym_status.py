"""
UMD Gym Status - Application

Shows how full the ERC weight room is. Fetches run on background threads;
everything that touches the screen is posted to the UI queue and runs on
the main thread.
"""

import argparse
import logging
import queue
import sys
import threading
from typing import Optional

from classifier import classify
from config import ALERT_TITLE, API_URL, REFRESH_INTERVAL
from display import TerminalDisplay
from errors import GymStatusError
from fetcher import fetch_payload
from mailer import send_report
from models import ViewState

logger = logging.getLogger(__name__)


class UIQueue:
    """Callables waiting to run on the UI thread."""

    def __init__(self):
        self._queue = queue.Queue()

    def post(self, func, *args):
        self._queue.put((func, args))

    def run_pending(self, timeout: Optional[float] = None) -> int:
        """
        Run queued callables on the calling thread.

        Waits up to timeout for the first one, then drains the rest without
        blocking.

        Returns:
            Number of callables run
        """
        try:
            func, args = self._queue.get(timeout=timeout)
        except queue.Empty:
            return 0

        ran = 0
        while True:
            func(*args)
            ran += 1
            try:
                func, args = self._queue.get_nowait()
            except queue.Empty:
                return ran


class QueuedIndicator:
    """Network activity indicator that can be toggled from any thread."""

    def __init__(self, ui_queue: UIQueue, display: TerminalDisplay):
        self.ui_queue = ui_queue
        self.display = display

    def show(self):
        self.ui_queue.post(self.display.set_loading, True)

    def hide(self):
        self.ui_queue.post(self.display.set_loading, False)


class GymStatusApp:
    def __init__(
        self,
        display: Optional[TerminalDisplay] = None,
        url: str = API_URL,
        fetch=fetch_payload,
        report=send_report,
        ui_queue: Optional[UIQueue] = None,
    ):
        self.display = display or TerminalDisplay()
        self.url = url
        self.fetch = fetch
        self.report = report
        self.ui_queue = ui_queue or UIQueue()
        self.indicator = QueuedIndicator(self.ui_queue, self.display)

        self.state = ViewState()
        self.in_flight = False
        self.running = False
        self._stopped = threading.Event()

    # UI thread

    def refresh(self):
        """Start a fetch unless one is already running."""
        if self.in_flight:
            logger.debug("Refresh already in flight, ignoring")
            return
        self.in_flight = True
        threading.Thread(target=self._load, daemon=True).start()

    def handle_key(self, key: str):
        key = key.strip().lower()

        if key == "q":
            self.running = False
            return

        if self.state.alert is not None:
            if key == "r" and not self.state.mail_error:
                self.report_problem()
            else:
                self._update(self.state.with_alert(None))
            return

        if key == "":
            self.refresh()

    def report_problem(self):
        if self.report():
            self._update(self.state.with_alert(None))
        else:
            self._update(self.state.with_mail_error())

    def _loaded(self, model):
        self.in_flight = False
        self._update(self.state.apply(model))

    def _load_failed(self, error: GymStatusError):
        self.in_flight = False
        self._update(self.state.with_alert(error.alert_message))

    def _update(self, state: ViewState):
        self.state = state
        self.display.render(state)

    # Background threads

    def _load(self):
        try:
            model = classify(self.fetch(self.url, indicator=self.indicator))
        except GymStatusError as e:
            logger.error(f"Refresh failed ({type(e).__name__}): {e}")
            self.ui_queue.post(self._load_failed, e)
        except Exception as e:
            logger.exception(f"Unexpected error during refresh: {e}")
            self.ui_queue.post(self._load_failed, GymStatusError(str(e)))
        else:
            self.ui_queue.post(self._loaded, model)

    def _read_keys(self, stream):
        for line in stream:
            self.ui_queue.post(self.handle_key, line)
        self.ui_queue.post(self.handle_key, "q")

    def _watch(self, interval_minutes: float):
        while not self._stopped.wait(interval_minutes * 60):
            logger.info("Scheduled refresh")
            self.ui_queue.post(self.refresh)

    def run(self, watch: Optional[float] = None, stream=None):
        """
        Main loop: draw the screen, load once, then react to keys.

        Args:
            watch: Refresh automatically every this many minutes
            stream: Where keys come from (defaults to stdin)
        """
        self.running = True
        self._stopped.clear()

        self.display.render(self.state)
        self.refresh()

        threading.Thread(
            target=self._read_keys, args=(stream or sys.stdin,), daemon=True
        ).start()
        if watch:
            logger.info(f"Refreshing every {watch} minutes")
            threading.Thread(target=self._watch, args=(watch,), daemon=True).start()

        try:
            while self.running:
                self.ui_queue.run_pending(timeout=0.1)
        finally:
            self._stopped.set()


def run_once(url: str = API_URL, display: Optional[TerminalDisplay] = None) -> int:
    """
    Fetch and print the status once, for cron jobs and scripts.

    Returns:
        Process exit code: 0 on success, 1 if the refresh failed
    """
    display = display or TerminalDisplay()
    try:
        model = classify(fetch_payload(url))
    except GymStatusError as e:
        logger.error(f"Refresh failed ({type(e).__name__}): {e}")
        display.message(f"{ALERT_TITLE}: {e.alert_message}")
        return 1

    display.render(ViewState().apply(model), interactive=False)
    return 0


def log_level(verbose: bool, once: bool) -> int:
    # Interactive mode shares the terminal with the screen, so keep it quiet
    if verbose:
        return logging.DEBUG
    return logging.INFO if once else logging.WARNING


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="UMD ERC Weight Room Status")
    parser.add_argument("--once", action="store_true", help="Print the current status and exit")
    parser.add_argument(
        "--watch",
        type=float,
        nargs="?",
        const=REFRESH_INTERVAL,
        default=None,
        metavar="MINUTES",
        help=f"Refresh automatically (default every {REFRESH_INTERVAL} minutes)",
    )
    parser.add_argument("--url", default=API_URL, help="Area usage endpoint")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=log_level(args.verbose, args.once),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    if args.once:
        return run_once(args.url)

    GymStatusApp(url=args.url).run(watch=args.watch)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Stopped by user")
