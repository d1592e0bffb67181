"""
Chromium controller: one browser, one page and one DevTools session shared by
every navigation of a run
"""
from typing import Callable, List, Optional, Tuple

from playwright.sync_api import sync_playwright, Error as PlaywrightError

import config
from redirect_validator.errors import NavigationError
from redirect_validator.events import NetworkEvent, SUBSCRIBED_EVENTS, classify_event
from redirect_validator.utils import setup_logging

logger = setup_logging(__name__)

EventHandler = Callable[[NetworkEvent], None]


class Subscription:
    """Handle returned by subscribe(). cancel() detaches the listeners."""

    def __init__(self, session, listeners: List[Tuple[str, Callable]]):
        self._session = session
        self._listeners = listeners

    def cancel(self):
        while self._listeners:
            event_name, listener = self._listeners.pop()
            self._session.remove_listener(event_name, listener)


class PlaywrightBrowser:
    """
    Browser Controller backed by Playwright

    Navigation is fire-and-forget: navigate() returns once the first
    document has committed and the caller waits out the settle window with
    settle(), which keeps dispatching protocol events on this thread.
    """

    def __init__(self, headless: bool = config.HEADLESS, args: Optional[List[str]] = None,
                 navigation_timeout: int = config.NAVIGATION_TIMEOUT):
        self.headless = headless
        self.args = list(config.CHROMIUM_ARGS if args is None else args)
        self.navigation_timeout = navigation_timeout
        self._playwright = None
        self.browser = None
        self.context = None
        self.page = None
        self.cdp = None

    def start(self):
        logger.info(f"Starting Chromium (headless={self.headless})")
        self._playwright = sync_playwright().start()
        try:
            self.browser = self._playwright.chromium.launch(headless=self.headless, args=self.args)
            self.context = self.browser.new_context(ignore_https_errors=True)
            self.page = self.context.new_page()
            self.cdp = self.context.new_cdp_session(self.page)
            self.cdp.send("Network.enable")
        except Exception:
            self.close()
            raise
        return self

    def close(self):
        if self.browser is not None:
            try:
                self.browser.close()
            except PlaywrightError as e:
                logger.warning(f"Error closing browser: {e}")
            self.browser = None
        if self._playwright is not None:
            self._playwright.stop()
            self._playwright = None

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def subscribe(self, handler: EventHandler) -> Subscription:
        """
        Deliver classified network events to handler

        Args:
            handler: Called once per RequestSent / ResponseReceived

        Returns:
            Subscription to cancel once the window is over
        """
        listeners = []
        for event_name in SUBSCRIBED_EVENTS:
            def listener(params, event_name=event_name):
                event = classify_event(event_name, params)
                if event is not None:
                    handler(event)

            self.cdp.on(event_name, listener)
            listeners.append((event_name, listener))

        return Subscription(self.cdp, listeners)

    def navigate(self, url: str):
        """
        Start navigating to url

        Raises:
            NavigationError: the browser could not load the URL
        """
        try:
            self.page.goto(url, wait_until='commit', timeout=self.navigation_timeout)
        except PlaywrightError as e:
            raise NavigationError(url, str(e).splitlines()[0] if str(e) else type(e).__name__) from e

    def settle(self, seconds: float):
        """Wait while the redirect chain plays out"""
        try:
            self.page.wait_for_timeout(seconds * 1000)
        except PlaywrightError as e:
            raise NavigationError(self.page.url, str(e)) from e

    def reset(self):
        """Load a blank page so traffic from the previous task stops"""
        self.navigate("about:blank")
