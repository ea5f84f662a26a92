import logging
import time
from io import BytesIO
from pathlib import Path
from typing import Optional

from PIL import Image
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.webdriver import WebDriver
from selenium.webdriver.support.ui import WebDriverWait

from browser_shell.config import BrowserConfig
from browser_shell.errors import RendererError
from browser_shell.renderer.base import PageRenderer
from browser_shell.renderer.driver import new_webdriver
from browser_shell.renderer.js_scripts import (DRAIN_LINK_EVENTS_SCRIPT,
                                               INSTALL_LINK_LISTENER_SCRIPT)
from browser_shell.types import LinkEvent, LinkEventType

logger = logging.getLogger(__name__)


class ChromeRenderer(PageRenderer):
    """Displays pages in Chrome through Selenium."""

    def __init__(
        self,
        driver: WebDriver,
        page_load_timeout: float = 10.0,
        parse_delay: float = 0.0,
    ) -> None:
        """
        Wrap an existing WebDriver.

        Args:
            driver: Driver used to display pages
            page_load_timeout: Seconds to wait for a document to finish loading
            parse_delay: Extra seconds to wait before the readiness check
        """
        self.driver: Optional[WebDriver] = driver
        self.page_load_timeout: float = page_load_timeout
        self.parse_delay: float = parse_delay

    @classmethod
    def from_config(cls, config: BrowserConfig) -> "ChromeRenderer":
        """Start a Chrome instance using the given settings."""
        logger.info(f"Starting Chrome (headless={config.headless})")
        driver = new_webdriver(config.headless, config.window_size)
        return cls(driver, config.page_load_timeout, config.parse_delay)

    @property
    def title(self) -> str:
        """Title of the displayed page."""
        return self._require_driver().title or ""

    def load(self, url: str) -> None:
        driver = self._require_driver()
        try:
            logger.info(f"Loading {url}")
            driver.get(url)
            self._wait_for_page_load()
            count = driver.execute_script(INSTALL_LINK_LISTENER_SCRIPT)
            logger.debug(f"Watching {count} links on {url}")
        except WebDriverException as e:
            logger.error(f"Loading {url} failed: {e.msg or str(e)}")
            raise RendererError(f"Could not load {url}") from e

    def poll_link_events(self) -> list[LinkEvent]:
        driver = self._require_driver()
        try:
            raw_events = driver.execute_script(DRAIN_LINK_EVENTS_SCRIPT) or []
        except WebDriverException as e:
            raise RendererError("Could not read link events") from e

        events = []
        for raw in raw_events:
            href = raw.get("href")
            try:
                event_type = LinkEventType(raw.get("type"))
            except ValueError:
                logger.debug(f"Ignoring link event of type {raw.get('type')!r}")
                continue
            if href:
                events.append(LinkEvent(type=event_type, href=href))
        return events

    def save_screenshot(self, filepath: Path) -> Path:
        """
        Save the visible part of the page as a JPEG.

        Args:
            filepath: Where to write the image

        Returns:
            Path: The written file
        """
        driver = self._require_driver()
        try:
            screenshot_bytes = driver.get_screenshot_as_png()
        except WebDriverException as e:
            raise RendererError("Could not capture screenshot") from e

        screenshot = Image.open(BytesIO(screenshot_bytes))

        # JPEG has no alpha channel
        if screenshot.mode in ("RGBA", "LA"):
            background = Image.new("RGB", screenshot.size, (255, 255, 255))
            background.paste(screenshot, mask=screenshot.split()[-1])
            screenshot = background
        elif screenshot.mode != "RGB":
            screenshot = screenshot.convert("RGB")

        filepath = Path(filepath)
        screenshot.save(filepath, "JPEG", quality=85)
        logger.info(f"Saved screenshot to {filepath}")
        return filepath

    def close(self) -> None:
        """Close the browser and clean up resources."""
        if self.driver:
            self.driver.quit()
            self.driver = None

    def _require_driver(self) -> WebDriver:
        if not self.driver:
            raise RendererError("Renderer has been closed")
        return self.driver

    def _wait_for_page_load(self) -> None:
        """Wait for the page to fully load."""
        if self.parse_delay:
            time.sleep(self.parse_delay)
        WebDriverWait(self.driver, self.page_load_timeout).until(
            lambda d: d.execute_script("return document.readyState")
            == "complete"
        )
