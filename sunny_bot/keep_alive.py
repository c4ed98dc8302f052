import asyncio
import time
from dataclasses import asdict, dataclass
from datetime import datetime, timezone

import aiohttp
from loguru import logger

DEFAULT_INTERVAL_MINUTES = 14  # just under the 15 minute idle spin-down
PING_TIMEOUT_SECONDS = 30
LOCAL_HOST_MARKERS = ("localhost", "127.0.0.1")
LOG_PREFIX = "[KeepAlive]"


@dataclass(frozen=True)
class PingOk:
    status: int
    elapsed_ms: int


@dataclass(frozen=True)
class PingError:
    message: str
    elapsed_ms: int


@dataclass(frozen=True)
class PingTimeout:
    elapsed_ms: int


PingOutcome = PingOk | PingError | PingTimeout


@dataclass
class PingStats:
    total_pings: int = 0
    success_count: int = 0
    failure_count: int = 0
    last_ping_timestamp: str | None = None  # ISO 8601 UTC
    last_outcome: int | str | None = None  # status code, "error" or "timeout"

    def record(self, outcome: PingOutcome):
        """Fold a single ping outcome into the counters."""
        self.total_pings += 1
        self.last_ping_timestamp = datetime.now(timezone.utc).isoformat()

        if isinstance(outcome, PingOk):
            self.last_outcome = outcome.status
            if outcome.status == 200:
                self.success_count += 1
            else:
                self.failure_count += 1
        elif isinstance(outcome, PingTimeout):
            self.last_outcome = "timeout"
            self.failure_count += 1
        else:
            self.last_outcome = "error"
            self.failure_count += 1

    def success_rate(self) -> str:
        if self.total_pings == 0:
            return "N/A"
        return f"{self.success_count / self.total_pings * 100:.2f}%"


def _is_pingable(url: str | None) -> bool:
    if not url:
        return False
    return not any(marker in url for marker in LOCAL_HOST_MARKERS)


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)


class KeepAlivePinger:
    """Periodically GETs a public health endpoint so the host never idles out.

    The pinger is best-effort: failed pings are counted in ``stats`` and
    logged, never raised. ``start`` must be called from a running event loop.
    """

    def __init__(
        self,
        interval_minutes: float = DEFAULT_INTERVAL_MINUTES,
        timeout_seconds: float = PING_TIMEOUT_SECONDS,
        session: aiohttp.ClientSession | None = None,
        sleep=asyncio.sleep,
    ):
        self.interval_ms = int(interval_minutes * 60_000)
        self.timeout_seconds = timeout_seconds
        self.stats = PingStats()
        self._url: str | None = None
        self._tick_task: asyncio.Task | None = None
        self._in_flight: set[asyncio.Task] = set()
        self._session = session
        self._owns_session = session is None
        self._sleep = sleep

    @property
    def running(self) -> bool:
        return self._tick_task is not None

    @property
    def url(self) -> str | None:
        return self._url

    @property
    def interval_minutes(self) -> float:
        return self.interval_ms / 60_000

    def start(self, url: str | None):
        """Ping ``url`` now and then every interval. No-op if already running."""
        if self.running:
            logger.info("{} Already running", LOG_PREFIX)
            return

        if not _is_pingable(url):
            logger.info("{} Skipping - localhost or no URL provided", LOG_PREFIX)
            return

        self._url = url
        logger.info("{} Starting with URL: {}", LOG_PREFIX, url)
        logger.info("{} Ping interval: {:g} minutes", LOG_PREFIX, self.interval_minutes)

        self._spawn_ping()
        self._tick_task = asyncio.create_task(self._tick_loop())

    def stop(self):
        """Cancel future pings. A ping already in flight still completes and is counted."""
        if self._tick_task is None:
            return

        self._tick_task.cancel()
        self._tick_task = None
        logger.info("{} Stopped", LOG_PREFIX)

    async def close(self):
        """Stop, wait for in-flight pings, and release the HTTP session we created."""
        self.stop()

        if self._in_flight:
            await asyncio.wait(set(self._in_flight))

        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def set_interval_minutes(self, minutes: float):
        """Change the interval; a running pinger is restarted, which pings immediately."""
        if minutes <= 0:
            raise ValueError(f"Interval must be positive, got {minutes}")

        self.interval_ms = int(minutes * 60_000)

        if self.running:
            self.stop()
            self.start(self._url)

    def reset_stats(self):
        self.stats = PingStats()
        logger.info("{} Stats reset", LOG_PREFIX)

    def get_stats(self) -> dict:
        return {
            **asdict(self.stats),
            "running": self.running,
            "url": self._url,
            "interval_minutes": self.interval_minutes,
            "success_rate": self.stats.success_rate(),
        }

    async def ping(self) -> PingOutcome | None:
        """Issue one GET against the target and record the outcome. Never raises."""
        if not self._url:
            return None

        url = self._url
        started = time.monotonic()
        try:
            session = self._get_session()
            timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
            # Classified on the response headers; leaving the block discards the body.
            async with session.get(url, timeout=timeout) as response:
                outcome = PingOk(response.status, _elapsed_ms(started))
        # aiohttp's ServerTimeoutError is also a ClientError, so timeouts go first
        except asyncio.TimeoutError:
            outcome = PingTimeout(_elapsed_ms(started))
        # ValueError covers resolver rejections such as over-long IDNA host labels
        except (aiohttp.ClientError, OSError, ValueError) as e:
            outcome = PingError(str(e) or type(e).__name__, _elapsed_ms(started))

        self.stats.record(outcome)
        self._log_outcome(outcome)
        return outcome

    def _log_outcome(self, outcome: PingOutcome):
        if isinstance(outcome, PingOk):
            if outcome.status == 200:
                logger.info("{} Ping successful ({}) - {}ms", LOG_PREFIX, outcome.status, outcome.elapsed_ms)
            else:
                logger.warning("{} Ping returned {} - {}ms", LOG_PREFIX, outcome.status, outcome.elapsed_ms)
        elif isinstance(outcome, PingTimeout):
            logger.error("{} Ping timed out after {}ms", LOG_PREFIX, outcome.elapsed_ms)
        else:
            logger.error("{} Ping failed: {}", LOG_PREFIX, outcome.message)

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    def _spawn_ping(self):
        task = asyncio.create_task(self.ping())
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    async def _tick_loop(self):
        """Fire an independent ping every interval; a slow ping never delays the next tick."""
        while True:
            try:
                await self._sleep(self.interval_ms / 1000)
                self._spawn_ping()
            except asyncio.CancelledError:
                logger.debug("{} Tick loop cancelled", LOG_PREFIX)
                break
            except Exception as e:
                logger.exception("{} Error in tick loop: {}", LOG_PREFIX, e)
