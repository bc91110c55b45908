"""Send ICMP echo requests with ping3 and collect packet statistics."""
import logging
import time
from datetime import timedelta
from typing import Callable

import ping3
from ping3.errors import DestinationUnreachable, PingError as Ping3Error, TimeExceeded, Timeout as Ping3Timeout

from pingtest.errors import PingError
from pingtest.schemas.ping import PingResult
from pingtest.utils.hosts import validate_host

logger = logging.getLogger(__name__)

# Hard failures (unknown host, send errors) raise instead of returning False,
# so the library's reason reaches the caller.
ping3.EXCEPTIONS = True


class Pinger:
    def __init__(
        self,
        count: int = 4,
        timeout: float = 10.0,
        interval: float = 1.0,
        size: int = 56,
        echo_timeout: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.count = count
        self.timeout = timeout
        self.interval = interval
        self.size = size
        self.echo_timeout = echo_timeout
        self._clock = clock
        self._sleep = sleep

    def ping(self, host: str) -> PingResult:
        """
        Send up to ``count`` echoes to host, one every ``interval`` seconds, within one
        ``timeout`` deadline. Each echo waits at most ``echo_timeout`` for its reply, so a
        lost packet only costs its own slot. Running out of time is not an error; the
        result just reports fewer packets.
        Raises InvalidHostError before touching the network, PingError on a hard failure.
        """
        host = validate_host(host)
        start = self._clock()
        deadline = start + self.timeout
        received = 0

        for seq in range(self.count):
            send_at = start + seq * self.interval
            if send_at >= deadline:
                break
            now = self._clock()
            if send_at > now:
                self._sleep(send_at - now)
            remaining = deadline - self._clock()
            if remaining <= 0:
                break
            try:
                delay = ping3.ping(host, timeout=min(remaining, self.echo_timeout), seq=seq, size=self.size)
            except (Ping3Timeout, TimeExceeded, DestinationUnreachable):
                # no echo reply for this sequence number
                delay = None
            except (Ping3Error, OSError) as e:
                elapsed = timedelta(seconds=self._clock() - start)
                logger.warning("Ping failed: %s", e)
                raise PingError(
                    str(e) or type(e).__name__,
                    PingResult(successful=False, time=elapsed, packets=received),
                ) from e
            if delay is not None and delay is not False:
                received += 1

        elapsed = timedelta(seconds=self._clock() - start)
        logger.debug("Pinged %s: %d/%d replies in %s", host, received, self.count, elapsed)
        return PingResult(successful=received > 0, time=elapsed, packets=received)
