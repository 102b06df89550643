"""Countdown of the timed modes, driven by an external one-second ticker."""

from typing import Callable, Protocol


class Ticker(Protocol):
    """Periodic timer, such as a matplotlib canvas timer."""

    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...


# ##>: Builds a ticker calling the callback every interval (in milliseconds).
TickerFactory = Callable[[int, Callable[[], None]], Ticker]


class Countdown:
    """
    Countdown owned by a single game session.

    Parameters
    ----------
    seconds : int
        Starting time.
    on_tick : Callable[[int], None], optional
        Called with the remaining time after each tick that does not reach zero.
    on_expire : Callable[[], None], optional
        Called once when the remaining time reaches zero.
    ticker_factory : TickerFactory, optional
        Builds the ticker that calls ``tick`` every second. Without it the owner calls ``tick`` itself.
    interval_ms : int, optional
        Ticker interval (default is 1000).

    Notes
    -----
    Once cancelled or expired, a countdown ignores any further tick, so a late callback of its ticker can never
    reach a newer game.
    """

    def __init__(
        self,
        seconds: int,
        on_tick: Callable[[int], None] | None = None,
        on_expire: Callable[[], None] | None = None,
        ticker_factory: TickerFactory | None = None,
        interval_ms: int = 1000,
    ):
        self.remaining = seconds
        self._on_tick = on_tick
        self._on_expire = on_expire
        self._active = False
        self._ticker = ticker_factory(interval_ms, self.tick) if ticker_factory is not None else None

    @property
    def active(self) -> bool:
        return self._active

    @property
    def expired(self) -> bool:
        return self.remaining <= 0

    def start(self) -> None:
        """Start counting down."""
        if self._active or self.expired:
            return
        self._active = True
        if self._ticker is not None:
            self._ticker.start()

    def cancel(self) -> None:
        """Stop counting down for good."""
        self._active = False
        if self._ticker is not None:
            self._ticker.stop()

    def tick(self) -> None:
        """Take one second off the remaining time."""
        if not self._active:
            return

        self.remaining -= 1
        if self.remaining > 0:
            if self._on_tick is not None:
                self._on_tick(self.remaining)
            return

        # ##: Time is up.
        self.remaining = 0
        self.cancel()
        if self._on_expire is not None:
            self._on_expire()
