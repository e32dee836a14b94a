"""SignalBus - notifications from the engine to its caller

The engine never calls back into the presentation layer directly. While an
operation runs it queues small signals (identifiers and scalars only); the
bus delivers them once the outermost operation has finished, so handlers
always observe a consistent state.

    bus = SignalBus()
    bus.subscribe(SignalTypes.JOURNEY_WON, on_win)
    engine = TrailEngine(theme, bus=bus)

Handlers may call engine operations. Signals raised there join the queue and
are delivered in the same drain, after those already pending.
"""

from collections import defaultdict, deque
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from trailsim.core.logging import get_logger

logger = get_logger(__name__)

# runaway guard: handlers that keep triggering operations from their own signals
MAX_SIGNALS_PER_DRAIN = 200


@dataclass
class Signal:
    signal_type: str
    data: dict[str, Any]
    source: str


SignalHandler = Callable[[Signal], None]


class SignalBus:
    """Queued publish/subscribe, drained at operation boundaries"""

    def __init__(self) -> None:
        self._handlers: dict[str, list[SignalHandler]] = defaultdict(list)
        self._queue: deque[Signal] = deque()
        self._open_operations = 0
        self._draining = False

    def subscribe(self, signal_type: str, handler: SignalHandler) -> None:
        self._handlers[signal_type].append(handler)

    def unsubscribe(self, signal_type: str, handler: SignalHandler) -> None:
        handlers = self._handlers.get(signal_type, [])
        if handler in handlers:
            handlers.remove(handler)
        else:
            logger.warning("Handler not registered for %s", signal_type)

    @contextmanager
    def operation(self) -> Iterator["SignalBus"]:
        """Hold delivery until the outermost operation ends."""
        self._open_operations += 1
        try:
            yield self
        finally:
            self._open_operations -= 1
            if self._open_operations == 0:
                self.drain()

    def publish(self, signal: Signal) -> None:
        """Queue a signal. Outside any operation it is delivered at once."""
        self._queue.append(signal)
        if self._open_operations == 0:
            self.drain()

    def drain(self) -> int:
        """Deliver every queued signal in FIFO order. Returns the count.

        A drain already in progress further up the stack picks up anything
        queued meanwhile, so nested calls return immediately.
        """
        if self._draining:
            return 0
        self._draining = True
        delivered = 0
        try:
            while self._queue:
                if delivered >= MAX_SIGNALS_PER_DRAIN:
                    logger.warning(
                        "SignalBus drain limit (%d) reached, %d signals dropped",
                        MAX_SIGNALS_PER_DRAIN,
                        len(self._queue),
                    )
                    self._queue.clear()
                    break
                self._deliver(self._queue.popleft())
                delivered += 1
        finally:
            self._draining = False
        return delivered

    def clear(self) -> None:
        """Drop subscriptions and anything still queued (tests)."""
        self._handlers.clear()
        self._queue.clear()

    @property
    def handler_count(self) -> int:
        return sum(len(h) for h in self._handlers.values())

    @property
    def pending_count(self) -> int:
        return len(self._queue)

    def _deliver(self, signal: Signal) -> None:
        for handler in list(self._handlers.get(signal.signal_type, [])):
            try:
                handler(signal)
            except Exception:
                logger.exception(
                    "Signal handler failed: %s (signal=%s)",
                    getattr(handler, "__qualname__", handler),
                    signal.signal_type,
                )
