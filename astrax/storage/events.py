"""In-process change notification, replacing storage polling with subscriptions."""

import inspect
import threading
import weakref
from typing import Callable, Generic, List, Optional, TypeVar

from astrax.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class _Subscription(Generic[T]):
    """A callback held strongly, or weakly so it dies with its owner."""

    def __init__(self, callback: Callable[[T], None], weak: bool) -> None:
        self._strong: Optional[Callable[[T], None]] = None
        self._ref = None
        if not weak:
            self._strong = callback
        elif inspect.ismethod(callback):
            self._ref = weakref.WeakMethod(callback)
        else:
            self._ref = weakref.ref(callback)

    def resolve(self) -> Optional[Callable[[T], None]]:
        if self._strong is not None:
            return self._strong
        return self._ref()


class ChangeNotifier(Generic[T]):
    """Fan-out of a payload to subscribed callbacks, in subscription order."""

    def __init__(self, name: str = "change") -> None:
        self._name = name
        self._subscribers: List[_Subscription[T]] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: Callable[[T], None], weak: bool = False) -> Callable[[], None]:
        """
        Register callback; returns a function that unsubscribes it (idempotent).

        With weak=True only a weak reference is kept (a WeakMethod for bound
        methods), and the subscription is dropped once the callback's owner is
        garbage collected.
        """
        subscription = _Subscription(callback, weak)
        with self._lock:
            self._subscribers.append(subscription)

        def unsubscribe() -> None:
            with self._lock:
                if subscription in self._subscribers:
                    self._subscribers.remove(subscription)

        return unsubscribe

    def _live(self) -> List[Callable[[T], None]]:
        with self._lock:
            live = []
            for subscription in list(self._subscribers):
                callback = subscription.resolve()
                if callback is None:
                    self._subscribers.remove(subscription)
                    logger.debug("%s subscriber collected; dropped", self._name)
                else:
                    live.append(callback)
            return live

    def notify(self, payload: T) -> None:
        """
        Deliver payload to every subscriber. A subscriber that raises is logged
        and does not stop delivery to the rest.
        """
        for callback in self._live():
            try:
                callback(payload)
            except Exception:
                logger.exception("%s subscriber %r failed", self._name, callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._live())
