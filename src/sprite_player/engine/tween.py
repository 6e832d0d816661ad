"""Linear tween of a scalar value over time."""

from __future__ import annotations

from typing import Callable, Optional

from .ticker import Ticker


def linear(t: float) -> float:
    """Identity easing."""
    return t


class LinearTween:
    """Advance a value from 0 to ``to_value`` over ``duration_ms``.

    The tween is fed elapsed time by ``step``, normally from a ticker
    subscription made in ``start``. A looping tween wraps back to 0 and
    keeps going until cancelled; otherwise it stops at ``to_value`` and
    calls ``on_complete`` once.
    """

    def __init__(
        self,
        to_value: float,
        duration_ms: float,
        on_update: Callable[[float], None],
        on_complete: Optional[Callable[[], None]] = None,
        loop: bool = False,
        easing: Callable[[float], float] = linear,
    ):
        self.to_value = to_value
        self.duration_ms = duration_ms
        self.loop = loop
        self.easing = easing
        self._on_update = on_update
        self._on_complete = on_complete

        self._elapsed_ms = 0.0
        self._iterations = 0
        self._active = False
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def active(self) -> bool:
        return self._active

    @property
    def iterations(self) -> int:
        """Completed passes; only grows while looping."""
        return self._iterations

    def start(self, ticker: Ticker) -> None:
        """Subscribe to ``ticker`` and begin advancing."""
        self._active = True
        self._unsubscribe = ticker.subscribe(self.step)

    def cancel(self) -> None:
        """Stop advancing without completing."""
        self._active = False
        self._detach()

    def step(self, dt_ms: float) -> None:
        """Advance the tween by ``dt_ms``."""
        if not self._active:
            return

        self._elapsed_ms += dt_ms

        if self.duration_ms <= 0:
            self._finish()
            return

        if self._elapsed_ms >= self.duration_ms:
            if self.loop:
                passes = int(self._elapsed_ms // self.duration_ms)
                self._iterations += passes
                self._elapsed_ms -= passes * self.duration_ms
            else:
                self._finish()
                return

        t = self._elapsed_ms / self.duration_ms
        self._on_update(self.easing(t) * self.to_value)

    def _finish(self) -> None:
        self._active = False
        self._detach()
        self._on_update(self.to_value)
        if self._on_complete is not None:
            self._on_complete()

    def _detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
