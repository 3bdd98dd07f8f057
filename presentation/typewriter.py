"""
Typewriter text effect

The animation is a pure state machine (advance) driven by a small runner
(Typewriter) that owns exactly one pending timer at a time.

    Typing --(text complete)--> Pausing --> Deleting --(text empty)--> Typing(next)
"""

import threading
from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence, Tuple

TYPE_DELAY_MS = 100
DELETE_DELAY_MS = 50
PAUSE_DELAY_MS = 2000


@dataclass(frozen=True)
class TypewriterState:
    text_index: int = 0
    current_text: str = ''
    is_deleting: bool = False
    is_paused: bool = False


def next_delay(state: TypewriterState) -> int:
    """Milliseconds to wait before applying the next tick to state"""
    if state.is_paused:
        return PAUSE_DELAY_MS
    return DELETE_DELAY_MS if state.is_deleting else TYPE_DELAY_MS


def advance(state: TypewriterState, texts: Sequence[str]) -> Tuple[TypewriterState, int]:
    """
    Apply one tick

    Returns the new state and the delay until the following tick.
    """
    if not texts:
        raise ValueError('texts must not be empty')

    full_text = texts[state.text_index % len(texts)]

    if state.is_paused:
        new_state = replace(state, is_paused=False, is_deleting=True)
    elif state.is_deleting:
        shorter = full_text[:max(len(state.current_text) - 1, 0)]
        if shorter:
            new_state = replace(state, current_text=shorter)
        else:
            new_state = TypewriterState(text_index=(state.text_index + 1) % len(texts))
    else:
        longer = full_text[:len(state.current_text) + 1]
        new_state = replace(state, current_text=longer, is_paused=longer == full_text)

    return new_state, next_delay(new_state)


class Typewriter:
    """
    Runs the typewriter animation on a cancellable timer

    Usable as a context manager; leaving the block cancels the pending
    timer so nothing fires after disposal.

    Example:
        >>> with Typewriter(['Full Stack Developer '], on_change=print):
        ...     time.sleep(5)
    """

    def __init__(self, texts: Sequence[str], on_change: Optional[Callable[[str], None]] = None,
                 timer_factory: Callable = threading.Timer):
        if not texts:
            raise ValueError('texts must not be empty')
        self.texts = list(texts)
        self.on_change = on_change
        self.state = TypewriterState()
        self._timer_factory = timer_factory
        self._timer = None
        self._running = False
        self._lock = threading.Lock()

    @property
    def text(self) -> str:
        return self.state.current_text

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self):
        with self._lock:
            if self._running:
                return self
            self._running = True
            self._arm(next_delay(self.state))
        return self

    def stop(self):
        with self._lock:
            self._running = False
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _arm(self, delay_ms: int):
        timer = self._timer_factory(delay_ms / 1000.0, self._tick)
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _tick(self):
        with self._lock:
            if not self._running:
                return
            self.state, delay_ms = advance(self.state, self.texts)
            text = self.state.current_text
            self._arm(delay_ms)

        if self.on_change is not None:
            self.on_change(text)

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False
