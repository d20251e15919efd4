"""
Display Mode Module - Light/dark preference for the portfolio page

The initial mode comes from the browser's prefers-color-scheme client hint.
The current mode is an observable value: subscribers run once when they
register and once for every distinct value committed afterwards.
"""

import logging
from typing import Callable, List, Mapping, Optional

from models import DisplayMode

logger = logging.getLogger(__name__)

PREFERS_COLOR_SCHEME_HEADER = 'Sec-CH-Prefers-Color-Scheme'
DARK_STYLE_TOKEN = 'dark'

Subscriber = Callable[[DisplayMode], None]


def read_ambient_signal(headers: Optional[Mapping[str, str]]) -> Optional[str]:
    """Return the raw prefers-color-scheme hint, or None when the browser sent none"""
    if not headers:
        return None
    return headers.get(PREFERS_COLOR_SCHEME_HEADER)


def initialize(signal: Optional[str]) -> DisplayMode:
    """
    Derive the initial display mode from the ambient color-scheme signal

    Args:
        signal: Raw hint value such as '"dark"' or 'light', None if unavailable

    Returns:
        DisplayMode: DARK only when the signal asks for dark, LIGHT otherwise
    """
    if signal is None:
        return DisplayMode.LIGHT
    normalized = str(signal).strip().strip('"\'').strip().lower()
    return DisplayMode.from_bool(normalized == 'dark')


def toggle(current: DisplayMode) -> DisplayMode:
    return DisplayMode.from_bool(not current.is_dark)


class StyleClassList:
    """Ordered set of style tokens rendered into the page <body> class attribute."""

    def __init__(self, tokens=()):
        self._tokens: List[str] = []
        for token in tokens:
            self.add(token)

    def add(self, token: str) -> None:
        if token not in self._tokens:
            self._tokens.append(token)

    def remove(self, token: str) -> None:
        if token in self._tokens:
            self._tokens.remove(token)

    def toggle(self, token: str, force: Optional[bool] = None) -> bool:
        present = token in self._tokens if force is None else not force
        if present:
            self.remove(token)
            return False
        self.add(token)
        return True

    def contains(self, token: str) -> bool:
        return token in self._tokens

    __contains__ = contains

    def __iter__(self):
        return iter(list(self._tokens))

    def __str__(self):
        return ' '.join(self._tokens)

    def __repr__(self):
        return f'StyleClassList({self._tokens!r})'


def apply_effect(class_list: StyleClassList) -> Subscriber:
    """Build the subscriber that keeps the dark token in sync with the mode"""
    def _apply(mode: DisplayMode) -> None:
        class_list.toggle(DARK_STYLE_TOKEN, mode.is_dark)
    return _apply


class DisplayModePreference:
    """Observable display mode with change subscribers."""

    def __init__(self, initial: DisplayMode = DisplayMode.LIGHT):
        self._value = initial
        self._subscribers: List[Subscriber] = []

    @classmethod
    def from_signal(cls, signal: Optional[str]) -> 'DisplayModePreference':
        return cls(initialize(signal))

    @property
    def value(self) -> DisplayMode:
        return self._value

    @property
    def is_dark(self) -> bool:
        return self._value.is_dark

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a change subscriber and apply it once to the current value

        Returns:
            callable: Removes the subscriber when called
        """
        self._subscribers.append(callback)
        callback(self._value)

        def _unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)
        return _unsubscribe

    def set(self, mode: DisplayMode) -> DisplayMode:
        if mode is self._value:
            return self._value
        self._value = mode
        logger.debug(f"Display mode changed to {mode.name}")
        for callback in list(self._subscribers):
            callback(self._value)
        return self._value

    def toggle(self) -> DisplayMode:
        return self.set(toggle(self._value))


__all__ = [
    'PREFERS_COLOR_SCHEME_HEADER',
    'DARK_STYLE_TOKEN',
    'read_ambient_signal',
    'initialize',
    'toggle',
    'StyleClassList',
    'apply_effect',
    'DisplayModePreference'
]
