"""Observable base class for implementing observer pattern."""

import logging

logger = logging.getLogger(__name__)


class Observable:
    """Base class for models that can be observed for changes."""

    def __init__(self):
        self._observers = []

    def add_observer(self, observer):
        """Register a callback taking (event_type, data).

        Registering the same callback twice has no effect.
        """
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer):
        if observer in self._observers:
            self._observers.remove(observer)

    def notify_observers(self, event_type, data=None):
        """Call every observer with the event.

        A failing observer is logged and the remaining observers still run.
        """
        for observer in list(self._observers):
            try:
                observer(event_type, data)
            except Exception:
                logger.exception("Observer %r failed on %s", observer, event_type)
