"""Notification sinks for committed registry mutations.

A registry hands every committed mutation to its sink as an ``Event``.
Sinks are write-only: a sink may fail, but ``deliver`` logs the failure
and carries on, so a sink can never undo or fail the operation that
produced the event.
"""
from collections import namedtuple

from nftregistry.logger import get_logger

log = get_logger('Events')

Event = namedtuple('Event', ['name', 'details'])


class EventSink:
    def emit(self, event: Event):
        raise NotImplementedError


class LogEventSink(EventSink):
    def __init__(self, logger=None):
        self.log = logger or log

    def emit(self, event: Event):
        # Plain logging.Logger instances have no notice level
        emit = getattr(self.log, 'notice', self.log.info)
        emit('{}: {}'.format(event.name, event.details))


class MemoryEventSink(EventSink):
    def __init__(self):
        self.events = []

    def emit(self, event: Event):
        self.events.append(event)

    def names(self):
        return [e.name for e in self.events]

    def clear(self):
        self.events = []


class CallbackEventSink(EventSink):
    def __init__(self, callback):
        self.callback = callback

    def emit(self, event: Event):
        self.callback(event.name, event.details)


def deliver(sink: EventSink, events):
    for event in events:
        try:
            sink.emit(event)
        except Exception as e:
            log.error('Sink {} failed on {}: {}'.format(type(sink).__name__, event.name, e))
