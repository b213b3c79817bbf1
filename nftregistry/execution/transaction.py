from contextlib import ContextDecorator
from functools import wraps

from nftregistry.db.driver import ContractDriver
from nftregistry.events import Event, EventSink, deliver
from nftregistry.logger import get_logger

log = get_logger('Transaction')


class Transaction(ContextDecorator):
    """
    Commit/rollback scope around a single registry mutation.

    Writes are staged on the driver while the body runs. A clean exit commits
    them and delivers the queued events to the sink. An exception drops the
    staged writes and the queued events, then propagates.
    """
    def __init__(self, driver: ContractDriver, sink: EventSink=None, name=''):
        self.driver = driver
        self.sink = sink
        self.name = name
        self.events = []

    def record(self, name, details):
        self.events.append(Event(name, details))

    def __enter__(self):
        self.events = []
        # Anything staged outside a transaction is not ours to commit
        self.driver.clear_pending_state()
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None:
            self.driver.rollback()
            self.events = []
            log.warning('{} rolled back: {}'.format(self.name, exc))
            return False

        self.driver.commit()
        log.debug('{} committed'.format(self.name))

        if self.sink is not None:
            deliver(self.sink, self.events)

        return False


def export(func):
    """Marks a contract method as a mutating entry point run inside a Transaction."""
    @wraps(func)
    def _export(self, *args, **kwargs):
        # Calls made from inside another exported method join its transaction
        if self._transaction is not None:
            return func(self, *args, **kwargs)

        with Transaction(self._driver, self._sink, name='{}.{}'.format(self.contract, func.__name__)) as tx:
            self._transaction = tx
            try:
                return func(self, *args, **kwargs)
            finally:
                self._transaction = None

    return _export
