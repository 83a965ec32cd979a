from collections import namedtuple
from nftledger.logger import get_logger


def _event(name, fields):
    cls = namedtuple(name, fields)

    def to_dict(self):
        d = {'event': name}
        d.update(self._asdict())
        return d

    cls.to_dict = to_dict
    return cls


# sender/to are None for mints and burns
Transfer = _event('Transfer', ['sender', 'to', 'token_id'])
Approval = _event('Approval', ['owner', 'to', 'token_id'])
ApprovalForAll = _event('ApprovalForAll', ['owner', 'operator', 'approved'])


class EventSink:
    def emit(self, event):
        raise NotImplementedError


class ListSink(EventSink):
    def __init__(self):
        self.events = []

    def emit(self, event):
        self.events.append(event)

    def clear(self):
        self.events = []


class LogSink(EventSink):
    def __init__(self, log=None):
        self.log = log or get_logger('Events')

    def emit(self, event):
        self.log.info(event.to_dict())


class MultiSink(EventSink):
    def __init__(self, *sinks):
        self.sinks = list(sinks)

    def emit(self, event):
        for sink in self.sinks:
            sink.emit(event)


class PendingEvents(EventSink):
    """Holds the events of the call in progress until the executor commits or rolls back."""

    def __init__(self):
        self.pending = []

    def emit(self, event):
        self.pending.append(event)

    def take(self):
        events, self.pending = self.pending, []
        return events

    def clear(self):
        self.pending = []
