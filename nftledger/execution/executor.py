from nftledger.execution import runtime
from nftledger.db.driver import LedgerDriver
from nftledger.events import LogSink, PendingEvents
from nftledger.exceptions import LedgerError, PrivateMethod, UnknownMethod
from nftledger.token.nft import NonFungibleToken
from nftledger.logger import get_logger
from nftledger import config
from copy import deepcopy
import threading
import traceback

log = get_logger('LEDGER')


class Executor:
    def __init__(self, driver=None, sink=None, contract=config.DEFAULT_NAMESPACE):
        self.driver = driver

        if not self.driver:
            self.driver = LedgerDriver()

        self.sink = sink or LogSink()
        self.pending_events = PendingEvents()

        self.contract = contract
        self.token = NonFungibleToken(self.driver, self.pending_events, contract=contract)

        # The host serializes calls; this makes a threaded host do the same
        self.lock = threading.RLock()

    def resolve(self, function_name, bypass_privates=False):
        func = self.token.exports().get(function_name)
        if func is not None:
            return func

        func = self.token.privates().get(function_name)
        if func is None:
            raise UnknownMethod(function=function_name)

        if not bypass_privates:
            raise PrivateMethod(function=function_name)

        return func

    def deliver(self, events):
        # State is already durable here; a failing sink cannot undo the call
        for event in events:
            try:
                self.sink.emit(event)
            except Exception as e:
                log.error('Could not deliver {}: {}'.format(event.to_dict(), e))
                log.error(traceback.format_exc())

    def commit(self):
        with self.lock:
            self.driver.commit()
            events = self.pending_events.take()
            self.deliver(events)
            return events

    def rollback(self):
        with self.lock:
            self.driver.rollback()
            self.pending_events.clear()

    def execute(self, sender, function_name, kwargs,
                auto_commit=True,
                bypass_privates=False) -> dict:

        with self.lock:
            savepoint = self.driver.savepoint()
            events_before = len(self.pending_events.pending)

            writes = {}
            events = []
            committed = []

            caller = runtime.rt.set_up(sender)

            try:
                func = self.resolve(function_name, bypass_privates=bypass_privates)

                result = func(**kwargs)
                status_code = 0

                writes = deepcopy(self.driver.pending_writes)
                events = self.pending_events.pending[events_before:]

                if auto_commit:
                    self.driver.commit()
                    committed = self.pending_events.take()
            except Exception as e:
                result = e
                writes, events = {}, []
                if isinstance(e, LedgerError):
                    log.warning('{} called {}: {}'.format(sender, function_name, e))
                else:
                    log.error(str(e))
                    log.error(traceback.format_exc())
                status_code = 1

                # Only this call is undone; earlier uncommitted calls stay pending
                self.driver.restore(savepoint)
                del self.pending_events.pending[events_before:]
            finally:
                runtime.rt.clean_up(caller)

            if committed:
                self.deliver(committed)

            if events:
                log.debug('{} called {}: {}'.format(sender, function_name, [e.to_dict() for e in events]))

            output = {
                'status_code': status_code,
                'result': result,
                'writes': writes,
                'events': [e.to_dict() for e in events],
            }

            return output
