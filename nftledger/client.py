from nftledger.execution.executor import Executor
from nftledger.db.driver import LedgerDriver
from nftledger.events import ListSink, LogSink, MultiSink
from nftledger.exceptions import AlreadyConstructed
from functools import partial

from . import config


class TokenContract:
    def __init__(self, name, signer, executor: Executor):
        self.name = name
        self.signer = signer
        self.executor = executor

        # set up virtual functions, one per exported method
        for func in self.executor.token.exports():
            setattr(self, func, partial(self._abstract_function_call,
                                        signer=self.signer,
                                        executor=self.executor,
                                        func=func))

    def keys(self):
        return self.executor.driver.keys(self.name)

    def quick_read(self, variable, key=None, args=None):
        a = []

        if key is not None:
            a.append(key)

        if args is not None and isinstance(args, list):
            for arg in args:
                a.append(arg)

        k = self.executor.driver.make_key(contract=self.name, variable=variable, args=a)
        return self.executor.driver.get(k)

    def run_private_function(self, f, signer=None, **kwargs):
        # The privilege is granted to this one call only
        return self._abstract_function_call(signer=signer or self.signer, executor=self.executor,
                                            func=f, bypass_privates=True, **kwargs)

    def _abstract_function_call(self, signer, executor, func, bypass_privates=False, **kwargs):
        output = executor.execute(sender=signer,
                                  function_name=func,
                                  kwargs=kwargs,
                                  bypass_privates=bypass_privates)

        if output['status_code'] == 1:
            raise output['result']

        return output['result']


class LedgerClient:
    def __init__(self, signer='sys',
                 driver=None,
                 name=None,
                 symbol=None,
                 contract=config.DEFAULT_NAMESPACE,
                 sink=None):

        self.raw_driver = driver or LedgerDriver()
        self.signer = signer
        self.contract_name = contract

        # Every delivered event is recorded here, then passed on
        self.events = ListSink()
        sinks = [self.events, LogSink()]
        if sink is not None:
            sinks.append(sink)

        self.executor = Executor(driver=self.raw_driver, sink=MultiSink(*sinks), contract=contract)

        if name is not None:
            self.construct(name, symbol)

    @property
    def token(self):
        return self.executor.token

    def construct(self, name, symbol):
        # Reopening durable state with the same metadata is allowed; anything else is a second construction
        if self.token.constructed():
            if self.token.get_name() == name and self.token.get_symbol() == symbol:
                return
            raise AlreadyConstructed(name=self.token.get_name())

        self.token.construct(name, symbol)
        self.raw_driver.commit()

    def flush(self):
        # flushes db and recorded events; metadata must be constructed again
        self.raw_driver.flush()
        self.executor.pending_events.clear()
        self.events.clear()

    def get_contract(self, signer=None):
        return TokenContract(name=self.contract_name,
                             signer=signer or self.signer,
                             executor=self.executor)

    def call(self, function, signer=None, **kwargs):
        contract = self.get_contract(signer)
        return contract._abstract_function_call(signer=contract.signer,
                                                executor=self.executor,
                                                func=function,
                                                **kwargs)

    def read_token(self, token_id):
        # One consistent view: no call can land between the reads
        with self.executor.lock:
            return {
                'token_id': token_id,
                'owner': self.call('owner_of', token_id=token_id),
                'approved': self.call('get_approved', token_id=token_id),
                'uri': self.call('get_token_uri', token_id=token_id)
            }

    def mint(self, to, token_id, signer=None):
        return self.get_contract(signer).run_private_function('mint', to=to, token_id=token_id)

    def burn(self, token_id, signer=None):
        return self.get_contract(signer).run_private_function('burn', token_id=token_id)

    def set_token_uri(self, token_id, uri, signer=None):
        return self.get_contract(signer).run_private_function('set_token_uri', token_id=token_id, uri=uri)

    def get_var(self, variable, arguments=[]):
        return self.raw_driver.get_var(self.contract_name, variable, arguments)
