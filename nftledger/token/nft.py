from nftledger.db.orm import Variable
from nftledger.db.driver import LedgerDriver
from nftledger.events import EventSink
from nftledger.exceptions import AlreadyConstructed, NotFound
from nftledger.execution.runtime import rt
from nftledger.token.ownership import OwnershipLedger
from nftledger.token.approvals import ApprovalRegistry
from nftledger.token.engine import TransferEngine
from nftledger import config


class NonFungibleToken:
    """
    The callable surface of the ledger. Every method reads the caller from the runtime
    context; the executor is responsible for setting it and for making each call atomic.
    """

    def __init__(self, driver: LedgerDriver, events: EventSink, contract=config.DEFAULT_NAMESPACE):
        self.contract = contract

        self.name = Variable(contract, config.NAME_KEY, driver=driver, t=str)
        self.symbol = Variable(contract, config.SYMBOL_KEY, driver=driver, t=str)

        self.ledger = OwnershipLedger(driver, contract=contract)
        self.registry = ApprovalRegistry(self.ledger, events, driver, contract=contract)
        self.engine = TransferEngine(self.ledger, self.registry, events, driver, contract=contract)

    def exports(self):
        return {
            'get_name': self.get_name,
            'get_symbol': self.get_symbol,
            'get_token_uri': self.get_token_uri,
            'balance_of': self.balance_of,
            'owner_of': self.owner_of,
            'get_approved': self.get_approved,
            'is_approved_for_all': self.is_approved_for_all,
            'approve': self.approve,
            'set_approval_for_all': self.set_approval_for_all,
            'transfer_from': self.transfer_from,
        }

    def privates(self):
        return {
            'mint': self.mint,
            'burn': self.burn,
            'set_token_uri': self.set_token_uri,
        }

    def constructed(self):
        return self.name.get() is not None

    def construct(self, name: str, symbol: str):
        if self.constructed():
            raise AlreadyConstructed(name=self.name.get())

        self.name.set(name)
        self.symbol.set(symbol)

    def get_name(self):
        return self.name.get()

    def get_symbol(self):
        return self.symbol.get()

    def get_token_uri(self, token_id: int):
        return self.engine.token_uri(token_id)

    def balance_of(self, account: str):
        return self.ledger.balance_of(account)

    def owner_of(self, token_id: int):
        owner = self.ledger.owner_of(token_id)
        if owner is config.NO_ACCOUNT:
            raise NotFound(token_id=token_id)
        return owner

    def get_approved(self, token_id: int):
        return self.registry.get_approved(token_id)

    def is_approved_for_all(self, owner: str, operator: str):
        return self.registry.is_approved_for_all(owner, operator)

    def approve(self, to: str, token_id: int):
        self.registry.approve(rt.context.caller, to, token_id)

    def set_approval_for_all(self, operator: str, approved: bool):
        self.registry.set_approval_for_all(rt.context.caller, operator, approved)

    def transfer_from(self, sender: str, to: str, token_id: int):
        self.engine.transfer(rt.context.caller, sender, to, token_id)

    def mint(self, to: str, token_id: int):
        self.engine.mint(to, token_id)

    def burn(self, token_id: int):
        self.engine.burn(token_id)

    def set_token_uri(self, token_id: int, uri: str):
        self.engine.set_token_uri(token_id, uri)
