from nftledger.db.orm import Hash
from nftledger.db.driver import LedgerDriver
from nftledger.events import EventSink, Approval, ApprovalForAll
from nftledger.exceptions import NotFound, SelfApproval, Unauthorized
from nftledger.token.ownership import OwnershipLedger, is_account, validate_account
from nftledger import config


class ApprovalRegistry:
    def __init__(self, ledger: OwnershipLedger, events: EventSink, driver: LedgerDriver,
                 contract=config.DEFAULT_NAMESPACE):
        self.ledger = ledger
        self.events = events

        self.approvals = Hash(contract, config.APPROVALS_HASH, driver=driver)
        self.operators = Hash(contract, config.OPERATORS_HASH, driver=driver, default_value=False)

    def _owner(self, token_id):
        owner = self.ledger.owner_of(token_id)
        if owner is config.NO_ACCOUNT:
            raise NotFound(token_id=token_id)
        return owner

    def get_approved(self, token_id):
        self._owner(token_id)
        return self.approvals[token_id]

    def is_approved_for_all(self, owner, operator):
        # Anything that could never have been approved is simply not approved
        if not is_account(owner) or not is_account(operator):
            return False

        return self.operators[owner, operator] is True

    def set_approval_for_all(self, caller, operator, approved: bool):
        validate_account(caller)
        validate_account(operator)

        if operator == caller:
            raise SelfApproval(account=caller)

        approved = bool(approved)
        self.operators[caller, operator] = True if approved else None

        self.events.emit(ApprovalForAll(caller, operator, approved))

    def approve(self, caller, to, token_id):
        owner = self._owner(token_id)

        validate_account(to)

        if to == owner:
            raise SelfApproval(account=owner)

        if not (caller == owner or self.is_approved_for_all(owner, caller)):
            raise Unauthorized(caller=caller, token_id=token_id)

        self.approvals[token_id] = to

        self.events.emit(Approval(owner, to, token_id))

    def clear(self, token_id):
        self.approvals[token_id] = config.NO_ACCOUNT
