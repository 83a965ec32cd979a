from nftledger.db.orm import Hash
from nftledger.db.driver import LedgerDriver
from nftledger.events import EventSink, Transfer
from nftledger.exceptions import AlreadyMinted, InvalidTokenUri, NotFound, OwnerMismatch, Unauthorized, ZeroRecipient
from nftledger.token.ownership import OwnershipLedger, validate_account, validate_token_id
from nftledger.token.approvals import ApprovalRegistry
from nftledger import config


class TransferEngine:
    """
    Moves tokens between the two states a token id can be in: unminted, or owned by an account.

    Every method checks all of its preconditions before its first write. The executor
    still rolls back pending writes on any failure, so a trap raised half way through
    (a balance underflow, for instance) never leaves a partial transition behind.
    """

    def __init__(self, ledger: OwnershipLedger, registry: ApprovalRegistry, events: EventSink,
                 driver: LedgerDriver, contract=config.DEFAULT_NAMESPACE):
        self.ledger = ledger
        self.registry = registry
        self.events = events

        self.uris = Hash(contract, config.URIS_HASH, driver=driver)

    def _require_owner(self, token_id):
        owner = self.ledger.owner_of(token_id)
        if owner is config.NO_ACCOUNT:
            raise NotFound(token_id=token_id)
        return owner

    def _require_recipient(self, to, token_id):
        if to is config.NO_ACCOUNT:
            raise ZeroRecipient(token_id=token_id)
        validate_account(to)

    def is_approved_or_owner(self, caller, token_id):
        owner = self._require_owner(token_id)

        return caller == owner or \
               self.registry.is_approved_for_all(owner, caller) or \
               self.registry.get_approved(token_id) == caller

    def mint(self, to, token_id):
        validate_token_id(token_id)
        self._require_recipient(to, token_id)

        if self.ledger.exists(token_id):
            raise AlreadyMinted(token_id=token_id)

        self.ledger.adjust_balance(to, 1)
        self.ledger.set_owner(token_id, to)

        self.events.emit(Transfer(config.NO_ACCOUNT, to, token_id))

    def transfer(self, caller, sender, to, token_id):
        owner = self._require_owner(token_id)

        if caller is config.NO_ACCOUNT or not self.is_approved_or_owner(caller, token_id):
            raise Unauthorized(caller=caller, token_id=token_id)

        if sender != owner:
            raise OwnerMismatch(sender=sender, owner=owner, token_id=token_id)

        self._require_recipient(to, token_id)

        self.registry.clear(token_id)
        self.ledger.adjust_balance(sender, -1)
        self.ledger.adjust_balance(to, 1)
        self.ledger.set_owner(token_id, to)

        self.events.emit(Transfer(sender, to, token_id))

    def burn(self, token_id):
        owner = self._require_owner(token_id)

        self.registry.clear(token_id)
        self.ledger.adjust_balance(owner, -1)
        self.ledger.set_owner(token_id, config.NO_ACCOUNT)
        self.uris[token_id] = None

        self.events.emit(Transfer(owner, config.NO_ACCOUNT, token_id))

    def token_uri(self, token_id):
        self._require_owner(token_id)

        uri = self.uris[token_id]
        return uri if uri is not None else ''

    def set_token_uri(self, token_id, uri: str):
        self._require_owner(token_id)

        if not isinstance(uri, str):
            raise InvalidTokenUri(token_id=token_id, uri=uri)

        self.uris[token_id] = uri
