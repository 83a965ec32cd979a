from nftledger.db.orm import Hash
from nftledger.db.driver import LedgerDriver
from nftledger.exceptions import InvalidAccount, InvalidTokenId
from nftledger.stdlib import uint256
from nftledger import config


def is_account(account):
    return isinstance(account, str) and \
           0 < len(account) <= config.MAX_ACCOUNT_SIZE and \
           config.DELIMITER not in account and \
           config.INDEX_SEPARATOR not in account


def validate_account(account):
    if account is config.NO_ACCOUNT or not is_account(account):
        raise InvalidAccount(account=account)
    return account


def validate_token_id(token_id):
    if not uint256.is_uint256(token_id):
        raise InvalidTokenId(token_id=token_id)
    return token_id


class OwnershipLedger:
    """
    Who owns each token, and how many tokens each account holds.
    No policy lives here; the transfer engine is the only writer.
    """

    def __init__(self, driver: LedgerDriver, contract=config.DEFAULT_NAMESPACE):
        self.owners = Hash(contract, config.OWNERS_HASH, driver=driver)
        self.balances = Hash(contract, config.BALANCES_HASH, driver=driver, default_value=0)

    def owner_of(self, token_id):
        validate_token_id(token_id)
        return self.owners[token_id]

    def exists(self, token_id):
        return self.owner_of(token_id) is not config.NO_ACCOUNT

    def balance_of(self, account):
        validate_account(account)
        return self.balances[account]

    def set_owner(self, token_id, account):
        validate_token_id(token_id)
        self.owners[token_id] = account

    def adjust_balance(self, account, delta: int):
        balance = self.balance_of(account)

        if delta >= 0:
            balance = uint256.checked_add(balance, delta)
        else:
            balance = uint256.checked_sub(balance, -delta)

        # Zero balances are removed rather than stored
        self.balances[account] = balance if balance > 0 else None
        return balance
