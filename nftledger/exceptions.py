class LedgerError(Exception):
    """
    The base exception for the ledger. The fmt directive
    will be overloaded by the inheriting classes

    :ivar msg: The message associated with the error
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs


class NotFound(LedgerError):
    """
    The token has not been minted, or has been burned

    :ivar token_id: The token identifier that was looked up
    """
    fmt = "Token '{token_id}' does not exist"


class InvalidAccount(LedgerError):
    """
    The "no account" value, or something that is not an account,
    was supplied where a real account is required

    :ivar account: The offending value
    """
    fmt = "'{account}' is not a valid account"


class InvalidTokenId(LedgerError):
    """
    The token identifier is not an unsigned 256-bit integer

    :ivar token_id: The offending value
    """
    fmt = "'{token_id}' is not a valid token id"


class Unauthorized(LedgerError):
    """
    The caller is neither the owner, an operator of the owner,
    nor approved for the token

    :ivar caller: The account that made the call
    :ivar token_id: The token the call targeted
    """
    fmt = "'{caller}' is not the owner of token '{token_id}' nor approved for it"


class SelfApproval(LedgerError):
    """
    An approval would point an account back at itself

    :ivar account: The owner or caller being approved
    """
    fmt = "Approval to the current owner '{account}'"


class OwnerMismatch(LedgerError):
    """
    The claimed sender of a transfer is not the token's owner

    :ivar sender: The claimed sender
    :ivar owner: The actual owner
    :ivar token_id: The token being transferred
    """
    fmt = "Token '{token_id}' is owned by '{owner}', not '{sender}'"


class AlreadyMinted(LedgerError):
    """
    :ivar token_id: The token identifier already in use
    """
    fmt = "Token '{token_id}' already minted"


class ZeroRecipient(LedgerError):
    """
    :ivar token_id: The token being minted or transferred to no account
    """
    fmt = "Token '{token_id}' cannot be sent to the zero account"


class AlreadyConstructed(LedgerError):
    """
    :ivar name: The name the ledger was constructed with
    """
    fmt = "Ledger '{name}' has already been constructed"


class PrivateMethod(LedgerError):
    fmt = "Private method '{function}' not callable"


class UnknownMethod(LedgerError):
    fmt = "Unknown method '{function}'"


class BalanceUnderflow(LedgerError, ArithmeticError):
    fmt = "Unsigned 256-bit underflow: {a} - {b}"


class BalanceOverflow(LedgerError, ArithmeticError):
    fmt = "Unsigned 256-bit overflow: {a} + {b}"


class InvalidTokenUri(LedgerError):
    """
    :ivar token_id: The token whose URI was being set
    :ivar uri: The offending value, which is not a string
    """
    fmt = "'{uri}' is not a valid URI for token '{token_id}'"
