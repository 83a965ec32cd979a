from nftledger.exceptions import BalanceOverflow, BalanceUnderflow
from nftledger import config

UINT256_MAX = config.UINT256_MAX


def is_uint256(x):
    # bool is an int subclass but never a quantity
    return type(x) == int and 0 <= x <= UINT256_MAX


def checked_add(a: int, b: int):
    assert is_uint256(a) and is_uint256(b), 'Operands must be unsigned 256-bit integers.'

    result = a + b
    if result > UINT256_MAX:
        raise BalanceOverflow(a=a, b=b)

    return result


def checked_sub(a: int, b: int):
    assert is_uint256(a) and is_uint256(b), 'Operands must be unsigned 256-bit integers.'

    if b > a:
        raise BalanceUnderflow(a=a, b=b)

    return a - b
