import json
from nftledger.config import INDEX_SEPARATOR, DELIMITER

MONGO_MIN_INT = -(2 ** 63)
MONGO_MAX_INT = 2 ** 63 - 1

##
# Balances and token ids are unsigned 256-bit integers, which is far past what MongoDB can hold in a
# native int (8 bytes). Anything outside that range is stored as a tagged string and cast back on decode.
##


def encode_int(value: int):
    if MONGO_MIN_INT < value < MONGO_MAX_INT:
        return value

    return {
        '__big_int__': str(value)
    }


def encode(data):
    # json only lets you hook types it cannot already serialize, and int is not one of them
    if isinstance(data, int) and not isinstance(data, bool):
        data = encode_int(data)

    return json.dumps(data, separators=(',', ':'))


def as_object(d):
    if '__big_int__' in d:
        return int(d['__big_int__'])
    return dict(d)


def decode(data):
    if data is None:
        return None

    if isinstance(data, bytes):
        data = data.decode()

    try:
        return json.loads(data, object_hook=as_object)
    except json.decoder.JSONDecodeError:
        return None


def make_key(contract, variable, args=[]):
    contract_variable = INDEX_SEPARATOR.join((contract, variable))
    if args:
        return DELIMITER.join((contract_variable, *[str(arg) for arg in args]))
    return contract_variable
