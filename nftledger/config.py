import os

# Storage layout. Keys are <namespace><INDEX_SEPARATOR><variable><DELIMITER><key>...
DELIMITER = ':'
INDEX_SEPARATOR = '.'

MAX_HASH_DIMENSIONS = 16
MAX_KEY_SIZE = 1024

# Operator approvals key on two accounts joined by DELIMITER, which must still fit in MAX_KEY_SIZE
MAX_ACCOUNT_SIZE = (MAX_KEY_SIZE - len(DELIMITER)) // 2

DEFAULT_NAMESPACE = 'nft'

NAME_KEY = 'name'
SYMBOL_KEY = 'symbol'
OWNERS_HASH = 'owners'
BALANCES_HASH = 'balances'
APPROVALS_HASH = 'approvals'
OPERATORS_HASH = 'operators'
URIS_HASH = 'token_uris'

# The "no account" value. Unminted owners and cleared approvals read back as this.
NO_ACCOUNT = None

UINT256_MAX = 2 ** 256 - 1

# Durable storage
MONGO_URI = os.getenv('NFTLEDGER_MONGO_URI', 'mongodb://localhost:27017')
MONGO_DB = os.getenv('NFTLEDGER_MONGO_DB', 'nftledger')
MONGO_COLLECTION = os.getenv('NFTLEDGER_MONGO_COLLECTION', 'state')

# Webserver
WEB_SERVER_HOST = os.getenv('NFTLEDGER_HOST', '0.0.0.0')
WEB_SERVER_PORT = int(os.getenv('NFTLEDGER_PORT', 8080))
NUM_WORKERS = 1
