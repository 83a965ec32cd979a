from nftledger.db.encoder import encode, decode, make_key
from nftledger.logger import get_logger
from nftledger import config
import pymongo
import requests
import re


logger = get_logger('Driver')


# DB maps bytes to bytes
# Driver maps string to python object


class InMemDriver:
    def __init__(self):
        self.db = {}

    def get(self, item: str):
        key = item.encode()
        value = self.db.get(key)
        return decode(value)

    def set(self, key: str, value):
        k = key.encode()
        if value is None:
            self.__delitem__(key)
        else:
            self.db[k] = encode(value).encode()

    def delete(self, key: str):
        self.__delitem__(key)

    def iter(self, prefix: str, length=0):
        p = prefix.encode()

        l = []
        for k in sorted(self.db.keys()):
            if k.startswith(p):
                l.append(k.decode())
            if 0 < length <= len(l):
                break

        return l

    def keys(self):
        return sorted([k.decode() for k in self.db.keys()])

    def flush(self):
        self.db.clear()

    def __getitem__(self, item: str):
        value = self.get(item)
        if value is None:
            raise KeyError
        return value

    def __setitem__(self, key: str, value):
        self.set(key, value)

    def __delitem__(self, key: str):
        k = key.encode()
        try:
            del self.db[k]
        except KeyError:
            pass


class MongoDriver:
    # conn_str see https://www.mongodb.com/docs/manual/reference/connection-string/
    def __init__(self, conn_str=config.MONGO_URI, db=config.MONGO_DB, collection=config.MONGO_COLLECTION):
        self.client = pymongo.MongoClient(conn_str)
        self.db = self.client[db][collection]
        logger.debug(f'Using collection {db}.{collection}')

    def get(self, item: str):
        v = self.db.find_one({'rawKey': item})
        if v is None:
            return None

        return decode(v['value'])

    def set(self, key, value):
        if value is None:
            self.delete(key)
            return

        self.db.update_one({'rawKey': key}, {'$set': {'value': encode(value)}}, upsert=True)

    def delete(self, key: str):
        self.db.delete_one({'rawKey': key})

    def iter(self, prefix: str, length=0):
        cur = self.db.find({'rawKey': {'$regex': '^{}'.format(re.escape(prefix))}})

        keys = []
        for entry in cur:
            keys.append(entry['rawKey'])
            if 0 < length <= len(keys):
                break

        keys.sort()
        return keys

    def keys(self):
        k = []
        for entry in self.db.find({}):
            k.append(entry['rawKey'])
        k.sort()
        return k

    def flush(self):
        self.db.delete_many({})

    def __getitem__(self, item: str):
        value = self.get(item)
        if value is None:
            raise KeyError
        return value

    def __setitem__(self, key: str, value):
        self.set(key, value)

    def __delitem__(self, key: str):
        self.delete(key)


class WebDriver(InMemDriver):
    """Read-only view of a ledger served by nftledger.webserver."""

    def __init__(self, host='http://localhost:{}'.format(config.WEB_SERVER_PORT), timeout=10):
        super().__init__()
        self.host = host
        self.timeout = timeout

    def get(self, item: str):
        # supports item strings like contract.variable:key1:key2

        contract, args = item.split(config.INDEX_SEPARATOR, 1)
        args = args.split(config.DELIMITER)
        variable = args.pop(0)

        keys = ','.join(args)

        r = requests.get(
            f'{self.host}/contracts/{contract}/{variable}',
            params={'key': keys} if keys else None,
            timeout=self.timeout
        )
        return decode(r.json()['value'])

    def set(self, key: str, value):
        raise ReferenceError('WebDriver is read-only.')

    def delete(self, key: str):
        raise ReferenceError('WebDriver is read-only.')

    def flush(self):
        raise ReferenceError('WebDriver is read-only.')


class CacheDriver:
    def __init__(self, driver=None):
        self.pending_writes = {}  # L2 cache, None marks a delete
        self.cache = {}  # L1 cache of committed values
        self.driver = driver or InMemDriver()  # L0

    def find(self, key: str):
        if key in self.pending_writes:
            return self.pending_writes[key]

        if key in self.cache:
            return self.cache[key]

        value = self.driver.get(key)
        self.cache[key] = value

        return value

    def get(self, key: str):
        return self.find(key)

    def set(self, key, value):
        self.pending_writes[key] = value

    def delete(self, key):
        self.set(key, None)

    def commit(self):
        for k, v in self.pending_writes.items():
            if v is None:
                self.driver.delete(k)
            else:
                self.driver.set(k, v)

            self.cache[k] = v

        self.pending_writes.clear()

    def rollback(self):
        # Returns to the committed state, discarding everything written since the last commit
        self.pending_writes.clear()

    def savepoint(self):
        return dict(self.pending_writes)

    def restore(self, savepoint):
        self.pending_writes = dict(savepoint)

    def reset_cache(self):
        self.cache = {}

    def clear_pending_state(self):
        self.rollback()


class LedgerDriver(CacheDriver):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.delimiter = config.INDEX_SEPARATOR
        self.log = get_logger('Driver')

    def items(self, prefix=''):
        # Get all of the items in the cache currently
        _items = {}
        keys = set()

        for k, v in self.pending_writes.items():
            if k.startswith(prefix):
                keys.add(k)
                if v is not None:
                    _items[k] = v

        for k, v in self.cache.items():
            if k.startswith(prefix) and k not in keys:
                keys.add(k)
                if v is not None:
                    _items[k] = v

        # Get all of the keys we need
        db_keys = set(self.driver.iter(prefix=prefix))

        # Subtract the already gotten keys
        for k in db_keys - keys:
            v = self.get(k)
            if v is not None:
                _items[k] = v

        return _items

    def keys(self, prefix=''):
        return sorted(self.items(prefix).keys())

    def make_key(self, contract, variable, args=[]):
        return make_key(contract, variable, args)

    def get_var(self, contract, variable, arguments=[]):
        key = self.make_key(contract, variable, arguments)
        return self.get(key)

    def set_var(self, contract, variable, arguments=[], value=None):
        key = self.make_key(contract, variable, arguments)
        self.set(key, value)

    def flush(self):
        self.log.debug('Flushing driver state')
        self.driver.flush()
        self.reset_cache()
        self.clear_pending_state()
