from nftledger.db.driver import LedgerDriver
from nftledger import config


class Datum:
    def __init__(self, contract, name, driver: LedgerDriver):
        self._driver = driver
        self._key = self._driver.make_key(contract, name)


class Variable(Datum):
    def __init__(self, contract, name, driver: LedgerDriver, t=None):
        self._type = t if isinstance(t, type) else None
        super().__init__(contract, name, driver=driver)

    def set(self, value):
        if self._type is not None:
            assert isinstance(value, self._type), 'Wrong type for {}! Expected {}, got {}.'.format(
                self._key, self._type, type(value)
            )

        self._driver.set(self._key, value)

    def get(self):
        return self._driver.get(self._key)


class Hash(Datum):
    """
    A persistent map. Reading an absent key gives the default value, and writing
    None removes the key from storage. Tuple keys address more than one dimension,
    e.g. operators[owner, operator].
    """
    def __init__(self, contract, name, driver: LedgerDriver, default_value=None):
        super().__init__(contract, name, driver=driver)
        self._delimiter = config.DELIMITER
        self._default_value = default_value

    def _storage_key(self, key):
        parts = key if isinstance(key, tuple) else (key,)

        assert len(parts) <= config.MAX_HASH_DIMENSIONS, 'Too many dimensions ({}) for hash. Max is {}'.format(
            len(parts), config.MAX_HASH_DIMENSIONS
        )

        parts = [str(p) for p in parts]
        for p in parts:
            assert config.DELIMITER not in p, 'Illegal delimiter in key.'
            assert config.INDEX_SEPARATOR not in p, 'Illegal separator in key.'

        key = self._delimiter.join(parts)
        assert len(key) <= config.MAX_KEY_SIZE, 'Key is too long ({}). Max is {}.'.format(len(key), config.MAX_KEY_SIZE)

        return '{}{}{}'.format(self._key, self._delimiter, key)

    def __setitem__(self, key, value):
        self._driver.set(self._storage_key(key), value)

    def __getitem__(self, key):
        value = self._driver.get(self._storage_key(key))
        return self._default_value if value is None else value

    def __delitem__(self, key):
        self[key] = None
