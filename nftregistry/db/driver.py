from nftregistry.db.encoder import encode, decode, make_key
from nftregistry import config
from nftregistry.logger import get_logger

# DB maps bytes to bytes
# Driver maps string to python object

log = get_logger('Driver')


class InMemDriver:
    def __init__(self):
        self.db = {}

    def get(self, item: str):
        return decode(self.db.get(item.encode()))

    def set(self, key: str, value):
        if value is None:
            self.__delitem__(key)
        else:
            self.db[key.encode()] = encode(value).encode()

    def delete(self, key: str):
        self.__delitem__(key)

    def iter(self, prefix: str):
        p = prefix.encode()
        return [k.decode() for k in sorted(self.db.keys()) if k.startswith(p)]

    def keys(self):
        return sorted([k.decode() for k in self.db.keys()])

    def flush(self):
        self.db.clear()

    def __getitem__(self, item: str):
        value = self.get(item)
        if value is None:
            raise KeyError(item)
        return value

    def __setitem__(self, key: str, value):
        self.set(key, value)

    def __delitem__(self, key: str):
        self.db.pop(key.encode(), None)


_MISSING = object()


class CacheDriver:
    def __init__(self, driver=None):
        self.pending_writes = {}  # L1 cache, a None value marks a pending delete
        self.driver = driver or InMemDriver()  # L0

    def find(self, key: str):
        value = self.pending_writes.get(key, _MISSING)
        if value is not _MISSING:
            return value

        return self.driver.get(key)

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

        self.pending_writes.clear()

    def rollback(self):
        # Returns to driver state which is whatever it was prior to the write session
        self.pending_writes.clear()

    def clear_pending_state(self):
        self.rollback()


class ContractDriver(CacheDriver):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.delimiter = config.INDEX_SEPARATOR

    def items(self, prefix=''):
        _items = {}
        keys = set()

        for k, v in self.pending_writes.items():
            if k.startswith(prefix):
                keys.add(k)
                if v is not None:
                    _items[k] = v

        # Subtract the keys already staged, including staged deletes
        for k in set(self.driver.iter(prefix=prefix)) - keys:
            _items[k] = self.get(k)

        return dict(sorted(_items.items()))

    def keys(self, prefix=''):
        return list(self.items(prefix).keys())

    def make_key(self, contract, variable, args=[]):
        return make_key(contract, variable, args)

    def get_var(self, contract, variable, arguments=[]):
        key = self.make_key(contract, variable, arguments)
        return self.get(key)

    def get_contract_keys(self, name):
        return self.keys(name + self.delimiter)

    def delete_contract(self, name):
        for key in self.get_contract_keys(name):
            self.delete(key)
        self.commit()

    def flush(self):
        self.driver.flush()
        self.clear_pending_state()
        log.debug('Flushed all state')
