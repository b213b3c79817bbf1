from nftregistry.db.driver import ContractDriver
from nftregistry.db.encoder import escape_key, unescape_key
from nftregistry.exceptions import StorageError
from nftregistry import config


class Datum:
    def __init__(self, contract, name, driver: ContractDriver):
        self._driver = driver
        self._key = self._driver.make_key(contract, name)


class Variable(Datum):
    def __init__(self, contract, name, driver: ContractDriver, t=None, default_value=None):
        self._type = t if isinstance(t, type) else None
        self._default_value = default_value

        super().__init__(contract, name, driver=driver)

    def set(self, value):
        if self._type is not None and value is not None and not isinstance(value, self._type):
            raise TypeError('Wrong type passed to variable! Expected {}, got {}.'.format(self._type, type(value)))

        self._driver.set(self._key, value)

    def get(self):
        value = self._driver.get(self._key)
        if value is None:
            return self._default_value
        return value


class Hash(Datum):
    def __init__(self, contract, name, driver: ContractDriver, default_value=None):
        super().__init__(contract, name, driver=driver)
        self._delimiter = config.DELIMITER
        self._default_value = default_value

    def _set(self, key, value):
        self._driver.set('{}{}{}'.format(self._key, self._delimiter, key), value)

    def _get(self, item):
        value = self._driver.get('{}{}{}'.format(self._key, self._delimiter, item))

        # Python defaultdict behavior
        if value is None:
            value = self._default_value

        return value

    def _validate_key(self, key):
        if isinstance(key, tuple):
            if len(key) > config.MAX_HASH_DIMENSIONS:
                raise StorageError(reason='too many dimensions ({}) for hash, max is {}'.format(
                    len(key), config.MAX_HASH_DIMENSIONS))

            for k in key:
                if isinstance(k, slice):
                    raise StorageError(reason='slices prohibited in hashes')

            return self._delimiter.join(escape_key(k) for k in key)

        if isinstance(key, slice):
            raise StorageError(reason='slices prohibited in hashes')

        return escape_key(key)

    def _prefix_for_args(self, args):
        prefix = '{}{}'.format(self._key, self._delimiter)
        if args:
            prefix += '{}{}'.format(self._validate_key(args), self._delimiter)

        return prefix

    def keys(self, *args):
        """Returns the unescaped key components that follow the given leading components."""
        prefix = self._prefix_for_args(args)
        return [
            tuple(unescape_key(part) for part in k[len(prefix):].split(self._delimiter))
            for k in self._driver.keys(prefix=prefix)
        ]

    def __setitem__(self, key, value):
        key = self._validate_key(key)
        self._set(key, value)

    def __getitem__(self, key):
        key = self._validate_key(key)
        return self._get(key)

    def __delitem__(self, key):
        key = self._validate_key(key)
        self._set(key, None)
