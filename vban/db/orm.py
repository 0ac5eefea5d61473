from vban.db.driver import LedgerDriver
from vban import config


class Datum:
    def __init__(self, ledger, name, driver: LedgerDriver):
        self._driver = driver
        self._key = self._driver.make_key(ledger, name)


class Variable(Datum):
    def __init__(self, ledger, name, driver: LedgerDriver, t=None):
        self._type = None

        if isinstance(t, type):
            self._type = t

        super().__init__(ledger, name, driver=driver)

    def set(self, value):
        if self._type is not None:
            assert isinstance(value, self._type), 'Wrong type passed to variable! Expected {}, got {}.'.format(
                self._type,
                type(value)
            )

        self._driver.set(self._key, value)

    def get(self):
        return self._driver.get(self._key)


class Hash(Datum):
    def __init__(self, ledger, name, driver: LedgerDriver, default_value=None):
        super().__init__(ledger, name, driver=driver)
        self._delimiter = config.DELIMITER
        self._default_value = default_value

    def _set(self, key, value):
        self._driver.set('{}{}{}'.format(self._key, self._delimiter, key), value)

    def _get(self, item):
        value = self._driver.get('{}{}{}'.format(self._key, self._delimiter, item))

        # Add Python defaultdict behavior for absent keys
        if value is None:
            value = self._default_value

        return value

    def _validate_key(self, key):
        assert isinstance(key, str), 'Keys must be strings, got {}.'.format(type(key))

        assert config.DELIMITER not in key, 'Illegal delimiter in key.'
        assert config.INDEX_SEPARATOR not in key, 'Illegal separator in key.'
        assert len(key) > 0, 'Empty key.'

        assert len(key) <= config.MAX_KEY_SIZE, 'Key is too long ({}). Max is {}.'.format(len(key), config.MAX_KEY_SIZE)
        return key

    def _prefix(self):
        return '{}{}'.format(self._key, self._delimiter)

    def items(self):
        prefix = self._prefix()
        return {k[len(prefix):]: v for k, v in self._driver.items(prefix=prefix).items()}

    def __setitem__(self, key, value):
        key = self._validate_key(key)
        self._set(key, value)

    def __getitem__(self, key):
        key = self._validate_key(key)
        return self._get(key)
