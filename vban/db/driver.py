from vban.db.encoder import encode_kv, decode_kv, decode, make_key
import logging


logger = logging.getLogger(__name__)


# DB maps bytes to bytes
# Driver maps string to python object
class InMemDriver:
    def __init__(self):
        self.db = {}

    def get(self, item: str):
        res = self.db.get(item.encode())
        if res is None:
            return None
        return decode(res)

    def set(self, key: str, value):
        if value is None:
            self.delete(key)
        else:
            k, v = encode_kv(key, value)
            self.db[k] = v

    def delete(self, key: str):
        self.db.pop(key.encode(), None)

    def items(self, prefix=''):
        p = prefix.encode()
        return dict(decode_kv(k, v) for k, v in sorted(self.db.items()) if k.startswith(p))

    def flush(self):
        self.db.clear()


class CacheDriver:
    def __init__(self, driver=None):
        self.pending_writes = {}  # L1 cache
        self.cache = {}  # L0 cache of committed reads
        self.driver = driver or InMemDriver()

    def find(self, key: str):
        if key in self.pending_writes:
            return self.pending_writes[key]

        value = self.cache.get(key)
        if value is not None:
            return value

        value = self.driver.get(key)
        if value is not None:
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
                self.cache.pop(k, None)
            else:
                self.driver.set(k, v)
                self.cache[k] = v

        logger.debug('Committed {} writes'.format(len(self.pending_writes)))
        self.pending_writes.clear()

    def rollback(self, pending_writes=None):
        # Without a snapshot, returns to the committed state
        logger.debug('Rolling back {} writes'.format(len(self.pending_writes)))
        self.pending_writes = dict(pending_writes or {})

    def clear_pending_state(self):
        self.rollback()


class LedgerDriver(CacheDriver):
    def items(self, prefix=''):
        _items = self.driver.items(prefix=prefix)

        # Uncommitted writes shadow whatever is on disk
        for k, v in self.pending_writes.items():
            if not k.startswith(prefix):
                continue
            if v is None:
                _items.pop(k, None)
            else:
                _items[k] = v

        return dict(sorted(_items.items()))

    def make_key(self, ledger, variable, args=[]):
        return make_key(ledger, variable, args)

    def flush(self):
        self.driver.flush()
        self.cache.clear()
        self.clear_pending_state()
