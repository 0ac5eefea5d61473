import json
from vban.config import INDEX_SEPARATOR, DELIMITER

# Anything outside of a signed 64 bit integer is written as a string so that
# 128 bit balances survive stores that cap integer width
MIN_INT = -(2 ** 63)
MAX_INT = 2 ** 63 - 1

BIG_INT_KEY = '__big_int__'


def encode_int(value: int):
    if MIN_INT < value < MAX_INT:
        return value

    return {
        BIG_INT_KEY: str(value)
    }


def encode_ints(data):
    if isinstance(data, bool):
        return data
    elif isinstance(data, int):
        return encode_int(data)
    elif isinstance(data, dict):
        return {k: encode_ints(v) for k, v in data.items()}
    elif isinstance(data, (list, tuple)):
        return [encode_ints(i) for i in data]
    return data


# json.dumps writes ints of any width, so big ints are rewritten before they reach it
def encode(data):
    return json.dumps(encode_ints(data), separators=(',', ':'))


def as_object(d):
    if BIG_INT_KEY in d:
        return int(d[BIG_INT_KEY])
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


def make_key(ledger, variable, args=[]):
    ledger_variable = INDEX_SEPARATOR.join((ledger, variable))
    if args:
        return DELIMITER.join((ledger_variable, *[str(arg) for arg in args]))
    return ledger_variable


def encode_kv(key, value):
    k = key.encode()
    v = encode(value).encode()
    return k, v


def decode_kv(key, value):
    k = key.decode()
    v = decode(value)
    return k, v
