import os

LEDGER_NAME = 'vban'

DELIMITER = ':'
INDEX_SEPARATOR = '.'

MAX_KEY_SIZE = 1024

SUPPLY_KEY = 'total_supply'
BALANCES_KEY = 'balances'

# Balances mirror an unsigned 128 bit integer
BALANCE_BITS = 128
MAX_BALANCE = 2 ** BALANCE_BITS - 1

PRIVATE_METHOD_PREFIX = '_'

DEFAULT_SIGNER = 'sys'
DEFAULT_TOTAL_SUPPLY = 1000000

WEB_SERVER_PORT = 8080
NUM_WORKERS = 1

SIGNER = os.getenv('VBAN_SIGNER', DEFAULT_SIGNER)
TOTAL_SUPPLY = int(os.getenv('VBAN_TOTAL_SUPPLY', DEFAULT_TOTAL_SUPPLY))
