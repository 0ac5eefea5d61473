from vban.ledger import Ledger, validate_balance
from vban.exceptions import InsufficientBalance, BalanceOverflow
from vban import config


def checked_add(a: int, b: int) -> int:
    result = a + b
    if result > config.MAX_BALANCE:
        raise BalanceOverflow(value=result)
    return result


def transfer_token(ledger: Ledger, sender, to, value: int):
    """
    Move ``value`` from ``sender`` to ``to``.

    The sufficiency check happens before any write, so a failed transfer
    leaves the ledger untouched. The credit reads ``to`` after the debit has
    been written, which makes a transfer to oneself cancel out.
    """
    validate_balance(value)

    # Reading the destination first rejects a malformed key before anything is written
    ledger.balance_of(to)

    from_balance = ledger.balance_of(sender)
    if from_balance < value:
        raise InsufficientBalance(account=sender, balance=from_balance, value=value)

    ledger._set_balance(sender, from_balance - value)

    to_balance = ledger.balance_of(to)
    ledger._set_balance(to, checked_add(to_balance, value))
