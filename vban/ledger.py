"""
The ledger store: a fixed total supply and a mapping of account to balance,
both held as state on a ``LedgerDriver``.

Balances are only ever rewritten through ``Ledger._set_balance``, which the
transfer engine calls in debit/credit pairs. Nothing outside of
``vban.execution`` should call it.
"""
from vban.db.driver import LedgerDriver
from vban.db.orm import Variable, Hash
from vban.exceptions import InvalidBalance, BalanceOverflow, LedgerExists
from vban import config


def is_balance(value) -> bool:
    # bool is an int subclass but never a quantity
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= config.MAX_BALANCE


def validate_balance(value) -> int:
    if not is_balance(value):
        raise InvalidBalance(value=value)
    return value


class Ledger:
    def __init__(self, name=config.LEDGER_NAME, driver: LedgerDriver=None):
        self.name = name
        self.driver = driver or LedgerDriver()

        self._supply = Variable(self.name, config.SUPPLY_KEY, driver=self.driver, t=int)
        self._balances = Hash(self.name, config.BALANCES_KEY, driver=self.driver, default_value=0)

    @classmethod
    def new(cls, caller, total_supply, name=config.LEDGER_NAME, driver: LedgerDriver=None):
        """
        Construct a ledger, crediting the entire supply to ``caller``.

        :param caller: The constructing account
        :param total_supply: The fixed supply of the ledger
        :param name: Namespace of the ledger's keys in state
        :param driver: State driver. A fresh in-memory one is used if omitted
        :return: The constructed ``Ledger``
        """
        validate_balance(total_supply)

        ledger = cls(name=name, driver=driver)

        if ledger.exists():
            raise LedgerExists(name=name)

        ledger._balances[caller] = total_supply
        ledger._supply.set(total_supply)

        ledger.driver.commit()

        return ledger

    def exists(self) -> bool:
        return self._supply.get() is not None

    def total_supply(self) -> int:
        return self._supply.get() or 0

    def balance_of(self, account) -> int:
        return self._balances[account]

    def holders(self) -> dict:
        return self._balances.items()

    def _set_balance(self, account, value):
        if not is_balance(value):
            raise BalanceOverflow(value=value)

        self._balances[account] = value
