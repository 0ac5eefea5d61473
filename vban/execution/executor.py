import threading
import traceback
from copy import deepcopy

from vban.db.driver import LedgerDriver
from vban.execution.transfer import transfer_token
from vban.exceptions import VbanError, LedgerNotFound
from vban.ledger import Ledger
from vban.logger import get_logger
from vban import config

log = get_logger('VBAN')


class Executor:
    def __init__(self, driver=None, name=config.LEDGER_NAME):
        self.driver = driver

        if not self.driver:
            self.driver = LedgerDriver()

        self.name = name
        self.ledger = Ledger(name=self.name, driver=self.driver)

        # One authoritative ledger per executor; every call runs to completion under this lock
        self.lock = threading.RLock()

        self.functions = {
            'transfer': self._transfer,
            'balance_of': self._balance_of,
            'total_supply': self._total_supply,
        }

    def _transfer(self, sender, to, value):
        transfer_token(self.ledger, sender=sender, to=to, value=value)

    def _balance_of(self, sender, account):
        return self.ledger.balance_of(account)

    def _total_supply(self, sender):
        return self.ledger.total_supply()

    def construct(self, sender, total_supply):
        with self.lock:
            try:
                self.ledger = Ledger.new(caller=sender, total_supply=total_supply, name=self.name, driver=self.driver)
            except Exception:
                self.driver.clear_pending_state()
                raise

            log.info('Ledger {} constructed by {} with supply {}'.format(self.name, sender, total_supply))
            return self.ledger

    def execute(self, sender, function_name, kwargs, auto_commit=True) -> dict:
        assert not function_name.startswith(config.PRIVATE_METHOD_PREFIX), 'Private method not callable.'
        assert function_name in self.functions, 'Unknown function {}.'.format(function_name)

        func = self.functions[function_name]

        with self.lock:
            # Earlier uncommitted writes survive a failure of this call
            snapshot = dict(self.driver.pending_writes)

            try:
                if not self.ledger.exists():
                    raise LedgerNotFound(name=self.name)

                status_code = 0
                result = func(sender, **kwargs)

                writes = deepcopy(self.driver.pending_writes)

                if auto_commit:
                    self.driver.commit()
            except Exception as e:
                result = e
                status_code = 1
                writes = {}

                if isinstance(e, VbanError):
                    log.warning(str(e))
                else:
                    log.error(str(e))
                    log.error(traceback.format_exc())

                self.driver.rollback(snapshot)

        return {
            'status_code': status_code,
            'result': result,
            'writes': writes,
        }
