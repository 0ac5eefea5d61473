from vban.execution.executor import Executor
from vban.db.driver import LedgerDriver
from vban import config


class LedgerClient:
    def __init__(self, signer=config.DEFAULT_SIGNER,
                 driver=None,
                 name=config.LEDGER_NAME):

        self.raw_driver = driver or LedgerDriver()
        self.executor = Executor(driver=self.raw_driver, name=name)
        self.signer = signer
        self.name = name

    def flush(self):
        # wipes the ledger, which then has to be constructed again
        self.raw_driver.flush()

    def new(self, total_supply):
        self.executor.construct(sender=self.signer, total_supply=total_supply)
        return self

    def _call(self, func, signer=None, **kwargs):
        output = self.executor.execute(sender=self.signer if signer is None else signer,
                                       function_name=func,
                                       kwargs=kwargs)

        if output['status_code'] == 1:
            raise output['result']

        return output['result']

    def total_supply(self):
        return self._call('total_supply')

    def balance_of(self, account):
        return self._call('balance_of', account=account)

    def transfer(self, to, value, signer=None):
        self._call('transfer', signer=signer, to=to, value=value)

    def holders(self):
        with self.executor.lock:
            return self.executor.ledger.holders()
