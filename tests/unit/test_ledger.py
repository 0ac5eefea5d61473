from unittest import TestCase
from vban.db.driver import LedgerDriver
from vban.ledger import Ledger, is_balance, validate_balance
from vban.exceptions import InvalidBalance, BalanceOverflow, LedgerExists
from vban import config

ALICE = '324ee2e3544a8853a3c5a0ef0946b929aa488cbe7e7ee31a0fef9585ce398502'
BOB = 'a103715914a7aae8dd8fddba945ab63a169dfe6e37f79b4a58bcf85bfd681694'


class TestBalanceValidation(TestCase):
    def test_valid_balances(self):
        self.assertTrue(is_balance(0))
        self.assertTrue(is_balance(100))
        self.assertTrue(is_balance(config.MAX_BALANCE))

    def test_invalid_balances(self):
        self.assertFalse(is_balance(-1))
        self.assertFalse(is_balance(config.MAX_BALANCE + 1))
        self.assertFalse(is_balance(1.5))
        self.assertFalse(is_balance('10'))
        self.assertFalse(is_balance(True))
        self.assertFalse(is_balance(None))

    def test_validate_raises(self):
        with self.assertRaises(InvalidBalance):
            validate_balance(-5)

        self.assertEqual(validate_balance(5), 5)


class TestLedger(TestCase):
    def setUp(self):
        self.driver = LedgerDriver()

    def tearDown(self):
        self.driver.flush()

    def test_new_works(self):
        ledger = Ledger.new(caller=ALICE, total_supply=777, driver=self.driver)
        self.assertEqual(ledger.total_supply(), 777)

    def test_balance_works(self):
        ledger = Ledger.new(caller=ALICE, total_supply=100, driver=self.driver)

        self.assertEqual(ledger.total_supply(), 100)
        self.assertEqual(ledger.balance_of(ALICE), 100)
        self.assertEqual(ledger.balance_of(BOB), 0)

    def test_new_commits_state(self):
        Ledger.new(caller=ALICE, total_supply=100, driver=self.driver)

        self.assertDictEqual(self.driver.pending_writes, {})
        self.assertEqual(self.driver.driver.get('vban.total_supply'), 100)
        self.assertEqual(self.driver.driver.get('vban.balances:{}'.format(ALICE)), 100)

    def test_new_twice_raises(self):
        Ledger.new(caller=ALICE, total_supply=100, driver=self.driver)

        with self.assertRaises(LedgerExists):
            Ledger.new(caller=BOB, total_supply=500, driver=self.driver)

        self.assertEqual(Ledger(driver=self.driver).balance_of(ALICE), 100)

    def test_two_names_share_a_driver(self):
        a = Ledger.new(caller=ALICE, total_supply=100, name='a', driver=self.driver)
        b = Ledger.new(caller=BOB, total_supply=5, name='b', driver=self.driver)

        self.assertEqual(a.balance_of(BOB), 0)
        self.assertEqual(b.balance_of(BOB), 5)

    def test_new_with_invalid_supply_raises(self):
        with self.assertRaises(InvalidBalance):
            Ledger.new(caller=ALICE, total_supply=-1, driver=self.driver)

        self.assertFalse(Ledger(driver=self.driver).exists())

    def test_zero_supply(self):
        ledger = Ledger.new(caller=ALICE, total_supply=0, driver=self.driver)

        self.assertTrue(ledger.exists())
        self.assertEqual(ledger.total_supply(), 0)

    def test_max_supply_round_trips_storage(self):
        Ledger.new(caller=ALICE, total_supply=config.MAX_BALANCE, driver=self.driver)

        reopened = Ledger(driver=LedgerDriver(driver=self.driver.driver))

        self.assertEqual(reopened.total_supply(), config.MAX_BALANCE)
        self.assertEqual(reopened.balance_of(ALICE), config.MAX_BALANCE)

    def test_unconstructed_ledger(self):
        ledger = Ledger(driver=self.driver)

        self.assertFalse(ledger.exists())
        self.assertEqual(ledger.total_supply(), 0)
        self.assertEqual(ledger.balance_of(ALICE), 0)

    def test_holders(self):
        ledger = Ledger.new(caller=ALICE, total_supply=100, driver=self.driver)

        self.assertDictEqual(ledger.holders(), {ALICE: 100})

    def test_set_balance_rejects_out_of_range(self):
        ledger = Ledger.new(caller=ALICE, total_supply=100, driver=self.driver)

        with self.assertRaises(BalanceOverflow):
            ledger._set_balance(BOB, -1)

        with self.assertRaises(BalanceOverflow):
            ledger._set_balance(BOB, config.MAX_BALANCE + 1)

        self.assertEqual(ledger.balance_of(BOB), 0)
