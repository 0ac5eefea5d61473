from unittest import TestCase
import logging
from vban.logger import get_logger, MockLogger, ColoredStreamHandler


class TestLogger(TestCase):
    def test_get_logger_attaches_colored_handler(self):
        log = get_logger('vban-test')

        self.assertIsInstance(log, logging.Logger)
        self.assertTrue(any(isinstance(h, ColoredStreamHandler) for h in log.handlers))

    def test_get_logger_is_idempotent(self):
        a = get_logger('vban-test-2')
        n = len(a.handlers)

        b = get_logger('vban-test-2')

        self.assertIs(a, b)
        self.assertEqual(len(b.handlers), n)

    def test_mock_logger_swallows_calls(self):
        log = MockLogger()
        self.assertIsNone(log.info('nothing'))
        self.assertIsNone(log.anything_at_all('nothing'))
