"""Tests for CurrencyTracker.log.log: the tank handler, level control and the Qt bridge."""
import logging
import time

from PySide6.QtCore import QtMsgType

from CurrencyTracker.log.log import (
    TankHandler,
    qt_message_handler,
    set_logging_level,
    setup_logging,
)
from CurrencyTracker.ui.actions import signals
from tests.base import BaseTestCase, SignalRecorder


class LogModuleTests(BaseTestCase):

    def setUp(self) -> None:
        super().setUp()
        logging.disable(logging.NOTSET)
        setup_logging(enable_stream_handler=False, enable_qt_handler=False, log_level=logging.DEBUG)

        self.root_logger = logging.getLogger()
        self.tank = next(h for h in self.root_logger.handlers if isinstance(h, TankHandler))

    def test_only_tank_installed_without_stream(self):
        self.assertEqual([type(h) for h in self.root_logger.handlers], [TankHandler])

    def test_setup_logging_replaces_previous_handlers(self):
        setup_logging(enable_stream_handler=True, enable_qt_handler=False)
        kinds = [type(h) for h in self.root_logger.handlers]
        self.assertEqual(kinds, [logging.StreamHandler, TankHandler])

    def test_get_logs_filters_by_level(self):
        logging.info('expense added')
        logging.warning('rate missing')
        logging.error('bad amount')

        self.assertEqual(len(self.tank.get_logs()), 3)
        warnings = self.tank.get_logs(logging.WARNING)
        self.assertEqual(len(warnings), 2)
        self.assertIn('bad amount', warnings[-1])

    def test_clear_logs_empties_tank(self):
        logging.info('one')
        self.tank.clear_logs()
        self.assertEqual(self.tank.get_logs(), [])

    def test_records_are_formatted(self):
        logging.getLogger('CurrencyTracker').info('formatted')
        record = self.tank.get_logs()[-1]
        self.assertRegex(record, r'^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] <\w+> INFO:\s+formatted$')

    def test_errors_request_log_dock(self):
        with SignalRecorder(signals.showLogs) as recorder:
            logging.info('quiet')
            self.assertEqual(recorder.calls, [])
            logging.error('loud')
        self.assertEqual(len(recorder.calls), 1)

    def test_large_volume_is_kept(self):
        count = 5_000
        started = time.perf_counter()
        for i in range(count):
            logging.debug('entry %d', i)
        self.assertLess(time.perf_counter() - started, 2.0)
        self.assertEqual(len(self.tank.tank), count)

    def test_set_logging_level_updates_handlers(self):
        set_logging_level(logging.WARNING)
        self.assertEqual(self.root_logger.level, logging.WARNING)
        self.assertTrue(all(h.level == logging.WARNING for h in self.root_logger.handlers))

        logging.info('hidden')
        self.assertEqual(self.tank.get_logs(), [])

    def test_set_logging_level_rejects_bad_values(self):
        for value in ('INFO', True, 1234, 15):
            with self.subTest(value=value), self.assertRaises(ValueError):
                set_logging_level(value)

    def test_qt_messages_use_qt_logger(self):
        qt_message_handler(QtMsgType.QtWarningMsg, None, 'Qt warn  ')
        record = self.tank.get_logs(logging.WARNING)[-1]
        self.assertTrue(record.endswith('Qt warn'))

    def test_qt_critical_maps_to_error(self):
        qt_message_handler(QtMsgType.QtCriticalMsg, None, 'Qt critical')
        self.assertIn('Qt critical', self.tank.get_logs(logging.ERROR)[-1])

    def test_qt_fatal_exits(self):
        with self.assertRaises(SystemExit):
            qt_message_handler(QtMsgType.QtFatalMsg, None, 'fatal')
