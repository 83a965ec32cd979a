from unittest import TestCase
from nftledger import logger
import logging


class TestLogger(TestCase):
    def tearDown(self):
        logger.overwrite_logger_level(logging.WARNING)

    def test_get_logger_has_one_colored_handler(self):
        log = logger.get_logger('TestLoggerHandlers')
        logger.get_logger('TestLoggerHandlers')

        handlers = [h for h in log.handlers if isinstance(h, logger.ColoredStreamHandler)]
        self.assertEqual(len(handlers), 1)

    def test_custom_level(self):
        log = logger.get_logger('TestLoggerNotice')

        self.assertTrue(hasattr(log, 'notice'))
        self.assertEqual(logging.getLevelName(22), 'NOTICE')

    def test_overwrite_level(self):
        log = logger.get_logger('TestLoggerLevel')
        logger.overwrite_logger_level(logging.DEBUG)

        self.assertEqual(log.level, logging.DEBUG)
