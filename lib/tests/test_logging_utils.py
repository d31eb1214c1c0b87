"""
Test suite for lib/logging_utils.py
"""

import logging
import os
import sys
import tempfile
import unittest
from logging.handlers import TimedRotatingFileHandler

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))
from lib.logging_utils import configureLogger, getLogLevelByStr, initLogging  # noqa: E402


class TestGetLogLevelByStr(unittest.TestCase):

    def testKnownLevels(self):
        self.assertEqual(getLogLevelByStr("debug"), logging.DEBUG)
        self.assertEqual(getLogLevelByStr("WARNING"), logging.WARNING)

    def testInvalidLevel(self):
        self.assertIsNone(getLogLevelByStr("verbose"))
        self.assertEqual(getLogLevelByStr("verbose", logging.INFO), logging.INFO)

    def testNonLevelAttribute(self):
        """Logging module attributes which aren't levels are rejected"""
        self.assertIsNone(getLogLevelByStr("basic_format"))


class TestConfigureLogger(unittest.TestCase):

    def setUp(self):
        self.logger = logging.getLogger("test.logging_utils")
        self.tmpDir = tempfile.TemporaryDirectory()

    def tearDown(self):
        for handler in self.logger.handlers[:]:
            handler.close()
            self.logger.removeHandler(handler)
        self.logger.setLevel(logging.NOTSET)
        self.logger.propagate = True
        self.tmpDir.cleanup()

    def testLevelAndPropagate(self):
        configureLogger(self.logger, {"level": "ERROR", "propagate": False})
        self.assertEqual(self.logger.level, logging.ERROR)
        self.assertFalse(self.logger.propagate)
        self.assertEqual(self.logger.handlers, [])

    def testConsoleHandler(self):
        configureLogger(self.logger, {"level": "INFO", "console": True, "console-level": "WARNING"})
        self.assertEqual(len(self.logger.handlers), 1)
        self.assertIsInstance(self.logger.handlers[0], logging.StreamHandler)
        self.assertEqual(self.logger.handlers[0].level, logging.WARNING)

    def testInvalidConsoleLevelFallsBack(self):
        configureLogger(self.logger, {"level": "INFO", "console": True, "console-level": "loud"})
        self.assertEqual(self.logger.handlers[0].level, logging.INFO)

    def testFileHandler(self):
        logFile = os.path.join(self.tmpDir.name, "logs", "tagger.log")
        configureLogger(self.logger, {"level": "DEBUG", "file": logFile, "format": "%(message)s"})

        self.logger.debug("hello")
        self.logger.handlers[0].flush()

        with open(logFile, "rt", encoding="utf-8") as f:
            self.assertEqual(f.read(), "hello\n")

    def testRotatingFileHandler(self):
        logFile = os.path.join(self.tmpDir.name, "tagger.log")
        configureLogger(self.logger, {"file": logFile, "rotate": True, "file-level": "ERROR"})
        self.assertIsInstance(self.logger.handlers[0], TimedRotatingFileHandler)
        self.assertEqual(self.logger.handlers[0].level, logging.ERROR)

    def testReconfigureReplacesHandlers(self):
        configureLogger(self.logger, {"console": True})
        configureLogger(self.logger, {"console": True})
        self.assertEqual(len(self.logger.handlers), 1)


class TestInitLogging(unittest.TestCase):

    def setUp(self):
        self.rootLogger = logging.getLogger()
        self.savedLevel = self.rootLogger.level
        self.savedHandlers = self.rootLogger.handlers[:]
        self.markdownLogger = logging.getLogger("lib.markdown")
        self.childLogger = logging.getLogger("test.init_logging")

    def tearDown(self):
        for handler in self.rootLogger.handlers[:]:
            self.rootLogger.removeHandler(handler)
        for handler in self.savedHandlers:
            self.rootLogger.addHandler(handler)
        self.rootLogger.setLevel(self.savedLevel)
        self.markdownLogger.setLevel(logging.NOTSET)
        self.childLogger.setLevel(logging.NOTSET)

    def testRootLevel(self):
        initLogging({"level": "WARNING"})
        self.assertEqual(self.rootLogger.level, logging.WARNING)

    def testScannerQuietOnDebug(self):
        initLogging({"level": "DEBUG"})
        self.assertEqual(self.markdownLogger.level, logging.INFO)

    def testScannerTrace(self):
        initLogging({"level": "DEBUG", "trace-scanner": True})
        self.assertEqual(self.markdownLogger.level, logging.NOTSET)

    def testPerLoggerConfig(self):
        initLogging({"level": "INFO", "logger": {"test.init_logging": {"level": "ERROR"}}})
        self.assertEqual(self.childLogger.level, logging.ERROR)


if __name__ == "__main__":
    unittest.main()
