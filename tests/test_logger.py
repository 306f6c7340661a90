import re
import unittest

from tests.fixtures import PROJECT_ROOT  # noqa: F401
from sortbutton.utils.logger import Logger, LogLevel

class TestLogger(unittest.TestCase):

    def setUp(self):
        self.lines = []
        self._previous_level = Logger.get_level()
        Logger.set_sink(self.lines.append)

    def tearDown(self):
        Logger.reset_sink()
        Logger.set_level(self._previous_level)

    def test_line_format(self):
        Logger.set_level(LogLevel.INFO)
        Logger.warning("SortButton", "Configuration appears to be outdated")
        self.assertEqual(len(self.lines), 1)
        self.assertRegex(self.lines[0],
                         r"^\[\d\d:\d\d:\d\d\] \[WARN \] \[SortButton\] Configuration appears to be outdated$")

    def test_level_filter(self):
        Logger.set_level(LogLevel.WARNING)
        Logger.debug("X", "hidden")
        Logger.info("X", "hidden")
        Logger.error("X", "shown")
        Logger.critical("X", "shown")
        self.assertEqual(len(self.lines), 2)
        self.assertTrue(re.search(r"\[CRIT \]", self.lines[1]))

    def test_level_names(self):
        self.assertEqual(LogLevel.from_name("debug"), LogLevel.DEBUG)
        self.assertEqual(LogLevel.from_name("Warning"), LogLevel.WARNING)
        self.assertEqual(LogLevel.from_name("WARN"), LogLevel.WARNING)
        self.assertEqual(LogLevel.from_name("nonsense"), LogLevel.INFO)
        self.assertEqual(LogLevel.from_name(None), LogLevel.INFO)
