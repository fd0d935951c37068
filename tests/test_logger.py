import io
import logging
import unittest

from wordsearch.utils.logger import PACKAGE_LOGGER, configure_logging, get_logger


class LoggerTests(unittest.TestCase):
    def setUp(self) -> None:
        package = logging.getLogger(PACKAGE_LOGGER)
        self.saved = (list(package.handlers), package.level, package.propagate)

    def tearDown(self) -> None:
        package = logging.getLogger(PACKAGE_LOGGER)
        handlers, level, propagate = self.saved
        package.handlers[:] = handlers
        package.setLevel(level)
        package.propagate = propagate

    def test_names_are_scoped_to_package(self) -> None:
        self.assertEqual(get_logger().name, "wordsearch")
        self.assertEqual(get_logger("wordsearch.engine.grid").name, "wordsearch.engine.grid")
        self.assertEqual(get_logger("cli").name, "wordsearch.cli")

    def test_configure_writes_formatted_records_to_stream(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.DEBUG, stream=stream)
        get_logger("engine.test").debug("placed %s", "SUN")
        line = stream.getvalue().strip()
        self.assertIn("| DEBUG   | wordsearch.engine.test | placed SUN", line)

    def test_configure_leaves_root_handlers_alone(self) -> None:
        root = logging.getLogger()
        before = list(root.handlers)
        configure_logging(logging.WARNING, stream=io.StringIO())
        self.assertEqual(root.handlers, before)
        self.assertEqual(len(logging.getLogger(PACKAGE_LOGGER).handlers), 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
