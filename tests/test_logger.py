import io
import logging
import unittest

from wavecollapse.utils.logger import configure_logging, get_logger, resolve_level


class LoggerTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(logging.WARNING)

    def test_resolve_level(self) -> None:
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level("WARNING"), logging.WARNING)
        self.assertEqual(resolve_level(logging.ERROR), logging.ERROR)
        with self.assertRaises(ValueError):
            resolve_level("loud")

    def test_messages_reach_the_configured_stream(self) -> None:
        stream = io.StringIO()
        configure_logging("debug", stream=stream)
        get_logger("wavecollapse.engine.test").debug("observed %s", 3)
        self.assertIn("| DEBUG   | wavecollapse.engine.test | observed 3", stream.getvalue())

    def test_level_filters_messages(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.WARNING, stream=stream)
        get_logger("wavecollapse.engine.test").info("hidden")
        self.assertEqual(stream.getvalue(), "")

    def test_root_logger_is_left_alone(self) -> None:
        root_handlers = list(logging.getLogger().handlers)
        configure_logging(logging.INFO, stream=io.StringIO())
        self.assertEqual(logging.getLogger().handlers, root_handlers)
        self.assertFalse(get_logger().propagate)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
