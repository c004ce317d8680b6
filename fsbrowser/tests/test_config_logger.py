"""
Configuration and Logger Tests

Run with: python -m pytest fsbrowser/tests -v
"""

import io
import json
import logging
import os
import tempfile
import unittest
from contextlib import redirect_stderr

from fsbrowser.core.config_loader import (
    Config,
    ConfigError,
    ConfigLoader,
    ConfigValidationError,
    get_config,
)
from fsbrowser.logger import LogBufferHandler, LogFormatter, Logger, LogLevel, get_logger


class TestConfigLoader(unittest.TestCase):
    """Test configuration loading and access."""

    def setUp(self):
        ConfigLoader().reset()
        self._tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self._tmp.cleanup()
        ConfigLoader().reset()

    def write_config(self, data) -> str:
        path = os.path.join(self._tmp.name, 'config.json')
        with open(path, 'w') as f:
            if isinstance(data, str):
                f.write(data)
            else:
                json.dump(data, f)
        return path

    def test_singleton(self):
        self.assertIs(ConfigLoader(), ConfigLoader())

    def test_defaults(self):
        config = get_config()

        self.assertFalse(ConfigLoader().loaded)
        self.assertEqual(config.app.name, 'fsbrowser')
        self.assertEqual(config.explorer.directory_mode, 0o755)
        self.assertIsNone(config.explorer.start_directory)
        self.assertTrue(config.search.follow_symlinks)
        self.assertEqual(config.logging.level, 'WARNING')
        self.assertTrue(config.shell.confirm_delete)

    def test_load_overrides(self):
        path = self.write_config({
            'explorer': {'directory_mode': '700', 'copy_buffer_size': 4096},
            'search': {'follow_symlinks': False},
        })

        config = ConfigLoader().load(path)

        self.assertTrue(ConfigLoader().loaded)
        self.assertIs(get_config(), config)
        self.assertEqual(config.explorer.directory_mode, 0o700)
        self.assertEqual(config.explorer.copy_buffer_size, 4096)
        self.assertFalse(config.search.follow_symlinks)
        # Untouched sections keep their defaults
        self.assertEqual(config.shell.prompt, Config().shell.prompt)

    def test_bundled_config_loads(self):
        bundled = os.path.join(
            os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
            'config.json'
        )
        config = ConfigLoader().load(bundled)
        self.assertEqual(config.explorer.directory_mode, 0o755)

    def test_unknown_key(self):
        path = self.write_config({'shell': {'colour': True}})

        with self.assertRaises(ConfigValidationError):
            ConfigLoader().load(path)
        self.assertFalse(ConfigLoader().loaded)

    def test_invalid_values(self):
        cases = [
            {'explorer': {'directory_mode': '9z'}},
            {'explorer': {'directory_mode': '17777'}},
            {'explorer': {'copy_buffer_size': 0}},
            {'explorer': {'start_directory': 'relative'}},
            {'logging': {'level': 'LOUD'}},
            {'search': []},
            [],
        ]
        for data in cases:
            with self.subTest(data=data):
                with self.assertRaises(ConfigValidationError):
                    ConfigLoader().load(self.write_config(data))

    def test_wrong_value_types(self):
        """A value of the wrong JSON type is rejected, not passed through."""
        cases = [
            {'explorer': {'copy_buffer_size': 'big'}},
            {'explorer': {'copy_buffer_size': True}},
            {'explorer': {'start_directory': 5}},
            {'logging': {'level': 10}},
            {'logging': {'log_file': ['a.log']}},
            {'logging': {'console_output': 'yes'}},
            {'search': {'follow_symlinks': 1}},
            {'shell': {'prompt': None}},
            {'app': {'name': 3.5}},
        ]
        for data in cases:
            with self.subTest(data=data):
                with self.assertRaises(ConfigValidationError):
                    ConfigLoader().load(self.write_config(data))
        self.assertFalse(ConfigLoader().loaded)

    def test_nullable_values(self):
        path = self.write_config({
            'explorer': {'start_directory': None},
            'logging': {'log_file': None},
        })

        config = ConfigLoader().load(path)

        self.assertIsNone(config.explorer.start_directory)
        self.assertIsNone(config.logging.log_file)

    def test_numeric_directory_mode_rejected(self):
        """755 written as a JSON number would be read as decimal."""
        with self.assertRaises(ConfigValidationError) as ctx:
            ConfigLoader().load(self.write_config({'explorer': {'directory_mode': 755}}))

        self.assertIn('octal string', str(ctx.exception))
        self.assertEqual(get_config().explorer.directory_mode, 0o755)

    def test_reload(self):
        path = self.write_config({'shell': {'confirm_delete': False}})
        loader = ConfigLoader()
        loader.load(path)
        loader.set('shell.confirm_delete', True)

        config = loader.reload(path)

        self.assertFalse(config.shell.confirm_delete)
        self.assertIs(get_config(), config)

    def test_invalid_json(self):
        with self.assertRaises(ConfigError):
            ConfigLoader().load(self.write_config('{"app": '))

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            ConfigLoader().load(os.path.join(self._tmp.name, 'absent.json'))

    def test_get_and_set(self):
        loader = ConfigLoader()

        self.assertEqual(loader.get('search.follow_symlinks'), True)
        self.assertEqual(loader.get('search.nothing', 'fallback'), 'fallback')

        loader.set('shell.confirm_delete', False)
        self.assertFalse(get_config().shell.confirm_delete)

        with self.assertRaises(ConfigValidationError):
            loader.set('shell.nothing', 1)
        with self.assertRaises(ConfigValidationError):
            loader.set('nowhere.key', 1)

    def test_reset(self):
        loader = ConfigLoader()
        loader.set('app.name', 'changed')

        loader.reset()

        self.assertEqual(get_config().app.name, 'fsbrowser')

    def test_to_dict(self):
        data = ConfigLoader().to_dict()

        self.assertEqual(set(data), {'app', 'explorer', 'search', 'logging', 'shell'})
        self.assertEqual(data['explorer']['copy_buffer_size'], 65536)


class TestLogger(unittest.TestCase):
    """Test the logging system."""

    def setUp(self):
        Logger.shutdown()
        Logger.initialize(level=LogLevel.DEBUG, console_output=False)

    def tearDown(self):
        Logger.shutdown()

    def test_one_instance_per_subsystem(self):
        self.assertIs(get_logger('search'), get_logger('search'))
        self.assertIsNot(get_logger('search'), get_logger('fileops'))
        self.assertEqual(get_logger('search').subsystem, 'search')

    def test_level_from_name(self):
        self.assertEqual(LogLevel.from_name('warning'), LogLevel.WARNING)
        self.assertEqual(LogLevel.from_name(' Debug '), LogLevel.DEBUG)
        with self.assertRaises(ValueError):
            LogLevel.from_name('verbose')

    def test_buffered_with_context(self):
        get_logger('test').info("Something happened", context={'path': '/tmp'})

        logs = Logger.get_buffered_logs(subsystem='test')
        self.assertEqual(len(logs), 1)
        self.assertEqual(logs[0]['level'], 'INFO')
        self.assertEqual(logs[0]['message'], "Something happened")
        self.assertEqual(logs[0]['context'], {'path': '/tmp'})

    def test_level_filter(self):
        Logger.shutdown()
        Logger.initialize(level=LogLevel.WARNING, console_output=False)

        log = get_logger('test')
        log.info("dropped")
        log.error("kept")

        self.assertEqual(
            [l['message'] for l in Logger.get_buffered_logs(subsystem='test')],
            ['kept']
        )

    def test_initialize_is_idempotent(self):
        Logger.initialize(level=LogLevel.CRITICAL, console_output=False)

        get_logger('test').debug("still captured")

        self.assertEqual(len(Logger.get_buffered_logs(subsystem='test')), 1)

    def test_no_buffer_after_shutdown(self):
        Logger.shutdown()
        self.assertEqual(Logger.get_buffered_logs(), [])

    def test_silent_until_initialized(self):
        """Without initialize(), records never fall through to stderr."""
        Logger.shutdown()

        handlers = logging.getLogger('fsbrowser').handlers
        self.assertTrue(any(isinstance(h, logging.NullHandler) for h in handlers))

        err = io.StringIO()
        with redirect_stderr(err):
            get_logger('test').warning("nobody is listening")
        self.assertEqual(err.getvalue(), '')

    def test_log_file(self):
        Logger.shutdown()
        with tempfile.TemporaryDirectory() as tmp:
            log_file = os.path.join(tmp, 'logs', 'fsbrowser.log')
            Logger.initialize(level=LogLevel.INFO, log_file=log_file, console_output=False)

            get_logger('test').warning("to disk", context={'code': 7})
            Logger.shutdown()

            with open(log_file) as f:
                content = f.read()

        self.assertIn("WARNING", content)
        self.assertIn("[test] to disk {code=7}", content)

    def test_buffer_bounded(self):
        handler = LogBufferHandler(max_entries=3)
        log = logging.getLogger('fsbrowser.bounded-test')
        log.addHandler(handler)
        try:
            for i in range(5):
                log.warning("entry %d", i)
        finally:
            log.removeHandler(handler)

        self.assertEqual(
            [l['message'] for l in handler.get_logs()],
            ['entry 2', 'entry 3', 'entry 4']
        )
        handler.clear()
        self.assertEqual(handler.get_logs(), [])


class TestLogFormatter(unittest.TestCase):
    """Test record formatting."""

    def make_record(self) -> logging.LogRecord:
        record = logging.LogRecord(
            'fsbrowser.fileops', logging.INFO, __file__, 1, "Copied file", None, None
        )
        record.subsystem = 'fileops'
        record.context = {'bytes': 42}
        return record

    def test_plain(self):
        text = LogFormatter(use_colors=False).format(self.make_record())

        self.assertIn("INFO     [fileops] Copied file {bytes=42}", text)
        self.assertTrue(text.startswith('['))

    def test_colors_need_a_terminal(self):
        formatter = LogFormatter(use_colors=True, stream=io.StringIO())
        self.assertFalse(formatter.use_colors)


if __name__ == '__main__':
    unittest.main()
