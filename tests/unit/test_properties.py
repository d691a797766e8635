import unittest

from android_signing.build.config.exceptions import MalformedPropertiesException
from android_signing.build.config.properties import load_properties, parse_properties
from .base import BaseProjectTest

PROPERTIES_LOGGER = 'android_signing.build.config.properties'


class TestParseProperties(unittest.TestCase):
    """Parsing of key=value text."""

    def test_simple_pairs(self):
        entries = parse_properties("keyAlias=upload\nstorePassword=secret\n")
        self.assertEqual(entries, {'keyAlias': 'upload', 'storePassword': 'secret'})

    def test_comments_and_blank_lines_are_skipped(self):
        text = "# signing\n\n   ! legacy comment\nkeyAlias=upload\n   \n"
        self.assertEqual(parse_properties(text), {'keyAlias': 'upload'})

    def test_order_follows_first_occurrence(self):
        entries = parse_properties("b=1\na=2\nb=3\n")
        self.assertEqual(list(entries), ['b', 'a'])
        self.assertEqual(entries['b'], '3')

    def test_colon_and_whitespace_separators(self):
        entries = parse_properties("keyAlias: upload\nstoreFile    upload.jks\nkeyPassword = pw\n")
        self.assertEqual(entries, {
            'keyAlias': 'upload',
            'storeFile': 'upload.jks',
            'keyPassword': 'pw',
        })

    def test_value_keeps_trailing_whitespace_and_inner_separators(self):
        entries = parse_properties("url=https://example.com/a=b  \n")
        self.assertEqual(entries['url'], 'https://example.com/a=b  ')

    def test_key_without_value(self):
        self.assertEqual(parse_properties("keyPassword\n"), {'keyPassword': ''})
        self.assertEqual(parse_properties("keyPassword=\n"), {'keyPassword': ''})

    def test_line_endings(self):
        entries = parse_properties("a=1\r\nb=2\rc=3\n")
        self.assertEqual(entries, {'a': '1', 'b': '2', 'c': '3'})

    def test_line_continuation(self):
        entries = parse_properties("storePassword=abc\\\n      def\nkeyAlias=upload\n")
        self.assertEqual(entries, {'storePassword': 'abcdef', 'keyAlias': 'upload'})

    def test_even_backslashes_do_not_continue(self):
        entries = parse_properties("a=b\\\\\nc=d\n")
        self.assertEqual(entries, {'a': 'b\\', 'c': 'd'})

    def test_escapes(self):
        entries = parse_properties(
            "storeFile=C:\\\\keys\\\\upload.jks\n"
            "key\\=with\\ sep=v\n"
            "tabbed=a\\tb\n"
            "accent=caf\\u00e9\n"
        )
        self.assertEqual(entries['storeFile'], 'C:\\keys\\upload.jks')
        self.assertEqual(entries['key=with sep'], 'v')
        self.assertEqual(entries['tabbed'], 'a\tb')
        self.assertEqual(entries['accent'], 'café')

    def test_malformed_unicode_escape(self):
        with self.assertRaises(MalformedPropertiesException) as cm:
            parse_properties("a=1\nbad=\\u12G4\n")
        self.assertEqual(cm.exception.line_number, 2)
        self.assertIn('\\uXXXX', cm.exception.guidance)


class TestLoadProperties(BaseProjectTest):
    """Loading properties files from a project root."""

    def test_load_existing_file(self):
        path = self.write_file('key.properties', "keyAlias=upload\nstorePassword=secret\n")

        props, found = load_properties(self.root, 'key.properties')

        self.assertTrue(found)
        self.assertEqual(props.path, path)
        self.assertEqual(props.entries, {'keyAlias': 'upload', 'storePassword': 'secret'})

    def test_missing_file_warns_once(self):
        with self.assertLogs(PROPERTIES_LOGGER, level='WARNING') as cm:
            props, found = load_properties(self.root, 'key.properties')

        self.assertFalse(found)
        self.assertTrue(props.is_empty)
        self.assertIsNone(props.path)
        self.assertEqual(len(cm.records), 1)
        message = cm.records[0].getMessage()
        self.assertEqual(message, 'key.properties not found. Release builds may fail to sign.')
        self.assertFalse(message.lower().startswith('warning'))

    def test_malformed_file_names_the_file(self):
        self.write_file('local.properties', "flutter.sdk=/opt/flutter\nbad=\\u00\n")

        with self.assertRaises(MalformedPropertiesException) as cm:
            load_properties(self.root, 'local.properties')

        self.assertEqual(cm.exception.file_name, 'local.properties')
        self.assertEqual(cm.exception.line_number, 2)
        self.assertIn('local.properties on line 2', cm.exception.guidance)

    def test_directory_is_not_a_properties_file(self):
        (self.root / 'key.properties').mkdir()

        with self.assertLogs(PROPERTIES_LOGGER, level='WARNING'):
            props, found = load_properties(self.root, 'key.properties')

        self.assertFalse(found)
        self.assertEqual(props.entries, {})

    def test_load_is_repeatable(self):
        self.write_file('key.properties', "keyAlias=upload\nkeyPassword=pw\n")

        first, _ = load_properties(self.root, 'key.properties')
        second, _ = load_properties(self.root, 'key.properties')

        self.assertEqual(first, second)

    def test_latin1_is_the_default_encoding(self):
        self.write_file('key.properties', "keyPassword=café\n", encoding='iso-8859-1')

        props, _ = load_properties(self.root, 'key.properties')

        self.assertEqual(props.get('keyPassword'), 'café')

    def test_explicit_encoding(self):
        self.write_file('key.properties', "keyPassword=パス\n", encoding='utf-8')

        props, _ = load_properties(self.root, 'key.properties', encoding='utf-8')

        self.assertEqual(props.get('keyPassword'), 'パス')


if __name__ == '__main__':
    unittest.main()
