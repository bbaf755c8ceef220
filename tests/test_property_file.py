"""
Tests for reading Java .properties files.
"""

import pytest

from e2e.errors import ConfigurationLoadError
from e2e.property_file import read_properties


def write(tmp_path, text, name='test.properties'):
    path = tmp_path / name
    path.write_text(text, encoding='utf-8')
    return path


class TestReadProperties:
    """Parsing of the properties file format."""

    def test_reads_key_value_lines(self, tmp_path):
        path = write(tmp_path, 'test.app.url=http://localhost:8080\ntest.timeout=15\n')

        assert read_properties(path) == {
            'test.app.url': 'http://localhost:8080',
            'test.timeout': '15',
        }

    def test_skips_comments_and_blank_lines(self, tmp_path):
        path = write(tmp_path, '# Test settings\n\ntest.csrf.key=abc\n\n! end\n')

        assert read_properties(path) == {'test.csrf.key': 'abc'}

    def test_hash_inside_value_kept(self, tmp_path):
        """Only a '#' starting a line is a comment; inside a value it is data."""
        path = write(tmp_path, 'test.backdoor.key=s3cr3t #42\n')

        assert read_properties(path)['test.backdoor.key'] == 's3cr3t #42'

    def test_backslash_escapes_unescaped(self, tmp_path):
        path = write(tmp_path, r'test.firefox.path=C:\\Program Files\\Mozilla Firefox\\firefox.exe' + '\n')

        assert read_properties(path)['test.firefox.path'] == r'C:\Program Files\Mozilla Firefox\firefox.exe'

    @pytest.mark.parametrize('line', [
        'test.csrf.key=abc',
        'test.csrf.key = abc',
        'test.csrf.key: abc',
        'test.csrf.key abc',
    ])
    def test_separators(self, tmp_path, line):
        path = write(tmp_path, line + '\n')

        assert read_properties(path) == {'test.csrf.key': 'abc'}

    def test_line_continuation(self, tmp_path):
        path = write(tmp_path, 'test.csrf.key=abc\\\n    def\ntest.timeout=15\n')

        assert read_properties(path) == {'test.csrf.key': 'abcdef', 'test.timeout': '15'}

    def test_quotes_are_part_of_value(self, tmp_path):
        path = write(tmp_path, 'test.backdoor.key="secret value"\n')

        assert read_properties(path)['test.backdoor.key'] == '"secret value"'

    def test_values_not_interpolated(self, tmp_path, monkeypatch):
        """${...} in a value is kept as written, never expanded from the environment."""
        monkeypatch.setenv('HOME_DIR', '/home/tester')
        path = write(tmp_path, 'test.firefox.path=${HOME_DIR}/firefox\n')

        assert read_properties(path)['test.firefox.path'] == '${HOME_DIR}/firefox'

    def test_key_without_value_is_empty(self, tmp_path):
        path = write(tmp_path, 'test.godmode.enabled\n')

        assert read_properties(path) == {'test.godmode.enabled': ''}

    def test_accepts_string_path(self, tmp_path):
        path = write(tmp_path, 'app.version=7.0.0\n', name='build.properties')

        assert read_properties(str(path)) == {'app.version': '7.0.0'}


class TestReadFailures:
    """Unreadable files are reported as ConfigurationLoadError."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationLoadError, match='missing.properties'):
            read_properties(tmp_path / 'missing.properties')

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(ConfigurationLoadError):
            read_properties(tmp_path)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / 'test.properties'
        path.write_bytes(b'test.app.url=\xff\xfe\xfa\n')

        with pytest.raises(ConfigurationLoadError) as excinfo:
            read_properties(path)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
