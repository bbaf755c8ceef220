"""
Tests for CI environment detection.
"""

import os

import pytest

from e2e.environment import is_appveyor, is_ci_environment, is_travis, snapshot_environment


class TestCiProviders:
    """Presence of a provider variable is what counts, not its value."""

    @pytest.mark.parametrize('environ, travis, appveyor', [
        ({}, False, False),
        ({'TRAVIS': 'true'}, True, False),
        ({'TRAVIS': ''}, True, False),
        ({'APPVEYOR': 'False'}, False, True),
        ({'TRAVIS': '1', 'APPVEYOR': '1'}, True, True),
    ])
    def test_provider_detection(self, environ, travis, appveyor):
        assert is_travis(environ) is travis
        assert is_appveyor(environ) is appveyor
        assert is_ci_environment(environ) is (travis or appveyor)

    def test_other_ci_variables_ignored(self):
        assert is_ci_environment({'CI': 'true', 'GITHUB_ACTIONS': 'true'}) is False


class TestSnapshotEnvironment:
    """The environment is copied into a read-only mapping."""

    def test_copies_given_mapping(self):
        source = {'TRAVIS': 'true'}
        snapshot = snapshot_environment(source)
        source.clear()

        assert snapshot['TRAVIS'] == 'true'

    def test_snapshot_is_read_only(self):
        snapshot = snapshot_environment({})
        with pytest.raises(TypeError):
            snapshot['APPVEYOR'] = 'true'

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv('APPVEYOR', 'True')
        snapshot = snapshot_environment()

        assert snapshot['APPVEYOR'] == 'True'
        assert len(snapshot) == len(os.environ)
