# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for format adapters and file/stream loading."""

import io
from pathlib import Path

import pytest

from genro_treeconfig import (
    Config,
    FormatAdapter,
    InvalidKeyError,
    JsonAdapter,
    JsonConfig,
    ParseError,
    TomlAdapter,
    TomlConfig,
    UnsupportedValueError,
)

TOML_SOURCE = """\
name = "demo"

[server]
port = 8080
host = "x"
ratio = 0.75
debug = false
"""

EXPECTED = {
    'name': 'demo',
    'server': {'port': 8080, 'host': 'x', 'ratio': 0.75, 'debug': False},
}


class TestFormatAdapter:
    """Tests for the FormatAdapter base class."""

    def test_is_abstract(self):
        """Test the base class cannot be instantiated."""
        with pytest.raises(TypeError):
            FormatAdapter()

    def test_parse_rejects_non_stream(self):
        """Test dispatch on unsupported source types."""
        with pytest.raises(TypeError, match="readable stream"):
            TomlAdapter().parse(42)

    def test_custom_adapter(self):
        """Test Config only depends on the adapter interface."""

        class PairsAdapter(FormatAdapter):
            name = 'pairs'

            def parse_stream(self, stream):
                return dict(line.split('=', 1) for line in stream.read().split())

            def parse_path(self, path):
                with open(path) as f:
                    return self.parse_stream(f)

        config = Config(PairsAdapter(), io.StringIO('a=x b=y'), root='p')
        assert config.read('p.a', str) == 'x'
        assert config.read('p.b', str) == 'y'

    def test_repr(self):
        """Test adapter representation."""
        assert repr(TomlAdapter()) == 'TomlAdapter()'


class TestTomlAdapter:
    """Tests for TomlAdapter."""

    def test_parse_text_stream(self):
        """Test parsing a text stream."""
        assert TomlAdapter().parse(io.StringIO(TOML_SOURCE)) == EXPECTED

    def test_parse_binary_stream(self):
        """Test parsing a binary stream."""
        assert TomlAdapter().parse(io.BytesIO(TOML_SOURCE.encode())) == EXPECTED

    def test_parse_path(self, tmp_path):
        """Test str and Path sources give the same result."""
        path = tmp_path / 'app.toml'
        path.write_text(TOML_SOURCE, encoding='utf-8')
        assert TomlAdapter().parse(path) == EXPECTED
        assert TomlAdapter().parse(str(path)) == EXPECTED

    def test_malformed_stream(self):
        """Test ParseError with the original exception chained."""
        with pytest.raises(ParseError, match="Invalid TOML") as exc_info:
            TomlAdapter().parse(io.StringIO('port = \n'))
        assert exc_info.value.__cause__ is not None

    def test_malformed_file(self, tmp_path):
        """Test ParseError names the file."""
        path = tmp_path / 'bad.toml'
        path.write_text('[server\n', encoding='utf-8')
        with pytest.raises(ParseError, match="bad.toml"):
            TomlAdapter().parse(path)

    def test_invalid_utf8(self):
        """Test undecodable bytes."""
        with pytest.raises(ParseError):
            TomlAdapter().parse(io.BytesIO(b'name = "\xff"\n'))

    def test_missing_file(self, tmp_path):
        """Test file-system errors propagate unchanged."""
        with pytest.raises(FileNotFoundError):
            TomlAdapter().parse(tmp_path / 'missing.toml')


class TestJsonAdapter:
    """Tests for JsonAdapter."""

    def test_parse_stream(self):
        """Test parsing text and binary streams."""
        text = '{"a": {"b": 1, "c": 1.5, "d": true, "e": "x"}}'
        expected = {'a': {'b': 1, 'c': 1.5, 'd': True, 'e': 'x'}}
        assert JsonAdapter().parse(io.StringIO(text)) == expected
        assert JsonAdapter().parse(io.BytesIO(text.encode())) == expected

    def test_parse_path(self, tmp_path):
        """Test parsing a file."""
        path = tmp_path / 'app.json'
        path.write_text('{"port": 1}', encoding='utf-8')
        assert JsonAdapter().parse(path) == {'port': 1}

    def test_malformed(self):
        """Test ParseError on bad JSON."""
        with pytest.raises(ParseError, match="Invalid JSON"):
            JsonAdapter().parse(io.StringIO('{bad'))

    def test_top_level_must_be_object(self, tmp_path):
        """Test arrays and scalars at top level are rejected."""
        with pytest.raises(ParseError, match="must be an object, not list"):
            JsonAdapter().parse(io.StringIO('[1, 2]'))
        path = tmp_path / 'scalar.json'
        path.write_text('3', encoding='utf-8')
        with pytest.raises(ParseError, match="scalar.json"):
            JsonAdapter().parse(path)


class TestConfigSources:
    """Tests for loading through each source type."""

    def test_stream_and_path_are_equivalent(self, tmp_path):
        """Test both entry points produce the same store."""
        path = tmp_path / 'app.toml'
        path.write_text(TOML_SOURCE, encoding='utf-8')
        from_path = TomlConfig(path)
        from_stream = TomlConfig(io.StringIO(TOML_SOURCE))
        assert from_path.as_dict() == from_stream.as_dict() == EXPECTED

    def test_layered_files(self, tmp_path):
        """Test layering a local file over defaults."""
        defaults = tmp_path / 'defaults.toml'
        defaults.write_text(TOML_SOURCE, encoding='utf-8')
        local = tmp_path / 'local.toml'
        local.write_text('[server]\nport = 9090\ndebug = true\n', encoding='utf-8')
        config = TomlConfig(defaults)
        config.load(local)
        assert config.read('server.port', int) == 9090
        assert config.read('server.debug', bool) is True
        assert config.read('server.host', str) == 'x'

    def test_parse_error_leaves_store(self):
        """Test a malformed source does not touch the store."""
        config = TomlConfig(io.StringIO(TOML_SOURCE))
        with pytest.raises(ParseError):
            config.load(io.StringIO('[server\n'))
        assert config.as_dict() == EXPECTED

    def test_toml_array_rejected(self):
        """Test arrays are outside the supported kinds."""
        with pytest.raises(UnsupportedValueError, match="at 'server.ports'"):
            TomlConfig(io.StringIO('[server]\nports = [1, 2]\n'))

    def test_toml_datetime_rejected(self):
        """Test datetimes are outside the supported kinds."""
        with pytest.raises(UnsupportedValueError, match="datetime"):
            TomlConfig(io.StringIO('when = 1979-05-27T07:32:00Z\n'))

    def test_toml_dotted_quoted_key_rejected(self):
        """Test labels containing a dot cannot be loaded."""
        with pytest.raises(InvalidKeyError, match="contains '.'"):
            TomlConfig(io.StringIO('"a.b" = 1\n'))

    def test_json_config(self, tmp_path):
        """Test JsonConfig with null values rejected."""
        path = tmp_path / 'app.json'
        path.write_text('{"server": {"port": 8080}}', encoding='utf-8')
        config = JsonConfig(path)
        assert config.read('server.port', int) == 8080
        with pytest.raises(UnsupportedValueError, match="NoneType"):
            config.load(io.StringIO('{"server": {"host": null}}'))
        assert config.has_key('server.host') is False

    def test_path_type_accepted(self, tmp_path):
        """Test pathlib.Path objects."""
        path = Path(tmp_path) / 'x.toml'
        path.write_text('x = 1\n', encoding='utf-8')
        assert TomlConfig(path, root='r').read('r.x', int) == 1
