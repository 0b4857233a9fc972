import tempfile

import pytest

from inriver_packager.core.config_parsing import ConfigParser


def write_temp(content, suffix):
    with tempfile.NamedTemporaryFile('w', delete=False, suffix=suffix) as f:
        f.write(content)
        return f.name


def test_parse_yaml_config():
    config_path = write_temp("log_level: DEBUG\nlog_file: packager.log\n", '.yaml')
    parser = ConfigParser(config_path)
    assert parser.parse() == {'log_level': 'DEBUG', 'log_file': 'packager.log'}
    assert parser.settings() == {'log_level': 'DEBUG', 'log_file': 'packager.log'}


def test_parse_ini_config():
    config_path = write_temp("[logging]\nlog_level=ERROR", '.ini')
    parser = ConfigParser(config_path)
    config = parser.parse()
    assert config['logging']['log_level'] == 'ERROR'
    assert parser.settings() == {'log_level': 'ERROR', 'log_file': None}


def test_parse_json_config():
    config_path = write_temp('{"log_file": "out.log"}', '.json')
    assert ConfigParser(config_path).settings() == {'log_level': 'INFO', 'log_file': 'out.log'}


def test_unknown_format_uses_defaults():
    config_path = write_temp("log_level = DEBUG", '.toml')
    parser = ConfigParser(config_path)
    assert parser.parse() == {}
    assert parser.settings() == {'log_level': 'INFO', 'log_file': None}


def test_non_mapping_yaml_is_rejected():
    config_path = write_temp("- just\n- a list\n", '.yml')
    with pytest.raises(ValueError):
        ConfigParser(config_path).settings()


def test_malformed_yaml_is_rejected():
    config_path = write_temp("log_level: [unclosed\n", '.yaml')
    with pytest.raises(ValueError):
        ConfigParser(config_path).settings()


def test_ini_without_section_is_rejected():
    config_path = write_temp("log_level=DEBUG\n", '.ini')
    with pytest.raises(ValueError):
        ConfigParser(config_path).settings()


def test_unknown_log_level_is_rejected():
    config_path = write_temp("log_level: verbose\n", '.yaml')
    with pytest.raises(ValueError, match="unknown log_level"):
        ConfigParser(config_path).settings()


def test_log_level_is_normalized():
    config_path = write_temp('{"log_level": "warning"}', '.json')
    assert ConfigParser(config_path).settings()['log_level'] == 'WARNING'
