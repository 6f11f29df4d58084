"""
Tests for ccparse.config module.
"""

import pytest


class TestConfigLoader:
    """Tests for configuration loading."""

    def test_defaults_without_file(self, isolated_cwd):
        from ccparse.config import DEFAULT_CONFIG, load_config

        config = load_config()

        assert config == DEFAULT_CONFIG

    def test_load_config_from_file(self, isolated_cwd):
        from ccparse.config import load_config

        config_file = isolated_cwd / ".ccparse.toml"
        config_file.write_text('[output]\nfield_case = "snake"  # comment\nindent = 4\n')

        config = load_config(config_file)

        assert config["output"]["field_case"] == "snake"
        assert config["output"]["indent"] == 4

    def test_partial_file_merges_with_defaults(self, isolated_cwd):
        from ccparse.config import load_config

        (isolated_cwd / ".ccparse.toml").write_text("[output]\nindent = 2\n")

        config = load_config()

        assert config["output"]["indent"] == 2
        assert config["output"]["field_case"] == "pascal"

    def test_invalid_toml(self, isolated_cwd):
        from ccparse.config import ConfigError, load_config

        config_file = isolated_cwd / ".ccparse.toml"
        config_file.write_text("[output\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(config_file)

    def test_missing_explicit_file(self, isolated_cwd):
        from ccparse.config import ConfigError, load_config

        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(isolated_cwd / "nope.toml")

    @pytest.mark.parametrize(
        "body",
        [
            'field_case = "camel"',
            "indent = -1",
            'indent = "wide"',
            "indent = true",
        ],
    )
    def test_invalid_values(self, isolated_cwd, body):
        from ccparse.config import ConfigError, load_config

        config_file = isolated_cwd / ".ccparse.toml"
        config_file.write_text(f"[output]\n{body}\n")

        with pytest.raises(ConfigError):
            load_config(config_file)


class TestFindConfigFile:
    def test_find_config_file(self, isolated_cwd):
        from ccparse.config import find_config_file

        (isolated_cwd / ".ccparse.toml").write_text("")

        config_path = find_config_file(isolated_cwd)
        assert config_path is not None
        assert config_path.name == ".ccparse.toml"

    def test_find_config_in_parent(self, isolated_cwd):
        from ccparse.config import find_config_file

        (isolated_cwd / ".ccparse.toml").write_text("")
        nested = isolated_cwd / "a" / "b"
        nested.mkdir(parents=True)

        config_path = find_config_file(nested)
        assert config_path is not None
        assert config_path.parent == isolated_cwd.resolve()


class TestConfigMerge:
    """Tests for configuration merging."""

    def test_merge_configs_override(self):
        from ccparse.config import merge_configs

        defaults = {"output": {"field_case": "pascal", "indent": 0}}
        user = {"output": {"indent": 2}}

        merged = merge_configs(defaults, user)

        assert merged == {"output": {"field_case": "pascal", "indent": 2}}

    def test_merge_does_not_mutate_inputs(self):
        from ccparse.config import merge_configs

        defaults = {"output": {"indent": 0}}
        user = {"output": {"indent": 2}, "extra": {"k": [1]}}

        merged = merge_configs(defaults, user)
        merged["extra"]["k"].append(2)

        assert defaults == {"output": {"indent": 0}}
        assert user["extra"]["k"] == [1]


class TestParseToml:
    def test_parse_toml_returns_plain_types(self):
        from ccparse.config import parse_toml

        data = parse_toml('[output]\nfield_case = "snake"\n')

        assert type(data) is dict
        assert type(data["output"]["field_case"]) is str

    def test_parse_toml_document_round_trip(self):
        import tomlkit

        from ccparse.config import parse_toml_document

        text = '[output]\n# keep me\nindent = 2\n'
        assert tomlkit.dumps(parse_toml_document(text)) == text
