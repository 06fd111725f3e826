import textwrap
from pathlib import Path

import pytest

from twsort.config import ConfigError, TwsortCfg, cfg_from_dict, find_config, load_config
from twsort.config.model import DEFAULT_EXTENSIONS
from .conftest import write


def test_defaults():
    cfg = cfg_from_dict(None)
    assert cfg == TwsortCfg()
    assert cfg.tailwind_attributes is None
    assert cfg.tailwind_functions is None
    assert cfg.order == "preserve"
    assert cfg.extensions == DEFAULT_EXTENSIONS


def test_snake_case_keys():
    cfg = cfg_from_dict({
        "tailwind_attributes": ["tw"],
        "tailwind_functions": ["clsx", "cn"],
        "tailwind_preserve_whitespace": True,
        "order": "alphabetical",
    })
    assert cfg.tailwind_attributes == ["tw"]
    assert cfg.tailwind_functions == ["clsx", "cn"]
    assert cfg.tailwind_preserve_whitespace is True
    assert cfg.tailwind_preserve_duplicates is False
    assert cfg.order == "alphabetical"


def test_camel_case_aliases():
    cfg = cfg_from_dict({"tailwindFunctions": ["tw"], "tailwindPreserveDuplicates": True})
    assert cfg.tailwind_functions == ["tw"]
    assert cfg.tailwind_preserve_duplicates is True


def test_option_given_twice():
    with pytest.raises(ConfigError, match="given twice"):
        cfg_from_dict({"tailwindFunctions": ["a"], "tailwind_functions": ["b"]})


def test_unknown_key_is_rejected():
    with pytest.raises(ConfigError, match="unexpected keys"):
        cfg_from_dict({"tailwind_functionz": ["clsx"]})


def test_wrong_type_names_field_path():
    with pytest.raises(ConfigError) as ei:
        cfg_from_dict({"tailwind_functions": "clsx"})
    assert str(ei.value).startswith("tailwind_functions")

    with pytest.raises(ConfigError) as ei:
        cfg_from_dict({"tailwind_preserve_whitespace": "yes"})
    assert "tailwind_preserve_whitespace" in str(ei.value)


def test_list_items_are_checked():
    with pytest.raises(ConfigError) as ei:
        cfg_from_dict({"tailwind_attributes": ["ok", {"no": 1}]})
    assert "tailwind_attributes.1" in str(ei.value)


def test_with_overrides_ignores_none():
    cfg = TwsortCfg(tailwind_functions=["clsx"], order="alphabetical")
    out = cfg.with_overrides(tailwind_functions=None, order="preserve")
    assert out.tailwind_functions == ["clsx"]
    assert out.order == "preserve"
    assert cfg.order == "alphabetical"


def test_load_yaml_file(tmp_path: Path):
    path = write(tmp_path / "twsort.yaml", textwrap.dedent("""
        tailwindAttributes: [myClassProp]
        tailwind_functions:
          - clsx
          - cva
        order: alphabetical
        exclude: ["generated/"]
    """))
    cfg = load_config(path)
    assert cfg.tailwind_attributes == ["myClassProp"]
    assert cfg.tailwind_functions == ["clsx", "cva"]
    assert cfg.order == "alphabetical"
    assert cfg.exclude == ["generated/"]


def test_empty_yaml_file_gives_defaults(tmp_path: Path):
    path = write(tmp_path / "twsort.yaml", "")
    assert load_config(path) == TwsortCfg()


def test_non_mapping_yaml_is_rejected(tmp_path: Path):
    path = write(tmp_path / "twsort.yaml", "- a\n- b\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(path)


def test_invalid_yaml_is_rejected(tmp_path: Path):
    path = write(tmp_path / "twsort.yaml", "order: [unclosed\n")
    with pytest.raises(ConfigError, match="invalid YAML"):
        load_config(path)


def test_missing_explicit_file(tmp_path: Path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.yaml")


def test_find_config_searches_parents(tmp_path: Path):
    cfg_path = write(tmp_path / ".twsort.yaml", "order: alphabetical\n")
    nested = tmp_path / "src" / "components"
    nested.mkdir(parents=True)
    assert find_config(nested) == cfg_path.resolve()
    assert load_config(start=nested).order == "alphabetical"


def test_no_config_found_gives_defaults(tmp_path: Path):
    nested = tmp_path / "a"
    nested.mkdir()
    if find_config(nested) is None:
        assert load_config(start=nested) == TwsortCfg()
