import pytest

from algo_katas.settings import DEFAULT_SETTINGS, KataSettings, load_settings


def test_defaults_validate():
    DEFAULT_SETTINGS.validate()
    assert DEFAULT_SETTINGS.to_dict() == {"brace_policy": "reject"}


def test_invalid_brace_policy():
    with pytest.raises(ValueError):
        KataSettings(brace_policy="ignore").validate()


def test_load_settings_from_yaml(tmp_path):
    p = tmp_path / "katas.yaml"
    p.write_text("brace_policy: literal\n", encoding="utf-8")
    assert load_settings(p) == KataSettings(brace_policy="literal")


def test_load_settings_empty_file_gives_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    assert load_settings(p) == DEFAULT_SETTINGS


@pytest.mark.parametrize("text", ["range_min_run: 2\n", "range_separator: ';'\n", "- literal\n"])
def test_load_settings_rejects_unknown_or_non_mapping(tmp_path, text):
    p = tmp_path / "bad.yaml"
    p.write_text(text, encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(p)
