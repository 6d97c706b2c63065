"""Tests for menuflow.config and menuflow.config_loader."""

from pathlib import Path

import pytest

from menuflow._errors import ConfigError
from menuflow.config import MenuflowConfig
from menuflow.config_loader import find_config, load_config
from menuflow.navigation.events import Nav


class TestMenuflowConfig:
    """MenuflowConfig — frozen dataclass with sensible defaults."""

    def test_defaults(self) -> None:
        config = MenuflowConfig()
        assert config.next_key == 40
        assert config.previous_key == 38
        assert config.select_key == 13
        assert config.clear_key == 27
        assert config.highlight_marker == ">"
        assert config.select_marker == "*"
        assert config.highlighted_class == "highlighted"
        assert config.selected_class == "selected"
        assert config.max_events == 10_000

    def test_frozen(self) -> None:
        config = MenuflowConfig()
        with pytest.raises(AttributeError):
            config.next_key = 74  # type: ignore[misc]

    def test_root_resolved(self) -> None:
        config = MenuflowConfig(root=Path("."))
        assert config.root.is_absolute()

    def test_keymap(self) -> None:
        keymap = MenuflowConfig(next_key=74, previous_key=75).keymap()
        assert keymap.tag(74) is Nav.NEXT
        assert keymap.tag(75) is Nav.PREVIOUS

    def test_conflicting_keys(self) -> None:
        with pytest.raises(ConfigError, match="distinct"):
            MenuflowConfig(next_key=13)

    def test_bad_marker(self) -> None:
        with pytest.raises(ConfigError, match="single"):
            MenuflowConfig(highlight_marker="")

    def test_bad_max_events(self) -> None:
        with pytest.raises(ConfigError, match="max_events"):
            MenuflowConfig(max_events=0)

    def test_bool_is_not_a_key_code(self) -> None:
        with pytest.raises(ConfigError, match="select_key must be an integer"):
            MenuflowConfig(select_key=True)  # type: ignore[arg-type]

    def test_empty_class_name(self) -> None:
        with pytest.raises(ConfigError, match="must not be empty"):
            MenuflowConfig(selected_class="")


class TestLoadConfig:
    def test_no_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert config == MenuflowConfig(root=tmp_path)
        assert find_config(tmp_path) is None

    def test_yaml_section(self, tmp_path: Path) -> None:
        (tmp_path / "menuflow.yaml").write_text(
            "menuflow:\n  next_key: 74\n  highlight_marker: '-'\n"
        )
        config = load_config(tmp_path)
        assert config.next_key == 74
        assert config.highlight_marker == "-"

    def test_yaml_top_level(self, tmp_path: Path) -> None:
        (tmp_path / "menuflow.yml").write_text("select_key: 32\nclear_key: null\n")
        config = load_config(tmp_path)
        assert config.select_key == 32
        assert config.clear_key is None

    def test_toml(self, tmp_path: Path) -> None:
        (tmp_path / "menuflow.toml").write_text(
            "[menuflow]\nprevious_key = 75\nselected_class = 'chosen'\n"
        )
        config = load_config(tmp_path)
        assert config.previous_key == 75
        assert config.selected_class == "chosen"

    def test_yaml_preferred_over_toml(self, tmp_path: Path) -> None:
        (tmp_path / "menuflow.yaml").write_text("next_key: 1\n")
        (tmp_path / "menuflow.toml").write_text("next_key = 2\n")
        assert find_config(tmp_path) == tmp_path / "menuflow.yaml"
        assert load_config(tmp_path).next_key == 1

    def test_overrides_win(self, tmp_path: Path) -> None:
        (tmp_path / "menuflow.yaml").write_text("next_key: 74\n")
        assert load_config(tmp_path, next_key=9).next_key == 9

    def test_unknown_setting(self, tmp_path: Path) -> None:
        (tmp_path / "menuflow.yaml").write_text("colour: red\n")
        with pytest.raises(ConfigError, match="colour"):
            load_config(tmp_path)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "menuflow.yaml").write_text("next_key: [unclosed\n")
        with pytest.raises(ConfigError, match="menuflow.yaml"):
            load_config(tmp_path)

    def test_malformed_toml(self, tmp_path: Path) -> None:
        (tmp_path / "menuflow.toml").write_text("next_key = \n")
        with pytest.raises(ConfigError, match="menuflow.toml"):
            load_config(tmp_path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        (tmp_path / "menuflow.yaml").write_text("- just\n- a list\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(tmp_path)

    def test_empty_file(self, tmp_path: Path) -> None:
        (tmp_path / "menuflow.yaml").write_text("")
        assert load_config(tmp_path).next_key == 40

    def test_wrong_type_marker(self, tmp_path: Path) -> None:
        (tmp_path / "menuflow.yaml").write_text("highlight_marker: 5\n")
        with pytest.raises(ConfigError, match="highlight_marker must be a string"):
            load_config(tmp_path)

    def test_wrong_type_max_events(self, tmp_path: Path) -> None:
        (tmp_path / "menuflow.yaml").write_text("max_events: lots\n")
        with pytest.raises(ConfigError, match="max_events must be an integer"):
            load_config(tmp_path)

    def test_wrong_type_key_code(self, tmp_path: Path) -> None:
        (tmp_path / "menuflow.toml").write_text("next_key = \"down\"\n")
        with pytest.raises(ConfigError, match="next_key must be an integer"):
            load_config(tmp_path)

    def test_clashing_key_codes(self, tmp_path: Path) -> None:
        (tmp_path / "menuflow.yaml").write_text("next_key: 27\n")
        with pytest.raises(ConfigError, match="distinct"):
            load_config(tmp_path)
