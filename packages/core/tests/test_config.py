"""Tests for configuration loading and validation."""

import pytest

from reviewgate_core.config import load_config, threshold_config
from reviewgate_core.errors import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("INPUT_REVIEW-LABEL-PREFIX", "INPUT_DEFAULT-REQUIRED-REVIEWERS", "INPUT_TOKEN", "GITHUB_TOKEN"):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    def test_defaults_applied_when_no_config_file(self, tmp_path):
        config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
        assert config["label_prefix"] == "reviewers-required/"
        assert config["default_required_reviewers"] == 1
        assert config["github_token"] is None

    def test_config_file_overrides_defaults(self, tmp_path):
        cfg = tmp_path / ".reviewgate.yml"
        cfg.write_text("label_prefix: needs-reviews/\ndefault_required_reviewers: 2\n")
        config = load_config(config_path=str(cfg))
        assert config["label_prefix"] == "needs-reviews/"
        assert config["default_required_reviewers"] == 2

    def test_empty_config_file(self, tmp_path):
        cfg = tmp_path / ".reviewgate.yml"
        cfg.write_text("")
        config = load_config(config_path=str(cfg))
        assert config["label_prefix"] == "reviewers-required/"

    def test_action_inputs_override_config_file(self, tmp_path, monkeypatch):
        cfg = tmp_path / ".reviewgate.yml"
        cfg.write_text("label_prefix: needs-reviews/\n")
        monkeypatch.setenv("INPUT_REVIEW-LABEL-PREFIX", "approvals/")
        monkeypatch.setenv("INPUT_DEFAULT-REQUIRED-REVIEWERS", "3")
        config = load_config(config_path=str(cfg))
        assert config["label_prefix"] == "approvals/"
        assert config["default_required_reviewers"] == "3"

    def test_empty_action_inputs_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setenv("INPUT_REVIEW-LABEL-PREFIX", "")
        config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
        assert config["label_prefix"] == "reviewers-required/"

    def test_cli_overrides_everything(self, tmp_path, monkeypatch):
        monkeypatch.setenv("INPUT_DEFAULT-REQUIRED-REVIEWERS", "3")
        config = load_config(
            config_path=str(tmp_path / "nonexistent.yml"),
            cli_overrides={"default_required_reviewers": 5},
        )
        assert config["default_required_reviewers"] == 5

    def test_none_cli_overrides_ignored(self, tmp_path):
        cfg = tmp_path / ".reviewgate.yml"
        cfg.write_text("label_prefix: needs-reviews/\n")
        config = load_config(config_path=str(cfg), cli_overrides={"label_prefix": None})
        assert config["label_prefix"] == "needs-reviews/"

    def test_input_token_preferred_over_github_token(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "gh-token")
        monkeypatch.setenv("INPUT_TOKEN", "input-token")
        config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
        assert config["github_token"] == "input-token"

    def test_github_token_loaded(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "gh-token")
        config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
        assert config["github_token"] == "gh-token"


class TestThresholdConfig:
    def test_valid_config(self):
        settings = threshold_config({"label_prefix": "reviews/", "default_required_reviewers": 2})
        assert settings.label_prefix == "reviews/"
        assert settings.default_threshold == 2

    def test_numeric_string_default(self):
        settings = threshold_config({"label_prefix": "reviews/", "default_required_reviewers": " 3 "})
        assert settings.default_threshold == 3

    def test_zero_default_allowed(self):
        settings = threshold_config({"label_prefix": "reviews/", "default_required_reviewers": "0"})
        assert settings.default_threshold == 0

    @pytest.mark.parametrize("value", ["-1", -2, "abc", "", None, "1.5", True])
    def test_invalid_default_rejected(self, value):
        with pytest.raises(ConfigError):
            threshold_config({"label_prefix": "reviews/", "default_required_reviewers": value})

    @pytest.mark.parametrize("prefix", ["", None, 3])
    def test_empty_prefix_rejected(self, prefix):
        with pytest.raises(ConfigError):
            threshold_config({"label_prefix": prefix, "default_required_reviewers": 1})
