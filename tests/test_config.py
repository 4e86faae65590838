import pytest

from profile_explorer.config import DEFAULT_API_URL, Config


class TestConfigFromEnv:
    def test_defaults(self):
        config = Config.from_env({}, dotenv=False)

        assert config.api_url == DEFAULT_API_URL
        assert config.timeout is None
        assert config.copy_feedback_seconds == 1.5
        assert config.dark is True

    def test_overrides(self):
        config = Config.from_env(
            {
                "GITHUB_API_URL": "http://localhost:8080",
                "PROFILE_EXPLORER_TIMEOUT": "10",
                "PROFILE_EXPLORER_COPY_SECONDS": "0.5",
                "PROFILE_EXPLORER_THEME": "Light",
            },
            dotenv=False,
        )

        assert config.api_url == "http://localhost:8080"
        assert config.timeout == 10.0
        assert config.copy_feedback_seconds == 0.5
        assert config.dark is False

    def test_invalid_theme(self):
        with pytest.raises(ValueError):
            Config.from_env({"PROFILE_EXPLORER_THEME": "sepia"}, dotenv=False)

    def test_empty_theme_falls_back_to_dark(self):
        config = Config.from_env({"PROFILE_EXPLORER_THEME": ""}, dotenv=False)

        assert config.dark is True
