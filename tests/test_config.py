"""
ClientConfig 테스트
"""

import pytest

from canvelete.config import DEFAULT_BASE_URL, ClientConfig, ConfigurationError


class TestFromEnv:
    """환경변수 로드 테스트"""

    def test_defaults(self, clean_env):
        config = ClientConfig.from_env()

        assert config.api_key == ""
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == 30.0
        assert config.max_retries == 0
        assert config.webhook_secret == ""
        assert config.webhook_tolerance == 300

    def test_from_env(self, clean_env):
        clean_env.setenv("CANVELETE_API_KEY", "cvt_env")
        clean_env.setenv("CANVELETE_BASE_URL", "http://localhost:3000")
        clean_env.setenv("CANVELETE_TIMEOUT", "12.5")
        clean_env.setenv("CANVELETE_MAX_RETRIES", "4")
        clean_env.setenv("CANVELETE_WEBHOOK_SECRET", "whsec_env")
        clean_env.setenv("CANVELETE_WEBHOOK_TOLERANCE", "60")

        config = ClientConfig.from_env()

        assert config.api_key == "cvt_env"
        assert config.base_url == "http://localhost:3000"
        assert config.timeout == 12.5
        assert config.max_retries == 4
        assert config.webhook_secret == "whsec_env"
        assert config.webhook_tolerance == 60

    def test_from_env_validated_missing_key(self, clean_env):
        with pytest.raises(ConfigurationError, match="CANVELETE_API_KEY"):
            ClientConfig.from_env_validated()

    def test_from_env_validated_non_strict(self, clean_env):
        config = ClientConfig.from_env_validated(strict=False)

        assert config.api_key == ""


class TestFromYaml:
    """YAML 로드 테스트"""

    def test_top_level_keys(self, tmp_path):
        path = tmp_path / "canvelete.yaml"
        path.write_text("api_key: cvt_yaml\ntimeout: 5\n", encoding="utf-8")

        config = ClientConfig.from_yaml(path)

        assert config.api_key == "cvt_yaml"
        assert config.timeout == 5

    def test_canvelete_section(self, tmp_path):
        path = tmp_path / "app.yaml"
        path.write_text(
            "canvelete:\n  api_key: cvt_section\n  max_retries: 2\n",
            encoding="utf-8",
        )

        config = ClientConfig.from_yaml(path)

        assert config.api_key == "cvt_section"
        assert config.max_retries == 2

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "canvelete.yaml"
        path.write_text("api_key: cvt\nunknown_option: 1\n", encoding="utf-8")

        config = ClientConfig.from_yaml(path)

        assert config.api_key == "cvt"
        assert not hasattr(config, "unknown_option")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert ClientConfig.from_yaml(path) == ClientConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="설정 파일 없음"):
            ClientConfig.from_yaml(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("api_key: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="YAML 파싱 실패"):
            ClientConfig.from_yaml(path)

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="잘못된 설정 형식"):
            ClientConfig.from_yaml(path)


class TestValidate:
    """설정 검증 테스트"""

    def test_valid_config(self, client_config):
        assert client_config.validate() == []

    def test_invalid_values(self):
        config = ClientConfig(
            api_key="cvt",
            base_url="ftp://example.com",
            timeout=0,
            max_retries=-1,
            webhook_tolerance=-5,
        )

        with pytest.raises(ConfigurationError) as exc_info:
            config.validate()

        assert "4개 오류" in str(exc_info.value)

    def test_non_strict_returns_messages(self):
        config = ClientConfig(api_key="", timeout=0)

        messages = config.validate(strict=False)

        assert len(messages) == 2

    def test_warnings_do_not_raise(self):
        config = ClientConfig(api_key="cvt", timeout=600, max_retries=20)

        messages = config.validate()

        assert len(messages) == 2
        assert any("타임아웃" in m for m in messages)
        assert any("max_retries" in m for m in messages)
