"""
配置中心单元测试
"""

import os

import pytest
from pydantic import ValidationError

from behaviorkit.system.services.config_center import (
    BehaviorKitConfig,
    ConfigCenter,
    expand_env_vars,
    load_dotenv,
)


class TestExpandEnvVars:
    """环境变量展开测试"""

    def test_braced_and_bare(self, monkeypatch):
        monkeypatch.setenv("BK_HOST", "mail.local")
        assert expand_env_vars("${BK_HOST}:25") == "mail.local:25"
        assert expand_env_vars("$BK_HOST") == "mail.local"

    def test_undefined_kept(self):
        assert expand_env_vars("${BK_UNDEFINED_VAR}") == "${BK_UNDEFINED_VAR}"

    def test_nested(self, monkeypatch):
        monkeypatch.setenv("BK_HOST", "h")
        assert expand_env_vars({"a": ["${BK_HOST}", 1]}) == {"a": ["h", 1]}


class TestLoadDotenv:
    """.env 加载测试"""

    def test_missing_file(self, tmp_path):
        assert load_dotenv(tmp_path / ".env") is False

    def test_does_not_override(self, tmp_path, monkeypatch):
        """测试不覆盖已有环境变量"""
        monkeypatch.setenv("BK_EXISTING", "from-env")
        monkeypatch.setenv("BK_NEW", "placeholder")
        monkeypatch.delenv("BK_NEW")

        env_file = tmp_path / ".env"
        env_file.write_text(
            "# comment\nBK_EXISTING=from-file\nBK_NEW=\"quoted\"\n",
            encoding="utf-8",
        )

        assert load_dotenv(env_file) is True

        assert os.environ["BK_EXISTING"] == "from-env"
        assert os.environ["BK_NEW"] == "quoted"


class TestConfigCenter:
    """配置加载测试"""

    def test_default_file(self, default_config_path):
        config = ConfigCenter(str(default_config_path)).load()

        assert config.system.name == "behaviorkit"
        assert config.registry.duplicate_policy == "overwrite"
        assert config.shipping.carriers["DHL"].base_cost == 10
        assert config.discount.tiers["gold"] == pytest.approx(0.15)

    def test_missing_file_uses_defaults(self, tmp_path):
        """测试配置文件不存在时使用默认值"""
        config = ConfigCenter(str(tmp_path / "configs" / "none.yaml")).load()
        assert config == BehaviorKitConfig()

    def test_yaml_override(self, temp_config):
        path = temp_config(
            "registry:\n"
            "  duplicate_policy: error\n"
            "notification:\n"
            "  smtp_port: 2525\n"
        )
        config = ConfigCenter(str(path)).load()

        assert config.registry.duplicate_policy == "error"
        assert config.notification.smtp_port == 2525
        assert config.notification.smtp_host == "localhost"

    def test_env_reference(self, temp_config, monkeypatch):
        """测试 YAML 中引用环境变量"""
        monkeypatch.setenv("SMTP_HOST", "smtp.corp")
        path = temp_config("notification:\n  smtp_host: ${SMTP_HOST}\n")

        config = ConfigCenter(str(path)).load()
        assert config.notification.smtp_host == "smtp.corp"

    def test_invalid_policy(self, temp_config):
        path = temp_config("registry:\n  duplicate_policy: merge\n")
        with pytest.raises(ValidationError):
            ConfigCenter(str(path)).load()

    def test_config_before_load(self, default_config_path):
        with pytest.raises(RuntimeError):
            ConfigCenter(str(default_config_path)).config

    def test_get_dotted(self, default_config_path):
        center = ConfigCenter(str(default_config_path))
        center.load()

        assert center.get("shipping.carriers.UPS.base_cost") == 12
        assert center.get("shipping.carriers.Nope", "fallback") == "fallback"

    def test_reload(self, temp_config):
        """测试重新加载"""
        path = temp_config("system:\n  log_level: INFO\n")
        center = ConfigCenter(str(path))
        center.load()

        path.write_text("system:\n  log_level: DEBUG\n", encoding="utf-8")
        assert center.reload().system.log_level == "DEBUG"
