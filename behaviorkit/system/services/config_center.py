"""
配置中心

提供集中式配置管理和重载。
支持从.env文件加载环境变量，支持YAML中的环境变量引用。
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field

from behaviorkit.system.services.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = "configs/behaviorkit.yaml"


def load_dotenv(env_path: Optional[Path] = None) -> bool:
    """
    加载.env文件中的环境变量

    Args:
        env_path: .env文件路径，默认从当前目录向上查找

    Returns:
        是否成功加载
    """
    if env_path is None:
        current = Path.cwd()
        env_path = current / ".env"

        if not env_path.exists():
            for parent in current.parents:
                candidate = parent / ".env"
                if candidate.exists():
                    env_path = candidate
                    break

    if not env_path or not env_path.exists():
        logger.debug(f".env文件不存在: {env_path}")
        return False

    logger.info(f"加载环境变量文件: {env_path}")

    with open(env_path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip()

                if (value.startswith('"') and value.endswith('"')) or \
                   (value.startswith("'") and value.endswith("'")):
                    value = value[1:-1]

                # 不覆盖已有环境变量
                if key and key not in os.environ:
                    os.environ[key] = value
                    logger.debug(f"设置环境变量: {key}")

    return True


def expand_env_vars(value: Any) -> Any:
    """
    展开字符串中的环境变量引用

    支持格式:
    - ${VAR_NAME}
    - $VAR_NAME

    未定义的变量保持原样。
    """
    if isinstance(value, str):
        pattern = r'\$\{([^}]+)\}|\$([A-Za-z_][A-Za-z0-9_]*)'

        def replace(match):
            var_name = match.group(1) or match.group(2)
            return os.environ.get(var_name, match.group(0))

        return re.sub(pattern, replace, value)
    elif isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    else:
        return value


class SystemConfig(BaseModel):
    """系统配置"""
    name: str = "behaviorkit"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"


class RegistryConfig(BaseModel):
    """注册表配置"""
    # overwrite: 后注册覆盖; error: 重复注册报错
    duplicate_policy: Literal["overwrite", "error"] = "overwrite"


class RateCard(BaseModel):
    """承运商费率卡"""
    base_cost: float
    weight_rate: float
    distance_rate: float = 0.0
    long_distance_km: float = 500.0
    short_days: int = 1
    long_days: int = 1


def _default_carriers() -> Dict[str, RateCard]:
    return {
        "DHL": RateCard(base_cost=10, weight_rate=0.5, distance_rate=0.1,
                        short_days=1, long_days=3),
        "UPS": RateCard(base_cost=12, weight_rate=0.45, distance_rate=0.12,
                        short_days=2, long_days=4),
        "FedEx": RateCard(base_cost=15, weight_rate=0.4, distance_rate=0.15,
                          short_days=1, long_days=2),
        "InPost": RateCard(base_cost=8, weight_rate=0.3, distance_rate=0.0,
                           short_days=5, long_days=5),
    }


class ShippingConfig(BaseModel):
    """运费配置"""
    carriers: Dict[str, RateCard] = Field(default_factory=_default_carriers)


class DiscountConfig(BaseModel):
    """折扣配置"""
    tiers: Dict[str, float] = Field(default_factory=lambda: {
        "regular": 0.05,
        "silver": 0.10,
        "gold": 0.15,
        "platinum": 0.20,
    })
    corporate_threshold: float = 10000.0
    corporate_high_rate: float = 0.30
    corporate_low_rate: float = 0.18
    vip_base_rate: float = 0.25
    vip_loyalty_rate: float = 0.01


class NotificationConfig(BaseModel):
    """通知渠道配置"""
    smtp_host: str = "localhost"
    smtp_port: int = 25
    sender: str = "noreply@example.com"
    sms_gateway: str = "sms.example.com"
    push_app_id: str = "behaviorkit"


class BehaviorKitConfig(BaseModel):
    """behaviorkit 完整配置"""
    system: SystemConfig = Field(default_factory=SystemConfig)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    shipping: ShippingConfig = Field(default_factory=ShippingConfig)
    discount: DiscountConfig = Field(default_factory=DiscountConfig)
    notification: NotificationConfig = Field(default_factory=NotificationConfig)


class ConfigCenter:
    """
    配置中心

    负责加载、管理和重载配置。
    """

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH):
        """
        初始化配置中心

        Args:
            config_path: 配置文件路径
        """
        self.config_path = Path(config_path)
        self._config: Optional[BehaviorKitConfig] = None
        self._raw_config: Dict[str, Any] = {}

    def load(self) -> BehaviorKitConfig:
        """
        加载配置文件

        流程:
        1. 加载.env文件中的环境变量
        2. 加载YAML配置文件
        3. 展开配置中的环境变量引用
        4. 解析为配置对象

        Returns:
            BehaviorKitConfig 实例
        """
        env_path = self.config_path.parent.parent / ".env"
        load_dotenv(env_path)

        if self.config_path.exists():
            logger.info(f"加载配置文件: {self.config_path}")
            with open(self.config_path, "r", encoding="utf-8") as f:
                self._raw_config = yaml.safe_load(f) or {}
        else:
            logger.warning(f"配置文件不存在，使用默认配置: {self.config_path}")
            self._raw_config = {}

        self._raw_config = expand_env_vars(self._raw_config)

        self._config = BehaviorKitConfig(**self._raw_config)
        return self._config

    def reload(self) -> BehaviorKitConfig:
        """重新加载配置"""
        logger.info("重新加载配置...")
        return self.load()

    @property
    def config(self) -> BehaviorKitConfig:
        """获取当前配置"""
        if self._config is None:
            raise RuntimeError("配置尚未加载，请先调用 load()")
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        获取配置值

        Args:
            key: 配置键，支持点号分隔的嵌套键
            default: 默认值

        Returns:
            配置值
        """
        keys = key.split(".")
        value = self._raw_config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value
