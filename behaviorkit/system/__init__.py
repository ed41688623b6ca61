"""
系统层 (System Layer)

核心服务：配置中心、日志。
"""

from behaviorkit.system.services.config_center import ConfigCenter
from behaviorkit.system.services.logger import get_logger

__all__ = ["ConfigCenter", "get_logger"]
