"""
Pytest 配置和公共 fixtures
"""

import sys
from datetime import date
from pathlib import Path
from typing import List

import pytest

# 添加项目根目录到路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from behaviorkit.behavior.builtin.formatters import SalesRecord  # noqa: E402
from behaviorkit.behavior.registry import BehaviorRegistry  # noqa: E402
from behaviorkit.core import BehaviorKit  # noqa: E402


# ============== 路径 ==============

@pytest.fixture
def default_config_path() -> Path:
    """仓库自带的默认配置"""
    return project_root / "configs" / "behaviorkit.yaml"


@pytest.fixture
def temp_config(tmp_path: Path):
    """在临时目录写入 YAML 配置，返回路径"""
    def _write(text: str) -> Path:
        config_dir = tmp_path / "configs"
        config_dir.mkdir(exist_ok=True)
        path = config_dir / "behaviorkit.yaml"
        path.write_text(text, encoding="utf-8")
        return path
    return _write


# ============== 注册表 / 组合根 ==============

@pytest.fixture
def registry() -> BehaviorRegistry:
    """空注册表"""
    return BehaviorRegistry(name="test")


@pytest.fixture
def kit(default_config_path: Path) -> BehaviorKit:
    """已初始化的组合根"""
    return BehaviorKit(str(default_config_path)).initialize()


# ============== 数据 ==============

@pytest.fixture
def sales_records() -> List[SalesRecord]:
    """示例销售记录"""
    return [
        SalesRecord(date(2024, 1, 1), "Laptop", 1500.00),
        SalesRecord(date(2024, 1, 2), "Mouse", 25.00),
        SalesRecord(date(2024, 1, 3), "Keyboard", 75.00),
    ]


# ============== 环境变量 ==============

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """清理测试环境变量"""
    monkeypatch.setenv("BEHAVIORKIT_ENV", "test")
    monkeypatch.delenv("SMTP_HOST", raising=False)
