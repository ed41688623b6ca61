"""
日志服务

提供统一的日志初始化和分层日志混入。
支持trace_id追踪、层级标识、结构化日志。
"""

import contextvars
import logging
import sys
from dataclasses import dataclass
from typing import Dict, Optional

# 日志格式 - 增强版，包含trace_id、层级、组件
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(trace_id)s | %(layer)s | %(component)s | %(message)s"
LOG_FORMAT_SIMPLE = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_log_level = logging.INFO
_initialized = False
_use_enhanced_format = True

# 上下文变量
_trace_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("trace_id", default="-")
_layer_var: contextvars.ContextVar[str] = contextvars.ContextVar("layer", default="-")
_component_var: contextvars.ContextVar[str] = contextvars.ContextVar("component", default="-")


class Layer:
    """组件层级常量"""
    BEHAVIOR = "Behavior"
    REGISTRY = "Registry"
    CONTEXT = "Context"
    EVENTS = "Events"
    COMMAND = "Command"
    SYSTEM = "System"


@dataclass
class LogContext:
    """日志上下文"""
    trace_id: str = "-"
    layer: str = "-"
    component: str = "-"

    def to_dict(self) -> Dict[str, str]:
        return {
            "trace_id": self.trace_id,
            "layer": self.layer,
            "component": self.component,
        }


class TraceIdFilter(logging.Filter):
    """添加trace_id到日志记录的过滤器"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = _trace_id_var.get()
        record.layer = _layer_var.get()
        record.component = _component_var.get()
        return True


def get_trace_context() -> LogContext:
    """获取当前上下文的追踪信息"""
    return LogContext(
        trace_id=_trace_id_var.get(),
        layer=_layer_var.get(),
        component=_component_var.get(),
    )


def clear_trace_context() -> None:
    """清除追踪上下文"""
    _trace_id_var.set("-")
    _layer_var.set("-")
    _component_var.set("-")


class TraceContextManager:
    """追踪上下文管理器"""

    def __init__(
        self,
        trace_id: Optional[str] = None,
        layer: Optional[str] = None,
        component: Optional[str] = None,
    ):
        self.trace_id = trace_id
        self.layer = layer
        self.component = component
        self._tokens = []

    def __enter__(self) -> "TraceContextManager":
        if self.trace_id is not None:
            self._tokens.append((_trace_id_var, _trace_id_var.set(self.trace_id)))
        if self.layer is not None:
            self._tokens.append((_layer_var, _layer_var.set(self.layer)))
        if self.component is not None:
            self._tokens.append((_component_var, _component_var.set(self.component)))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        # 按相反顺序恢复
        while self._tokens:
            var, token = self._tokens.pop()
            var.reset(token)


def trace_context(
    trace_id: Optional[str] = None,
    layer: Optional[str] = None,
    component: Optional[str] = None,
) -> TraceContextManager:
    """
    创建追踪上下文管理器

    用法:
        with trace_context(trace_id="abc123", layer=Layer.REGISTRY, component="shipping"):
            logger.info("处理中...")
    """
    return TraceContextManager(trace_id, layer, component)


def setup_logging(
    level: int = logging.INFO,
    use_enhanced_format: bool = True,
) -> None:
    """
    初始化日志系统

    Args:
        level: 日志级别
        use_enhanced_format: 是否使用增强格式（包含trace_id、层级等）
    """
    global _log_level, _initialized, _use_enhanced_format

    if _initialized:
        return

    _log_level = level
    _use_enhanced_format = use_enhanced_format

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    log_format = LOG_FORMAT if use_enhanced_format else LOG_FORMAT_SIMPLE
    console_handler.setFormatter(logging.Formatter(log_format, DATE_FORMAT))

    if use_enhanced_format:
        console_handler.addFilter(TraceIdFilter())

    root_logger.addHandler(console_handler)
    _initialized = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    获取日志器

    Args:
        name: 日志器名称，通常使用 __name__

    Returns:
        Logger 实例
    """
    if not _initialized:
        setup_logging()

    return logging.getLogger(name or "behaviorkit")


class LoggerMixin:
    """
    日志器混入类，为类提供 self.logger 属性

    子类通过 _log_layer 指定所属层级。
    """

    _log_layer: str = "-"

    @property
    def logger(self) -> logging.Logger:
        if "_logger" not in self.__dict__:
            self.__dict__["_logger"] = get_logger(
                f"behaviorkit.{self.__class__.__name__}"
            )
        return self.__dict__["_logger"]

    def log_info(self, message: str, trace_id: Optional[str] = None) -> None:
        """带上下文的INFO日志"""
        with trace_context(trace_id=trace_id, layer=self._log_layer, component=self.__class__.__name__):
            self.logger.info(message)

    def log_warning(self, message: str, trace_id: Optional[str] = None) -> None:
        """带上下文的WARNING日志"""
        with trace_context(trace_id=trace_id, layer=self._log_layer, component=self.__class__.__name__):
            self.logger.warning(message)


class BehaviorLoggerMixin(LoggerMixin):
    """行为日志混入"""
    _log_layer = Layer.BEHAVIOR


class RegistryLoggerMixin(LoggerMixin):
    """注册表日志混入"""
    _log_layer = Layer.REGISTRY


class ContextLoggerMixin(LoggerMixin):
    """上下文日志混入"""
    _log_layer = Layer.CONTEXT


class EventsLoggerMixin(LoggerMixin):
    """事件日志混入"""
    _log_layer = Layer.EVENTS


class CommandLoggerMixin(LoggerMixin):
    """命令日志混入"""
    _log_layer = Layer.COMMAND


class SystemLoggerMixin(LoggerMixin):
    """系统层日志混入"""
    _log_layer = Layer.SYSTEM
