"""
日志服务单元测试
"""

import logging

from behaviorkit.behavior.registry import BehaviorRegistry
from behaviorkit.system.services.logger import (
    Layer,
    TraceIdFilter,
    get_logger,
    get_trace_context,
    trace_context,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord("behaviorkit", logging.INFO, __file__, 1, "msg", None, None)


class TestTraceContext:
    """追踪上下文测试"""

    def test_defaults(self):
        ctx = get_trace_context()
        assert ctx.to_dict() == {"trace_id": "-", "layer": "-", "component": "-"}

    def test_nested_restore(self):
        """测试嵌套上下文退出后恢复"""
        with trace_context(trace_id="outer", layer=Layer.SYSTEM):
            with trace_context(trace_id="inner"):
                assert get_trace_context().trace_id == "inner"
                assert get_trace_context().layer == Layer.SYSTEM
            assert get_trace_context().trace_id == "outer"

        assert get_trace_context().trace_id == "-"

    def test_filter_injects_fields(self):
        record = _record()
        with trace_context(trace_id="t-1", layer=Layer.REGISTRY, component="shipping"):
            TraceIdFilter().filter(record)

        assert record.trace_id == "t-1"
        assert record.layer == "Registry"
        assert record.component == "shipping"


class TestLoggerMixin:
    """日志混入测试"""

    def test_get_logger_default_name(self):
        assert get_logger().name == "behaviorkit"

    def test_logger_named_after_class(self):
        registry = BehaviorRegistry(name="x")
        assert registry.logger.name == "behaviorkit.BehaviorRegistry"
        assert registry.logger is registry.logger

    def test_overwrite_logs_warning(self, caplog):
        """测试重复注册记录警告"""
        registry = BehaviorRegistry(name="shipping")
        registry.register("DHL", object)

        with caplog.at_level(logging.WARNING, logger="behaviorkit"):
            registry.register("DHL", object)

        assert any("DHL" in r.getMessage() for r in caplog.records)
