"""
报表格式化器

ReportGenerator 只依赖 ReportFormatter 契约，新增格式不需要修改生成器。
"""

from __future__ import annotations

import csv
import io
import json
import xml.etree.ElementTree as ET
from abc import abstractmethod
from dataclasses import dataclass
from datetime import date
from html import escape
from typing import TYPE_CHECKING, Any, Dict, List, Sequence

import yaml

from behaviorkit.behavior.base import Behavior, BehaviorConfig
from behaviorkit.behavior.context import BehaviorContext

if TYPE_CHECKING:
    from behaviorkit.behavior.registry import BehaviorRegistry


@dataclass(frozen=True)
class SalesRecord:
    """销售记录"""
    date: date
    product: str
    amount: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "product": self.product,
            "amount": self.amount,
        }


def summarize(records: Sequence[SalesRecord]) -> Dict[str, Any]:
    """合计与笔数"""
    return {
        "total": round(sum(r.amount for r in records), 2),
        "count": len(records),
    }


class ReportFormatter(Behavior):
    """报表格式化契约"""

    fmt = ""

    def __init__(self):
        super().__init__(BehaviorConfig(name=self.fmt, description=f"{self.fmt} report", tags=["report"]))

    @abstractmethod
    def format(self, records: Sequence[SalesRecord]) -> str:
        """把销售记录格式化为字符串"""


class CsvReportFormatter(ReportFormatter):
    fmt = "csv"

    def format(self, records: Sequence[SalesRecord]) -> str:
        summary = summarize(records)
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow(["Date", "Product", "Amount"])
        for r in records:
            writer.writerow([r.date.isoformat(), r.product, f"{r.amount:.2f}"])
        writer.writerow(["TOTAL", f"{summary['count']} transactions", f"{summary['total']:.2f}"])
        return buf.getvalue()


class JsonReportFormatter(ReportFormatter):
    fmt = "json"

    def format(self, records: Sequence[SalesRecord]) -> str:
        payload = {"records": [r.to_dict() for r in records], **summarize(records)}
        return json.dumps(payload, ensure_ascii=False, indent=2)


class YamlReportFormatter(ReportFormatter):
    fmt = "yaml"

    def format(self, records: Sequence[SalesRecord]) -> str:
        payload = {"records": [r.to_dict() for r in records], **summarize(records)}
        return yaml.safe_dump(payload, allow_unicode=True, sort_keys=False)


class HtmlReportFormatter(ReportFormatter):
    fmt = "html"

    def format(self, records: Sequence[SalesRecord]) -> str:
        summary = summarize(records)
        rows = "\n".join(
            f"    <tr><td>{r.date.isoformat()}</td><td>{escape(r.product)}</td><td>{r.amount:.2f}</td></tr>"
            for r in records
        )
        return (
            "<html>\n<body>\n"
            "  <h1>Sales Report</h1>\n"
            f"  <p>Total: {summary['total']:.2f}</p>\n"
            f"  <p>Transactions: {summary['count']}</p>\n"
            "  <table>\n"
            f"{rows}\n"
            "  </table>\n"
            "</body>\n</html>"
        )


class XmlReportFormatter(ReportFormatter):
    fmt = "xml"

    def format(self, records: Sequence[SalesRecord]) -> str:
        summary = summarize(records)
        root = ET.Element("report", count=str(summary["count"]), total=f"{summary['total']:.2f}")
        for r in records:
            ET.SubElement(
                root,
                "sale",
                date=r.date.isoformat(),
                product=r.product,
                amount=f"{r.amount:.2f}",
            )
        return ET.tostring(root, encoding="unicode")


class ReportGenerator(BehaviorContext):
    """报表生成器"""

    def __init__(self, formatter: ReportFormatter):
        super().__init__(formatter, contract=ReportFormatter, operation="format")

    def generate_report(self, records: Sequence[SalesRecord]) -> str:
        return self.invoke(list(records))


FORMATTERS: List[type] = [
    CsvReportFormatter,
    JsonReportFormatter,
    YamlReportFormatter,
    HtmlReportFormatter,
    XmlReportFormatter,
]


def register_formatters(registry: "BehaviorRegistry") -> None:
    """按格式名注册"""
    for cls in FORMATTERS:
        registry.register(cls.fmt, cls)
