"""
Result variant 模型

被測單元回傳的結果物件。每個 family 是一組封閉的 variant，
斷言會先確認結果屬於哪個 family，再依欄位窄化成特定 variant。

Family：
    created   LocationResult / ActionRouteResult / NamedRouteResult
    redirect  RedirectResult / RedirectToActionResult / RedirectToRouteResult
    file      StreamFileResult / VirtualFileResult / ByteContentFileResult / PhysicalFileResult

自訂的結果型別只要繼承對應的 variant，就能直接使用同一套斷言。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, BinaryIO


@dataclass(kw_only=True)
class ActionResult:
    """所有結果的基底"""


# ── Created ──

@dataclass(kw_only=True)
class CreatedResultBase(ActionResult):
    value: Any = None
    formatters: list[Any] = field(default_factory=list)
    status_code: int = 201


@dataclass(kw_only=True)
class LocationResult(CreatedResultBase):
    location: str = ""


@dataclass(kw_only=True)
class ActionRouteResult(CreatedResultBase):
    action_name: str | None = None
    controller_name: str | None = None
    route_values: dict[str, Any] = field(default_factory=dict)
    url_helper: Any = None


@dataclass(kw_only=True)
class NamedRouteResult(CreatedResultBase):
    route_name: str | None = None
    route_values: dict[str, Any] = field(default_factory=dict)
    url_helper: Any = None


# ── Redirect ──

@dataclass(kw_only=True)
class RedirectResultBase(ActionResult):
    permanent: bool = False
    preserve_method: bool = False


@dataclass(kw_only=True)
class RedirectResult(RedirectResultBase):
    location: str = ""


@dataclass(kw_only=True)
class RedirectToActionResult(RedirectResultBase):
    action_name: str | None = None
    controller_name: str | None = None
    route_values: dict[str, Any] = field(default_factory=dict)
    url_helper: Any = None


@dataclass(kw_only=True)
class RedirectToRouteResult(RedirectResultBase):
    route_name: str | None = None
    route_values: dict[str, Any] = field(default_factory=dict)
    url_helper: Any = None


# ── File ──

@dataclass(kw_only=True)
class FileResultBase(ActionResult):
    content_type: str = "application/octet-stream"
    file_download_name: str = ""
    last_modified: datetime | None = None
    entity_tag: str | None = None


@dataclass(kw_only=True)
class StreamFileResult(FileResultBase):
    file_stream: BinaryIO


@dataclass(kw_only=True)
class VirtualFileResult(FileResultBase):
    file_name: str
    file_provider: Any = None


@dataclass(kw_only=True)
class ByteContentFileResult(FileResultBase):
    file_contents: bytes


@dataclass(kw_only=True)
class PhysicalFileResult(FileResultBase):
    file_name: str
