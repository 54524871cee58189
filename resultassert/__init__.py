"""
resultassert: 結果物件的語意化斷言

統一匯出所有核心元件，方便外部 import。

用法：
    from resultassert import expect_result, soft_assert, FailureContext
    from resultassert import LocationResult, ByteContentFileResult
    from resultassert import NarrowingFailure, ValidationFailure
"""

from resultassert.assertions import ResultBuilder, SoftAssert, expect_result, soft_assert
from resultassert.builders import (
    CreatedResultAssertions,
    FileResultAssertions,
    RedirectResultAssertions,
)
from resultassert.exceptions import (
    MalformedExpectationError,
    NarrowingFailure,
    ResultAssertionError,
    ValidationFailure,
)
from resultassert.narrowing import Narrowed, NotNarrowed, narrow, try_narrow
from resultassert.reflection import are_different_types, are_same_types, type_name
from resultassert.reporter import FailureContext, report
from resultassert.results import (
    ActionResult,
    ActionRouteResult,
    ByteContentFileResult,
    CreatedResultBase,
    FileResultBase,
    LocationResult,
    NamedRouteResult,
    PhysicalFileResult,
    RedirectResult,
    RedirectResultBase,
    RedirectToActionResult,
    RedirectToRouteResult,
    StreamFileResult,
    VirtualFileResult,
)
from resultassert.uri import UriAssertions, is_well_formed_uri

__all__ = [
    # 入口
    "expect_result",
    "soft_assert",
    "ResultBuilder",
    "SoftAssert",
    "FailureContext",
    # Builders
    "CreatedResultAssertions",
    "RedirectResultAssertions",
    "FileResultAssertions",
    "UriAssertions",
    # 工具
    "report",
    "narrow",
    "try_narrow",
    "Narrowed",
    "NotNarrowed",
    "are_different_types",
    "are_same_types",
    "type_name",
    "is_well_formed_uri",
    # Results
    "ActionResult",
    "CreatedResultBase",
    "LocationResult",
    "ActionRouteResult",
    "NamedRouteResult",
    "RedirectResultBase",
    "RedirectResult",
    "RedirectToActionResult",
    "RedirectToRouteResult",
    "FileResultBase",
    "StreamFileResult",
    "VirtualFileResult",
    "ByteContentFileResult",
    "PhysicalFileResult",
    # Exceptions
    "ResultAssertionError",
    "NarrowingFailure",
    "ValidationFailure",
    "MalformedExpectationError",
]
