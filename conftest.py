"""
pytest 全域 fixtures

提供：
- resultassert plugin（failure_context / expect_result / soft_assert fixtures）
- 各單元測試共用的結果物件 fixtures
"""

import io

import pytest

from resultassert.results import (
    ActionRouteResult,
    ByteContentFileResult,
    LocationResult,
    NamedRouteResult,
    RedirectResult,
    RedirectToActionResult,
    StreamFileResult,
    VirtualFileResult,
)

pytest_plugins = ["resultassert.pytest_plugin"]


class UrlHelper:
    """測試用 URL helper"""


class JsonFormatter:
    """測試用 output formatter"""


class FileProvider:
    """測試用 file provider"""

    def __init__(self, root: str = "/srv/files"):
        self.root = root

    def __eq__(self, other):
        return isinstance(other, FileProvider) and other.root == self.root

    __hash__ = object.__hash__


@pytest.fixture
def url_helper():
    return UrlHelper()


@pytest.fixture
def json_formatter():
    return JsonFormatter()


@pytest.fixture
def file_provider():
    return FileProvider()


@pytest.fixture
def location_result(json_formatter):
    return LocationResult(location="/items/5", value={"id": 5}, formatters=[json_formatter])


@pytest.fixture
def action_route_result(url_helper):
    return ActionRouteResult(
        action_name="GetItem",
        controller_name="Items",
        route_values={"id": 5, "expand": "true"},
        url_helper=url_helper,
    )


@pytest.fixture
def named_route_result(url_helper):
    return NamedRouteResult(route_name="GetItem", route_values={"id": 5}, url_helper=url_helper)


@pytest.fixture
def redirect_result():
    return RedirectResult(location="https://example.com/login?returnUrl=%2Fhome", permanent=True)


@pytest.fixture
def redirect_to_action_result():
    return RedirectToActionResult(action_name="Index", controller_name="Home")


@pytest.fixture
def byte_content_result():
    return ByteContentFileResult(
        file_contents=bytes([1, 2, 3]),
        content_type="application/pdf",
        file_download_name="report.pdf",
    )


@pytest.fixture
def stream_result():
    return StreamFileResult(file_stream=io.BytesIO(b"hello"), content_type="text/plain")


@pytest.fixture
def virtual_file_result(file_provider):
    return VirtualFileResult(file_name="docs/readme.md", file_provider=file_provider)
