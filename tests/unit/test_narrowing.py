"""
resultassert.narrowing 單元測試
窄化成功回傳 variant，失敗一律 NarrowingFailure 且訊息含 label。
"""

import pytest

from resultassert.exceptions import NarrowingFailure
from resultassert.narrowing import (
    Narrowed,
    NotNarrowed,
    narrow,
    narrow_family,
    try_narrow,
)
from resultassert.reporter import FailureContext
from resultassert.results import (
    ActionRouteResult,
    ByteContentFileResult,
    CreatedResultBase,
    LocationResult,
    NamedRouteResult,
)

CTX = FailureContext("When calling Create action in ItemsController expected")


class AuditedLocationResult(LocationResult):
    """自訂結果型別，繼承 variant 後同樣可以窄化"""


@pytest.mark.unit
class TestTryNarrow:
    """內部 result type，不拋例外"""

    def test_matching_variant(self):
        result = LocationResult(location="/items/5")
        assert try_narrow(result, LocationResult) == Narrowed(result)

    def test_non_matching_variant(self):
        result = LocationResult(location="/items/5")
        assert try_narrow(result, NamedRouteResult) == NotNarrowed(LocationResult)

    def test_none_result(self):
        assert try_narrow(None, LocationResult) == NotNarrowed(None)

    def test_tuple_of_variants(self):
        result = NamedRouteResult(route_name="GetItem")
        assert isinstance(try_narrow(result, (ActionRouteResult, NamedRouteResult)), Narrowed)

    def test_subclass_narrows(self):
        result = AuditedLocationResult(location="/a")
        assert try_narrow(result, LocationResult).value is result

    def test_match_statement(self):
        match try_narrow(LocationResult(location="/x"), LocationResult):
            case Narrowed(value):
                assert value.location == "/x"
            case NotNarrowed():
                pytest.fail("應該窄化成功")

    def test_repr(self):
        assert repr(NotNarrowed(LocationResult)) == "NotNarrowed(LocationResult)"


@pytest.mark.unit
class TestNarrow:

    def test_success_returns_variant(self):
        result = ActionRouteResult(action_name="Index")
        assert narrow(result, ActionRouteResult, CTX, "created", "action name") is result

    def test_failure_message_contains_label(self):
        result = LocationResult(location="/items/5")
        with pytest.raises(NarrowingFailure, match="action name") as exc_info:
            narrow(result, ActionRouteResult, CTX, "created", "action name")
        assert str(exc_info.value) == (
            "When calling Create action in ItemsController expected created result "
            "to contain action name, but such could not be found."
        )

    def test_deterministic(self):
        """同一組 (結果, variant) 多次窄化結果相同"""
        result = LocationResult(location="/items/5")
        for _ in range(3):
            with pytest.raises(NarrowingFailure):
                narrow(result, NamedRouteResult, CTX, "created", "route name")
            assert narrow(result, LocationResult, CTX, "created", "location") is result


@pytest.mark.unit
class TestNarrowFamily:

    def test_family_match(self):
        result = NamedRouteResult(route_name="GetItem")
        assert narrow_family(result, CreatedResultBase, CTX, "created") is result

    def test_family_mismatch(self):
        result = ByteContentFileResult(file_contents=b"")
        with pytest.raises(NarrowingFailure) as exc_info:
            narrow_family(result, CreatedResultBase, CTX, "created")
        assert str(exc_info.value) == (
            "When calling Create action in ItemsController expected action result "
            "to be created result, but instead received ByteContentFileResult."
        )

    def test_family_none(self):
        with pytest.raises(NarrowingFailure, match="instead received None"):
            narrow_family(None, CreatedResultBase, CTX, "created")
