"""Tests for dracolor.palette.resolver — query validation against the store."""

import pytest
from pydantic import TypeAdapter, ValidationError

from dracolor.palette.query import Query, parse
from dracolor.palette.resolver import (
    FailureKind,
    FullResult,
    ResolutionFailure,
    ResolutionResult,
    SingleResult,
    resolve,
)
from dracolor.palette.store import DRACULA_COLORS


class TestResolve:
    def test_full_palette(self):
        result = resolve(parse("blue"))
        assert isinstance(result, FullResult)
        assert result.palette_name == "blue"
        assert result.palette == dict(DRACULA_COLORS["blue"])

    def test_single_shade(self):
        result = resolve(parse("blue,500"))
        assert result == SingleResult(palette_name="blue", shade_key="500", color="#7886b4")

    def test_unknown_palette(self):
        result = resolve(parse("nope"))
        assert isinstance(result, ResolutionFailure)
        assert result.reason is FailureKind.UNKNOWN_PALETTE
        assert result.message == "palette doesn't exist"

    def test_unknown_shade(self):
        result = resolve(parse("blue,999"))
        assert isinstance(result, ResolutionFailure)
        assert result.reason is FailureKind.UNKNOWN_SHADE
        assert result.message == "shade doesn't exist"

    def test_empty_input_is_unknown_palette(self):
        result = resolve(parse(""))
        assert isinstance(result, ResolutionFailure)
        assert result.reason is FailureKind.UNKNOWN_PALETTE

    def test_palette_checked_before_shade(self):
        for shade in ("500", "999", "DEFAULT", ""):
            result = resolve(Query(palette_name="nope", shade_key=shade))
            assert result.reason is FailureKind.UNKNOWN_PALETTE

    def test_case_sensitive(self):
        assert isinstance(resolve(parse("Blue")), ResolutionFailure)
        assert isinstance(resolve(parse("blue,default")), ResolutionFailure)

    def test_whitespace_insensitive(self):
        assert resolve(parse("  blue , 500 ")) == resolve(parse("blue,500"))

    def test_idempotent(self):
        assert resolve(parse("pink")) == resolve(parse("pink"))

    def test_every_shade_resolves(self):
        for name, palette in DRACULA_COLORS.items():
            for shade, color in palette.items():
                result = resolve(parse(f"{name},{shade}"))
                assert isinstance(result, SingleResult)
                assert result.color == color

    def test_custom_store(self):
        store = {"mono": {"DEFAULT": "#000000", "1": "#111111"}}
        assert resolve(parse("mono,1"), store).color == "#111111"
        assert isinstance(resolve(parse("blue"), store), ResolutionFailure)


class TestResultModels:
    def test_discriminated_union(self):
        adapter = TypeAdapter(ResolutionResult)
        result = adapter.validate_python(
            {"kind": "single", "palette_name": "red", "shade_key": "DEFAULT", "color": "#ff5555"}
        )
        assert isinstance(result, SingleResult)

    def test_rejects_non_hex_color(self):
        with pytest.raises(ValidationError):
            SingleResult(palette_name="red", shade_key="DEFAULT", color="red")

    def test_results_are_frozen(self):
        result = resolve(parse("blue,500"))
        with pytest.raises(ValidationError):
            result.color = "#000000"
