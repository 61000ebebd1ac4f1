# tests/test_parser/test_tokens.py
import pytest

from zcalc_core.parser import (
    ComponentSpec, ParseError, ParseIssueCode, normalize_kind, parse_component_token,
)
from zcalc_core.units import ureg


class TestKindNormalization:

    @pytest.mark.parametrize("raw, expected", [
        ("R", "R"), ("c", "C"), ("l", "L"),
        ("resistor", "R"), ("Capacitor", "C"), ("INDUCTOR", "L"),
        ("res", "R"), ("cap", "C"), ("Lcoil", "L"),
        ("  r  ", "R"),
        ("X", ""), ("", ""), ("1R", ""), (None, ""),
    ])
    def test_normalize_kind(self, raw, expected):
        assert normalize_kind(raw) == expected

    def test_component_spec_normalizes_on_construction(self):
        assert ComponentSpec("resistor", 10.0).kind == "R"
        assert ComponentSpec("zener", 10.0).kind == ""

    def test_component_spec_predicates(self):
        spec = ComponentSpec("C", 1e-6)
        assert spec.is_capacitor and spec.is_valid
        assert not spec.is_resistor and not spec.is_inductor
        assert not ComponentSpec("Q", 1.0).is_valid

    def test_component_spec_text(self):
        assert str(ComponentSpec("inductor", 0.01)) == "L:0.01"
        assert str(ComponentSpec("R", 100)) == "R:100.0"

    def test_component_spec_quantity(self):
        assert ComponentSpec("R", 100.0).to_quantity() == 100.0 * ureg.ohm
        assert ComponentSpec("C", 1e-6).to_quantity().to(ureg.microfarad).magnitude == pytest.approx(1.0)
        assert ComponentSpec("L", 0.01).to_quantity().units == ureg.henry
        with pytest.raises(ValueError):
            ComponentSpec("Q", 1.0).to_quantity()


class TestParseComponentToken:

    @pytest.mark.parametrize("token, kind, value", [
        ("R:100", "R", 100.0),
        ("  C:1e-6  ", "C", 1e-6),
        ("L : 0.01", "L", 0.01),
        ("resistor:4.7E3", "R", 4700.0),
        ("capacitor:.5", "C", 0.5),
        ("Inductor:+2.", "L", 2.0),
        ("r:-10", "R", -10.0),
        ("Res:1e+3", "R", 1000.0),
    ])
    def test_valid_tokens(self, token, kind, value):
        spec = parse_component_token(token)
        assert spec.kind == kind
        assert spec.value == pytest.approx(value)

    def test_splits_on_first_colon_only(self):
        with pytest.raises(ParseError) as excinfo:
            parse_component_token("R:1:2")
        assert excinfo.value.issue is ParseIssueCode.TOKEN_INVALID_NUMBER

    @pytest.mark.parametrize("token, issue", [
        ("", ParseIssueCode.TOKEN_EMPTY),
        ("   ", ParseIssueCode.TOKEN_EMPTY),
        ("R100", ParseIssueCode.TOKEN_NO_SEPARATOR),
        ("invalid expression", ParseIssueCode.TOKEN_NO_SEPARATOR),
        (":100", ParseIssueCode.TOKEN_EMPTY_KIND),
        ("R:", ParseIssueCode.TOKEN_INVALID_NUMBER),
        ("R:abc", ParseIssueCode.TOKEN_INVALID_NUMBER),
        ("R:1k", ParseIssueCode.TOKEN_INVALID_NUMBER),
        ("R:nan", ParseIssueCode.TOKEN_INVALID_NUMBER),
        ("R:inf", ParseIssueCode.TOKEN_INVALID_NUMBER),
        ("R:1e999", ParseIssueCode.TOKEN_INVALID_NUMBER),
        ("R:1_000", ParseIssueCode.TOKEN_INVALID_NUMBER),
        ("X:100", ParseIssueCode.TOKEN_UNKNOWN_KIND),
    ])
    def test_malformed_tokens(self, token, issue):
        with pytest.raises(ParseError) as excinfo:
            parse_component_token(token)
        assert excinfo.value.issue is issue
        assert excinfo.value.code == issue.code

    def test_unknown_kind_names_original_text(self):
        with pytest.raises(ParseError, match="Unknown component type: zener"):
            parse_component_token("zener:5.1")

    def test_invalid_number_names_value(self):
        with pytest.raises(ParseError, match="Invalid numeric value: abc"):
            parse_component_token("R:abc")

    def test_none_is_rejected(self):
        with pytest.raises(TypeError):
            parse_component_token(None)

    def test_diagnostic_report(self):
        with pytest.raises(ParseError) as excinfo:
            parse_component_token("X:100")
        report = excinfo.value.get_diagnostic_report()
        assert "Expression Parse Error (TOKEN_UNKNOWN_KIND)" in report
        assert "User Input:     'X:100'" in report
