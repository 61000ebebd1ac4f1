# tests/test_parser/test_expression.py
import pytest

from zcalc_core.components import (
    Capacitor, CompositeCircuit, ConnectionNode, Inductor, InvalidCircuitError, Resistor,
)
from zcalc_core.parser import ParseError, ParseIssueCode, parse, parse_circuit, split_top_level


class TestSplitTopLevel:

    @pytest.mark.parametrize("text, parts", [
        ("R:1, R:2", ["R:1", "R:2"]),
        ("R:1,series(R:2, R:3), C:4", ["R:1", "series(R:2, R:3)", "C:4"]),
        ("parallel(R:1, parallel(R:2, R:3))", ["parallel(R:1, parallel(R:2, R:3))"]),
        ("", []),
        ("   ", []),
        ("R:1,", ["R:1"]),
        ("R:1, , R:2", ["R:1", "", "R:2"]),
    ])
    def test_split(self, text, parts):
        assert split_top_level(text) == parts


class TestParseLeaves:

    def test_bare_resistor(self):
        element = parse("R:100")
        assert element == Resistor(100.0)
        assert element.description() == "R(100.0)"

    @pytest.mark.parametrize("text, expected", [
        ("C:1e-6", Capacitor(1e-6)),
        ("inductor:0.01", Inductor(0.01)),
        ("  capacitor : 2.2e-9 ", Capacitor(2.2e-9)),
    ])
    def test_bare_leaf_tokens(self, text, expected):
        assert parse(text) == expected

    def test_invalid_expression(self):
        with pytest.raises(ParseError):
            parse("invalid expression")

    def test_none_is_rejected(self):
        with pytest.raises(TypeError):
            parse(None)


class TestParseGroups:

    def test_nested_expression_description(self, nested_tree):
        description = nested_tree.description()
        markers = ["series(", "R(100.0)", "parallel(", "C(", "L(0.01)"]
        positions = [description.index(m) for m in markers]
        assert positions == sorted(positions)
        assert description == "series(R(100.0), parallel(C(1e-06), L(0.01)), R(50.0))"

    def test_nested_expression_tree(self, nested_tree):
        tree = nested_tree
        assert tree == ConnectionNode(True, (
            Resistor(100.0),
            ConnectionNode(False, (Capacitor(1e-6), Inductor(0.01))),
            Resistor(50.0),
        ))

    def test_connection_keyword_is_case_insensitive(self):
        tree = parse("  SERIES ( R:1 , Parallel(R:2, R:2) )  ")
        assert tree.series
        assert tree.children[1].is_parallel

    def test_keyword_suffix_is_allowed(self):
        """Only the prefix of the group name is checked."""
        assert parse("series_main(R:1)").series
        assert parse("parallel2(R:1, R:1)").is_parallel

    def test_deep_nesting(self):
        text = "series(" * 20 + "R:1" + ")" * 20
        node = parse(text)
        depth = 0
        while isinstance(node, ConnectionNode):
            node = node.children[0]
            depth += 1
        assert depth == 20
        assert node == Resistor(1.0)

    def test_empty_group_parses_but_does_not_evaluate(self):
        node = parse("series()")
        assert node == ConnectionNode(True, ())
        with pytest.raises(InvalidCircuitError):
            node.impedance(1e3)

    def test_nested_empty_group(self):
        node = parse("series(R:1, parallel())")
        assert node.children[1] == ConnectionNode(False, ())
        with pytest.raises(InvalidCircuitError, match="no children"):
            node.impedance(1.0)


class TestParseGroupErrors:

    @pytest.mark.parametrize("text, issue", [
        ("series(R:1, R:2", ParseIssueCode.GROUP_UNMATCHED_PAREN),
        ("series(R:1, parallel(R:2, R:3)", ParseIssueCode.GROUP_UNMATCHED_PAREN),
        ("series(R:1) R:2", ParseIssueCode.GROUP_TRAILING_CHARS),
        ("series(R:1))", ParseIssueCode.GROUP_TRAILING_CHARS),
        ("ladder(R:1, R:2)", ParseIssueCode.GROUP_UNKNOWN_CONNECTION),
        ("(R:1, R:2)", ParseIssueCode.GROUP_UNKNOWN_CONNECTION),
        ("ser(R:1)", ParseIssueCode.GROUP_UNKNOWN_CONNECTION),
        ("series(R:1, X:2)", ParseIssueCode.TOKEN_UNKNOWN_KIND),
        ("series(R:1, , R:2)", ParseIssueCode.TOKEN_EMPTY),
        ("series(R:1, R:2 ,  )", ParseIssueCode.TOKEN_EMPTY),
        ("parallel(R:1, C:abc)", ParseIssueCode.TOKEN_INVALID_NUMBER),
    ])
    def test_group_errors(self, text, issue):
        with pytest.raises(ParseError) as excinfo:
            parse(text)
        assert excinfo.value.issue is issue

    def test_unknown_connection_names_keyword(self):
        with pytest.raises(ParseError, match="Unknown connection type: ladder"):
            parse("Ladder(R:1)")

    def test_trailing_error_is_reported_before_keyword(self):
        with pytest.raises(ParseError) as excinfo:
            parse("ladder(R:1) extra")
        assert excinfo.value.issue is ParseIssueCode.GROUP_TRAILING_CHARS


class TestParseCircuit:

    def test_group_root(self):
        circuit = parse_circuit("parallel(R:100, R:100)")
        assert isinstance(circuit, CompositeCircuit)
        assert circuit.impedance(1.0).re == pytest.approx(50.0)

    def test_leaf_root_is_rejected(self):
        with pytest.raises(TypeError):
            parse_circuit("R:100")
