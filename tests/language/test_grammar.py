"""Tests for karel_runner.language.grammar module."""

from __future__ import annotations

import pytest

from karel_runner.language.grammar import LineKind, classify_line, classify_program, leading_indent


class TestMarkers:
    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("BEGINNING-OF-PROGRAM", LineKind.PROGRAM_START),
            ("END-OF-PROGRAM", LineKind.PROGRAM_END),
            ("\tBEGINNING-OF-EXECUTION", LineKind.EXECUTION_START),
            ("\tEND-OF-EXECUTION", LineKind.EXECUTION_END),
            ("\t\tturnoff", LineKind.TURNOFF),
        ],
    )
    def test_fixed_markers(self, text: str, kind: LineKind) -> None:
        assert classify_line(text, 0).kind is kind

    def test_single_trailing_space_is_tolerated(self) -> None:
        assert classify_line("END-OF-PROGRAM ", 0).kind is LineKind.PROGRAM_END

    def test_markers_require_exact_indentation(self) -> None:
        assert classify_line("\t\tBEGINNING-OF-EXECUTION", 0).kind is not LineKind.EXECUTION_START
        assert classify_line("\tturnoff", 0).kind is not LineKind.TURNOFF


class TestHeaders:
    def test_if_captures_condition(self) -> None:
        line = classify_line("\t\tIF front-is-clear THEN", 4)
        assert line.kind is LineKind.IF
        assert line.argument == "front-is-clear"
        assert line.indent == 2
        assert line.line_no == 5

    def test_while_captures_condition(self) -> None:
        line = classify_line("\t\t\tWHILE not-facing-north DO", 0)
        assert line.kind is LineKind.WHILE
        assert line.argument == "not-facing-north"
        assert line.indent == 3

    def test_iterate_captures_count(self) -> None:
        line = classify_line("\t\tITERATE 12 TIMES", 0)
        assert line.kind is LineKind.ITERATE
        assert line.argument == "12"

    def test_iterate_rejects_non_numeric_count(self) -> None:
        assert classify_line("\t\tITERATE x TIMES", 0).kind is not LineKind.ITERATE

    def test_define_captures_name(self) -> None:
        line = classify_line("\tDEFINE-NEW-INSTRUCTION turnright AS", 0)
        assert line.kind is LineKind.DEFINE
        assert line.argument == "turnright"

    def test_else_begin_end(self) -> None:
        assert classify_line("\t\tELSE", 0).kind is LineKind.ELSE
        assert classify_line("\t\tBEGIN", 0).kind is LineKind.BEGIN
        end = classify_line("\t\tEND", 0)
        assert end.kind is LineKind.END
        assert not end.terminated
        assert classify_line("\t\tEND;", 0).terminated


class TestStatements:
    def test_terminated_statement(self) -> None:
        line = classify_line("\t\tmove;", 0)
        assert line.kind is LineKind.STATEMENT
        assert line.argument == "move"
        assert line.terminated

    def test_unterminated_statement(self) -> None:
        line = classify_line("\t\t\tpickbeeper", 0)
        assert line.kind is LineKind.STATEMENT
        assert line.argument == "pickbeeper"
        assert not line.terminated

    def test_user_names_are_statements(self) -> None:
        assert classify_line("\t\tturn-around;", 0).argument == "turn-around"

    @pytest.mark.parametrize("text", ["move;", "\t\tmove ;", "\t\tmove;;", "", "\t\ttwo words;"])
    def test_malformed_lines_are_unknown(self, text: str) -> None:
        assert classify_line(text, 0).kind is LineKind.UNKNOWN


class TestProgram:
    def test_classify_program_numbers_lines_in_order(self) -> None:
        lines = classify_program(["BEGINNING-OF-PROGRAM", "\tBEGINNING-OF-EXECUTION", "\t\tmove;"])
        assert [line.number for line in lines] == [0, 1, 2]
        assert [line.kind for line in lines] == [
            LineKind.PROGRAM_START,
            LineKind.EXECUTION_START,
            LineKind.STATEMENT,
        ]

    def test_leading_indent_counts_tabs_only(self) -> None:
        assert leading_indent("\t\t move") == 2
        assert leading_indent("move") == 0
