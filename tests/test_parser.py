"""Tests for the xdot preprocessor, scanner and parser."""
import logging

import pytest
from xdotdraw.config import DrawConfig
from xdotdraw.xdot.operations import (
    Align,
    Bspline,
    FillColor,
    FilledBspline,
    FilledEllipse,
    FilledPolygon,
    Font,
    PenColor,
    Polyline,
    Position,
    Style,
    StyleAttr,
    StyleString,
    Text,
    UnfilledEllipse,
    UnfilledPolygon,
)
from xdotdraw.xdot.parser import (
    MalformedOperandError,
    Scanner,
    XDotParser,
    normalize,
    parse,
)


class TestNormalize:
    def test_removes_backslash_newline(self):
        assert normalize("abc\\\ndef") == "abcdef"

    def test_identity_without_continuations(self):
        assert normalize("c 5 -black ") == "c 5 -black "
        assert normalize("") == ""

    def test_keeps_other_backslashes(self):
        assert normalize("a\\nb\\ c") == "a\\nb\\ c"
        assert normalize("a\n\\b") == "a\n\\b"

    def test_double_backslash_before_newline(self):
        # Only the backslash touching the newline is a continuation
        assert normalize("a\\\\\nb") == "a\\b"

    def test_bytes_input(self):
        assert normalize(b"12\\\n3") == b"123"


class TestScanner:
    def test_next_word_sequence(self):
        sc = Scanner(b"  ab\t cd\n")
        assert sc.next_word() == "ab"
        assert sc.next_word() == "cd"
        assert sc.next_word() is None
        assert sc.at_end

    def test_skip_spaces_idempotent(self):
        sc = Scanner(b" \t\n x")
        sc.skip_spaces()
        pos = sc.pos
        sc.skip_spaces()
        assert sc.pos == pos == 4

    def test_next_int_and_float(self):
        sc = Scanner(b"-12 3.5 7")
        assert sc.next_int() == -12
        assert sc.next_float() == 3.5
        assert sc.next_float() == 7.0

    def test_next_int_rejects_float_text(self):
        sc = Scanner(b"3.5")
        with pytest.raises(MalformedOperandError, match="Cannot parse int"):
            sc.next_int()

    def test_next_float_at_end(self):
        sc = Scanner(b"   ")
        with pytest.raises(MalformedOperandError, match="Cannot parse float"):
            sc.next_float()

    def test_next_position_wraps_error(self):
        sc = Scanner(b"10 x")
        with pytest.raises(MalformedOperandError) as info:
            sc.next_position()
        assert info.value.message == "Cannot parse point in position"
        assert isinstance(info.value.__cause__, MalformedOperandError)

    def test_payload_is_verbatim(self):
        sc = Scanner(b"9 -Mini Unix rest")
        assert sc.next_payload() == "Mini Unix"
        assert sc.next_word() == "rest"

    def test_payload_advances_exactly_n(self):
        sc = Scanner(b"3 -abcdef")
        assert sc.next_payload() == "abc"
        assert sc.next_word() == "def"

    def test_empty_payload(self):
        sc = Scanner(b"0 -")
        assert sc.next_payload() == ""
        assert sc.at_end

    def test_payload_counts_bytes(self):
        sc = Scanner("5 -café!".encode("utf-8"))
        assert sc.next_payload() == "café"
        assert sc.next_word() == "!"


class TestXDotParser:
    def setup_method(self):
        self.parser = XDotParser()

    def test_empty_input(self):
        assert self.parser.parse("") == ()

    def test_whitespace_only(self):
        assert self.parser.parse(" \t\n ") == ()

    def test_colors_then_ellipse(self):
        ops = self.parser.parse("C 5 -white c 5 -black E 0 0 1.0 1.0 ")
        assert ops == (
            FillColor("white"),
            PenColor("black"),
            FilledEllipse(Position(0, 0), 1.0, 1.0),
        )

    def test_result_is_tuple(self):
        ops = self.parser.parse("C 5 -white")
        assert isinstance(ops, tuple)

    def test_polygon_point_order(self):
        (op,) = self.parser.parse("P 4 0 0 0 1 1 1 1 0 ")
        assert isinstance(op, FilledPolygon)
        assert op.points == ((0, 0), (0, 1), (1, 1), (1, 0))
        assert all(isinstance(p, Position) for p in op.points)

    def test_every_tag(self):
        raw = (
            "E 1 2 3 4 e 1 2 3 4 P 1 0 0 p 1 0 0 L 2 0 0 1 1 "
            "B 1 5 5 b 1 6 6 T 1 2 1 8 2 -hi C 3 -red c 4 -blue "
            "F 12.5 5 -Arial S 6 -dashed"
        )
        ops = self.parser.parse(raw)
        assert [type(op) for op in ops] == [
            FilledEllipse,
            UnfilledEllipse,
            FilledPolygon,
            UnfilledPolygon,
            Polyline,
            Bspline,
            FilledBspline,
            Text,
            FillColor,
            PenColor,
            Font,
            Style,
        ]
        assert [op.tag.value for op in ops] == list("EePpLBbTCcFS")

    def test_text_fields(self):
        (op,) = self.parser.parse("T 529 1005 0 65 9 -Mini Unix ")
        assert op == Text(Position(529, 1005), Align.CENTER, 65.0, "Mini Unix")

    def test_text_payload_keeps_trailing_space(self):
        (op,) = self.parser.parse("T 0 0 -1 35 5 -LR_0 ")
        assert op.align is Align.LEFT
        assert op.text == "LR_0 "

    def test_text_right_anchor(self):
        (op,) = self.parser.parse("T 0 0 1 10 1 -x")
        assert op.align is Align.RIGHT

    def test_payload_hides_tags(self):
        ops = self.parser.parse("C 7 -E 1 2 3 c 5 -black")
        assert ops == (FillColor("E 1 2 3"), PenColor("black"))

    def test_font(self):
        ops = self.parser.parse("F 14.000000 11 -Times-Roman")
        assert ops == (Font(14.0, "Times-Roman"),)

    def test_style_tokens(self):
        (op,) = self.parser.parse("S 12 -dashed,solid")
        assert op.attrs == (StyleAttr.DASHED, StyleAttr.SOLID)

    def test_style_bold_spelling(self):
        (bold,) = self.parser.parse("S 4 -bold")
        (blod,) = self.parser.parse("S 4 -blod")
        assert bold.attrs == (StyleString("bold"),)
        assert blod.attrs == (StyleAttr.BOLD,)

    def test_style_is_case_sensitive(self):
        (op,) = self.parser.parse("S 6 -Filled")
        assert op.attrs == (StyleString("Filled"),)

    def test_style_unknown_token(self):
        (op,) = self.parser.parse("S 15 -setlinewidth(1)")
        assert op.attrs == (StyleString("setlinewidth(1)"),)

    def test_style_empty_pieces(self):
        op1, op2 = self.parser.parse("S 0 - S 8 -filled,,")
        assert op1.attrs == ()
        assert op2.attrs == (StyleAttr.FILLED, StyleString(""), StyleString(""))

    def test_unknown_trailing_tag(self):
        assert self.parser.parse("C 5 -white Z") == (FillColor("white"),)

    def test_unknown_tag_is_skipped(self):
        assert self.parser.parse("Z C 5 -white") == (FillColor("white"),)

    def test_separators_tab_and_newline(self):
        ops = self.parser.parse("c\t5\t-black\nE\n1 2\t3 4")
        assert ops == (PenColor("black"), FilledEllipse(Position(1, 2), 3.0, 4.0))

    def test_continuation_inside_number(self):
        (op,) = self.parser.parse("L 2 12\\\n16 804 1 1")
        assert op.points == ((1216, 804), (1, 1))

    def test_non_ascii_payload(self):
        (op,) = self.parser.parse("T 0 0 0 10 5 -café ")
        assert op.text == "café"

    def test_bytes_input(self):
        assert self.parser.parse(b"c 3 -red") == (PenColor("red"),)

    def test_other_encoding(self):
        parser = XDotParser(DrawConfig(payload_encoding="latin-1"))
        (op,) = parser.parse("C 4 -café")
        assert op.color == "café"

    def test_unencodable_trailing_garbage(self):
        assert self.parser.parse("C 3 -red \ud800") == (FillColor("red"),)

    def test_unencodable_under_latin1(self):
        parser = XDotParser(DrawConfig(payload_encoding="latin-1"))
        assert parser.parse("C 3 -red \u042f") == (FillColor("red"),)

    def test_signed_and_exponent_numerals(self):
        (op,) = self.parser.parse("e +1 -2 1e1 .5")
        assert op == UnfilledEllipse(Position(1, -2), 10.0, 0.5)

    def test_parser_reuse(self):
        first = self.parser.parse("C 3 -red")
        second = self.parser.parse("c 4 -blue")
        assert first == (FillColor("red"),)
        assert second == (PenColor("blue"),)

    def test_module_level_parse(self):
        assert parse("C 3 -red") == (FillColor("red"),)

    def test_skipped_tag_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="xdotdraw.xdot.parser")
        self.parser.parse("Q C 3 -red")
        assert "'Q'" in caplog.text


class TestMalformedOperands:
    def setup_method(self):
        self.parser = XDotParser()

    def test_bad_float(self):
        with pytest.raises(MalformedOperandError, match="Cannot parse float"):
            self.parser.parse("E 0 0 abc 1.0")

    def test_error_discards_earlier_operations(self):
        with pytest.raises(MalformedOperandError):
            self.parser.parse("C 5 -white E 0 0 abc 1.0")

    def test_tag_without_operands(self):
        with pytest.raises(MalformedOperandError, match="point in position"):
            self.parser.parse("E")

    def test_missing_separator(self):
        with pytest.raises(MalformedOperandError, match="Cannot parse bytes"):
            self.parser.parse("C 5 white")

    def test_separator_at_end(self):
        with pytest.raises(MalformedOperandError, match="Cannot parse bytes"):
            self.parser.parse("C 5")

    def test_payload_too_short(self):
        with pytest.raises(MalformedOperandError, match="Cannot parse bytes"):
            self.parser.parse("C 10 -white")

    def test_payload_length_not_int(self):
        with pytest.raises(MalformedOperandError, match="Cannot parse bytes"):
            self.parser.parse("c x -white")

    def test_negative_payload_length(self):
        with pytest.raises(MalformedOperandError):
            self.parser.parse("C -1 -white")

    def test_payload_splits_multibyte_char(self):
        with pytest.raises(MalformedOperandError, match="Cannot parse bytes"):
            self.parser.parse("C 4 -café")

    def test_too_few_points(self):
        with pytest.raises(MalformedOperandError, match="point in position"):
            self.parser.parse("P 3 0 0 1 1")

    def test_negative_point_count(self):
        with pytest.raises(MalformedOperandError, match="point count"):
            self.parser.parse("L -1 0 0")

    def test_bad_anchor(self):
        with pytest.raises(MalformedOperandError, match="Cannot parse anchor"):
            self.parser.parse("T 0 0 2 10 1 -x")

    def test_error_offset(self):
        with pytest.raises(MalformedOperandError) as info:
            self.parser.parse("C 3 -red E 0 0 abc 1.0")
        assert info.value.offset == 15
        assert "at byte 15" in str(info.value)

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(MalformedOperandError, match="point in position"):
            self.parser.parse("P 1 ٣ ４")
        with pytest.raises(MalformedOperandError, match="Cannot parse bytes"):
            self.parser.parse("C ٣ -red")

    def test_non_ascii_float_rejected(self):
        with pytest.raises(MalformedOperandError, match="Cannot parse float"):
            self.parser.parse("E 0 0 1.0 ٣.5")

    def test_underscore_numerals_rejected(self):
        with pytest.raises(MalformedOperandError, match="Cannot parse float"):
            self.parser.parse("E 0 0 1_0 1.0")
        with pytest.raises(MalformedOperandError, match="point in position"):
            self.parser.parse("L 1 1_0 2")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            self.parser.parse("F big 5 -Arial")
