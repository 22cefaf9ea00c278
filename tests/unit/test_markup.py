"""Unit tests for message markup."""

from curprfc.markup import Segment, SegmentKind, code, escape, strong, to_plain, tokenize


class TestEscape:
    """Tests for escape and span builders."""

    def test_plain_text_unchanged(self) -> None:
        assert escape("GOGM900101HDFRRS05") == "GOGM900101HDFRRS05"

    def test_markup_characters_escaped(self) -> None:
        assert escape("a*b`c\\d") == "a\\*b\\`c\\\\d"

    def test_strong(self) -> None:
        assert strong("Persona Moral") == "**Persona Moral**"

    def test_code(self) -> None:
        assert code("GOGM900101") == "`GOGM900101`"

    def test_embedded_markup_stays_literal(self) -> None:
        segments = list(tokenize(strong("**X**")))
        assert segments == [Segment(SegmentKind.STRONG, "**X**")]


class TestTokenize:
    """Tests for tokenize."""

    def test_text_only(self) -> None:
        assert list(tokenize("hola")) == [Segment(SegmentKind.TEXT, "hola")]

    def test_empty_message(self) -> None:
        assert list(tokenize("")) == []

    def test_strong_and_code(self) -> None:
        segments = list(tokenize("La CURP **ABC** tiene `XX`."))
        assert segments == [
            Segment(SegmentKind.TEXT, "La CURP "),
            Segment(SegmentKind.STRONG, "ABC"),
            Segment(SegmentKind.TEXT, " tiene "),
            Segment(SegmentKind.CODE, "XX"),
            Segment(SegmentKind.TEXT, "."),
        ]

    def test_line_breaks(self) -> None:
        segments = list(tokenize("uno\n\ndos"))
        assert segments == [
            Segment(SegmentKind.TEXT, "uno"),
            Segment(SegmentKind.BREAK),
            Segment(SegmentKind.BREAK),
            Segment(SegmentKind.TEXT, "dos"),
        ]

    def test_asterisks_inside_code_are_literal(self) -> None:
        assert list(tokenize("`a**b`")) == [Segment(SegmentKind.CODE, "a**b")]

    def test_unterminated_span(self) -> None:
        assert list(tokenize("**abierto")) == [Segment(SegmentKind.STRONG, "abierto")]

    def test_trailing_backslash_kept(self) -> None:
        assert list(tokenize("fin\\")) == [Segment(SegmentKind.TEXT, "fin\\")]


class TestToPlain:
    """Tests for to_plain."""

    def test_drops_markup(self) -> None:
        assert to_plain("**RESULTADO:** `ABC`\nfin") == "RESULTADO: ABC\nfin"

    def test_unescapes(self) -> None:
        assert to_plain(escape("a*b")) == "a*b"
