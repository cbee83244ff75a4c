import pytest

from svgtrim.errors import InvalidStyleValue
from svgtrim.options import Options
from svgtrim.passes import minify_property
from svgtrim.styles import Declaration, dedupe, minify_style, parse_style, serialize_style


def test_parse_style():
    declarations = parse_style("fill:red; Stroke : blue !important;")
    assert declarations == [
        Declaration("fill", "red"),
        Declaration("stroke", "blue", important=True),
    ]


def test_semicolons_inside_quotes_and_parens():
    declarations = parse_style("font-family:'a;b';fill:url(data:x;y)")
    assert [d.name for d in declarations] == ["font-family", "fill"]
    assert declarations[1].value == "url(data:x;y)"


def test_custom_property_names_keep_case():
    assert parse_style("--Accent:red")[0].name == "--Accent"


def test_serialize_has_no_trailing_semicolon():
    assert serialize_style(parse_style("fill:red;stroke:blue;")) == "fill:red;stroke:blue"


class TestDedupe:
    def test_last_wins(self):
        assert serialize_style(dedupe(parse_style("fill:red;stroke:none;fill:blue"))) == "stroke:none;fill:blue"

    def test_important_beats_later_normal(self):
        assert serialize_style(dedupe(parse_style("fill:red!important;fill:blue"))) == "fill:red!important"


class TestMinifyStyle:
    def test_values_minified(self):
        options = Options()
        minified = minify_style("fill: #ff0000; stroke-width: 2.000; font-family: Sans",
                                lambda name, value: minify_property(name, value, options))
        assert minified == "fill:red;stroke-width:2;font-family:Sans"

    def test_removable_callback(self):
        minified = minify_style("fill:red;opacity:1", removable=lambda decl: decl.value == "1")
        assert minified == "fill:red"

    def test_malformed_chunk_kept_verbatim(self):
        assert minify_style("fill:red; garbage ") == "fill:red;garbage"

    @pytest.mark.parametrize("text", ["fill:url(#a", "fill:'red", "/* x */fill:red", "a:b)"])
    def test_unsplittable_blocks_raise(self, text):
        with pytest.raises(InvalidStyleValue):
            minify_style(text)
