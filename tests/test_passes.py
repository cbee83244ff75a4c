"""Each pass on its own: every other pass switched off."""

import pytest

from svgtrim import minify_with_options
from svgtrim.options import Options

INKSCAPE = "http://www.inkscape.org/namespaces/inkscape"
SODIPODI = "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd"
SVG = "http://www.w3.org/2000/svg"


def run(text, *passes, **settings):
    options = Options.passthrough(**{name: True for name in passes}, **settings)
    return minify_with_options(text, options)


def test_passthrough_only_drops_the_prolog():
    assert run('<?xml version="1.0"?><!DOCTYPE svg><svg><!--c--><g><rect/></g></svg>') == \
        "<svg><!--c--><g><rect/></g></svg>"


class TestRemoveComments:
    def test_removes_everywhere(self):
        assert run("<!--a--><svg><!--b--><rect/></svg><!--c-->", "remove_comments") == "<svg><rect/></svg>"

    def test_surrounding_text_is_kept(self):
        assert run("<svg><text>a<!--c-->b</text></svg>", "remove_comments") == "<svg><text>ab</text></svg>"


def test_remove_metadata():
    text = "<svg><title>t</title><metadata><x/></metadata><desc>d</desc><rect/></svg>"
    assert run(text, "remove_metadata") == "<svg><rect/></svg>"


class TestRemoveEditorNamespaces:
    def test_editor_markup_removed(self):
        text = (f'<svg xmlns="{SVG}" xmlns:inkscape="{INKSCAPE}" xmlns:sodipodi="{SODIPODI}">'
                '<sodipodi:namedview/>'
                '<g inkscape:label="L" style="fill:red;-inkscape-font-specification:Sans"/></svg>')
        assert run(text, "remove_editor_namespaces") == f'<svg xmlns="{SVG}"><g style="fill:red"/></svg>'

    def test_used_namespaces_kept(self):
        text = (f'<svg xmlns="{SVG}" xmlns:xlink="http://www.w3.org/1999/xlink">'
                '<use xlink:href="#a"/></svg>')
        assert run(text, "remove_editor_namespaces") == text

    def test_unused_namespace_dropped(self):
        text = f'<svg xmlns="{SVG}" xmlns:xlink="http://www.w3.org/1999/xlink"><rect/></svg>'
        assert run(text, "remove_editor_namespaces") == f'<svg xmlns="{SVG}"><rect/></svg>'


class TestCollapseGroups:
    def test_nested_bare_groups(self):
        text = '<svg><g><g><rect width="1" height="1"/></g></g></svg>'
        assert run(text, "collapse_groups") == '<svg><rect width="1" height="1"/></svg>'

    def test_whitespace_inside_group_is_dropped(self):
        assert run("<svg>\n<g>\n<rect/>\n</g>\n</svg>", "collapse_groups") == "<svg>\n<rect/>\n</svg>"

    def test_unreferenced_id_does_not_block(self):
        assert run('<svg><g id="layer1"><rect/></g></svg>', "collapse_groups") == "<svg><rect/></svg>"

    @pytest.mark.parametrize("text", [
        '<svg><g fill="red"><rect/></g></svg>',
        '<svg><g id="a"><rect/></g><use href="#a"/></svg>',
        "<svg><g><rect/><rect/></g></svg>",
        "<svg><switch><g><rect/></g></switch></svg>",
        "<svg><style>g rect{fill:red}</style><g><rect/></g></svg>",
    ])
    def test_kept(self, text):
        assert run(text, "collapse_groups") == text


class TestRemoveHiddenEmpty:
    def test_invisible_and_empty_removed(self):
        text = ('<svg><rect display="none"/><rect style="display:none"/><circle r="0"/>'
                '<rect width="0" height="5"/><path d=""/><polygon points=" "/>'
                '<g><rect opacity="0"/></g><defs/><rect width="1" height="1"/></svg>')
        assert run(text, "remove_hidden_empty") == '<svg><rect width="1" height="1"/></svg>'

    def test_hidden_group_without_visible_descendant(self):
        assert run('<svg><g visibility="hidden"><rect/></g></svg>', "remove_hidden_empty") == "<svg/>"

    @pytest.mark.parametrize("text", [
        '<svg><g visibility="hidden"><rect visibility="visible"/></g></svg>',
        '<svg><path id="p" d="M0 0" display="none"/><text><textPath href="#p">x</textPath></text></svg>',
        '<svg><g filter="url(#f)"/></svg>',
        '<svg><clipPath id="c"/><rect clip-path="url(#c)"/></svg>',
        '<svg><style>rect{display:inline}</style><rect display="none"/></svg>',
        '<svg><rect display="none"><set attributeName="display" to="inline" begin="1s"/></rect></svg>',
    ])
    def test_kept(self, text):
        assert run(text, "remove_hidden_empty") == text


class TestMinifyPaths:
    def test_path_data(self):
        text = '<svg><path d="M 10.125 20.125 L 10.125 30.125"/></svg>'
        assert run(text, "minify_paths", precision=1) == '<svg><path d="M10.1 20.1v10"/></svg>'

    def test_points(self):
        text = '<svg><polygon points="0.5, 0.5 10, 10 -1.234, 5"/></svg>'
        assert run(text, "minify_paths") == '<svg><polygon points=".5.5 10 10-1.23 5"/></svg>'

    def test_invalid_path_left_unchanged(self):
        text = '<svg><path d="M 10 10 Q"/></svg>'
        assert run(text, "minify_paths") == text


def test_minify_numbers():
    text = '<svg><rect x="1.23456" width="10.000px" height="auto" opacity="0.50"/></svg>'
    assert run(text, "minify_numbers") == '<svg><rect x="1.23" width="10px" height="auto" opacity=".5"/></svg>'


def test_minify_numbers_rounds_transforms():
    text = '<svg><g transform="translate(10.123,20.456) rotate(30.0000004)"/></svg>'
    assert run(text, "minify_numbers") == '<svg><g transform="translate(10.12 20.46) rotate(30)"/></svg>'


def test_minify_numbers_keeps_tiny_sizes():
    text = '<svg viewBox="0 0 0.004 0.004"><rect width="0.004" height="0.004"/></svg>'
    assert run(text, "minify_numbers") == '<svg viewBox="0 0 .004 .004"><rect width=".004" height=".004"/></svg>'


def test_minify_colors():
    text = '<svg><rect fill="#ff0000" stroke="#FFFFFF" color="currentColor"/></svg>'
    assert run(text, "minify_colors") == '<svg><rect fill="red" stroke="#fff" color="currentColor"/></svg>'


class TestMinifyStyles:
    passes = ("minify_styles", "minify_colors", "minify_numbers", "remove_default_attrs")

    def test_values_defaults_and_duplicates(self):
        text = '<svg><rect style="fill: #ff0000; fill-opacity: 1; stroke-width: 2.50; fill: #00f"/></svg>'
        assert run(text, *self.passes) == '<svg><rect style="stroke-width:2.5;fill:#00f"/></svg>'

    def test_empty_style_removed(self):
        assert run('<svg><rect style="opacity:1"/></svg>', *self.passes) == "<svg><rect/></svg>"

    def test_defaults_kept_with_style_sheet(self):
        text = '<svg><style>rect{opacity:.5}</style><rect style="opacity:1"/></svg>'
        assert run(text, *self.passes) == text

    def test_defaults_kept_without_default_elision(self):
        text = '<svg><rect style="opacity:1"/></svg>'
        assert run(text, "minify_styles") == text


class TestRemoveDefaultAttrs:
    def test_plain_defaults(self):
        text = '<svg version="1.1"><rect fill="#000" x="0" y="0px" stroke="none" opacity="1"/></svg>'
        assert run(text, "remove_default_attrs") == "<svg><rect/></svg>"

    def test_zero_corner_pair(self):
        assert run('<svg><rect rx="0" ry="0"/></svg>', "remove_default_attrs") == "<svg><rect/></svg>"

    def test_inherited_default_under_default_ancestor(self):
        text = '<svg><g fill="black"><rect fill="#000"/></g></svg>'
        assert run(text, "remove_default_attrs") == "<svg><g><rect/></g></svg>"

    @pytest.mark.parametrize("text", [
        '<svg><g fill="red"><rect fill="#000"/></g></svg>',
        '<svg><g style="stroke:blue"><rect stroke="none"/></g></svg>',
        '<svg><rect rx="0" ry="5"/></svg>',
        '<svg><linearGradient id="b" href="#a" x1="0"/></svg>',
        '<svg><defs><path id="p" fill="#000" d="M0 0"/></defs><use href="#p" fill="red"/></svg>',
        '<svg><style>g{fill:red}</style><g><rect fill="#000"/></g></svg>',
        '<svg><animate attributeName="x" fill="freeze"/></svg>',
    ])
    def test_kept(self, text):
        assert run(text, "remove_default_attrs") == text


class TestCollapseWhitespace:
    def test_structure_and_text(self):
        text = "<svg>\n  <text>  a \n\n b  </text>\n  <style> a{} </style>\n</svg>"
        assert run(text, "collapse_whitespace") == "<svg><text> a b </text><style>a{}</style></svg>"

    def test_bare_newline_kept_as_newline(self):
        assert run("<svg><text>a\n\nb</text></svg>", "collapse_whitespace") == "<svg><text>a\nb</text></svg>"

    def test_preserve(self):
        text = '<svg><text xml:space="preserve">  a  </text></svg>'
        assert run(text, "collapse_whitespace") == text


def test_sort_attrs():
    text = f'<svg xmlns="{SVG}" xmlns:xlink="http://www.w3.org/1999/xlink"><use y="1" xlink:href="#a" x="2"/></svg>'
    assert run(text, "sort_attrs") == \
        f'<svg xmlns="{SVG}" xmlns:xlink="http://www.w3.org/1999/xlink"><use x="2" xlink:href="#a" y="1"/></svg>'
