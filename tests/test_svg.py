"""Tests for SVG id rewriting, measurement and composition."""

import pytest

from vdrbadge.badges.svg import combine_svgs, defined_ids, inject_position, parse_dimensions, uniquify_ids
from vdrbadge.core.models import SvgDimensions
from vdrbadge.core.utils import BadgeError, SvgCompositionError


def _badge(width=76, height=20):
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}">'
        '<linearGradient id="smooth"/>'
        f'<clipPath id="round"><rect width="{width}" height="{height}"/></clipPath>'
        '<g clip-path="url(#round)"><rect fill="url(#smooth)"/></g>'
        "</svg>"
    )


class TestUniquifyIds:
    def test_rewrites_all_reference_forms(self):
        svg = (
            '<svg><clipPath id="a"/><g clip-path="url(#a)"/>'
            '<use href="#a"/><use xlink:href="#a"/></svg>'
        )
        result = uniquify_ids(svg, "vuln-")
        assert result == (
            '<svg><clipPath id="vuln-a"/><g clip-path="url(#vuln-a)"/>'
            '<use href="#vuln-a"/><use xlink:href="#vuln-a"/></svg>'
        )

    def test_leaves_undefined_references_and_text_alone(self):
        svg = '<svg><g id="a" fill="url(#b)"><text>a</text></g><a href="#b">a</a></svg>'
        result = uniquify_ids(svg, "p-")
        assert 'fill="url(#b)"' in result
        assert 'href="#b"' in result
        assert "<text>a</text>" in result
        assert '<g id="p-a" fill="url(#b)">' in result

    def test_only_exact_id_tokens_are_renamed(self):
        svg = '<svg><g id="s"/><g id="smooth"/><rect fill="url(#smooth)" clip-path="url(#s)"/></svg>'
        result = uniquify_ids(svg, "x-")
        assert result == '<svg><g id="x-s"/><g id="x-smooth"/><rect fill="url(#x-smooth)" clip-path="url(#x-s)"/></svg>'

    def test_prefixed_id_already_present_is_renamed_once(self):
        svg = '<svg><g id="a"/><g id="v-a"/><use href="#a"/><use href="#v-a"/></svg>'
        result = uniquify_ids(svg, "v-")
        assert result == '<svg><g id="v-a"/><g id="v-v-a"/><use href="#v-a"/><use href="#v-v-a"/></svg>'

    def test_external_links_untouched(self):
        svg = '<svg><a xlink:href="https://example.com/#round"><g id="round"/></a></svg>'
        result = uniquify_ids(svg, "vuln-")
        assert 'xlink:href="https://example.com/#round"' in result

    def test_data_attributes_are_not_ids(self):
        svg = '<svg><g data-id="a"/><use href="#a"/></svg>'
        assert defined_ids(svg) == set()
        assert uniquify_ids(svg, "v-") == svg

    def test_no_ids_returns_input(self):
        svg = '<svg width="1" height="1"><rect/></svg>'
        assert uniquify_ids(svg, "v-") is svg


class TestParseDimensions:
    def test_reads_root_attributes(self):
        assert parse_dimensions(_badge(120, 20)) == SvgDimensions(width=120, height=20)

    def test_ignores_nested_elements_and_prolog(self):
        svg = '<?xml version="1.0"?>\n<svg height="20" stroke-width="2" width="50"><rect width="999" height="999"/></svg>'
        assert parse_dimensions(svg) == SvgDimensions(width=50, height=20)

    def test_missing_root_is_fatal(self):
        with pytest.raises(SvgCompositionError, match="Missing SVG root"):
            parse_dimensions("<div width='10' height='10'></div>")

    def test_dimension_only_on_nested_element_is_fatal(self):
        with pytest.raises(SvgCompositionError, match="Missing width"):
            parse_dimensions('<svg height="20"><rect width="10" height="5"/></svg>')

    def test_missing_height_is_fatal(self):
        with pytest.raises(BadgeError, match="Missing height"):
            parse_dimensions('<svg width="20"></svg>')


def test_inject_position_after_tag_name():
    svg = '<?xml version="1.0"?><svg width="1" height="2"><svg width="3"/></svg>'
    assert inject_position(svg, 3, 4) == '<?xml version="1.0"?><svg x="3" y="4" width="1" height="2"><svg width="3"/></svg>'


class TestCombineSvgs:
    def test_side_by_side(self):
        result = combine_svgs(uniquify_ids(_badge(), "vuln-"), uniquify_ids(_badge(), "policy-"))
        assert result.startswith('<svg width="152" height="20" viewBox="0 0 152 20" ')
        assert 'xmlns="http://www.w3.org/2000/svg"' in result
        assert 'xmlns:xlink="http://www.w3.org/1999/xlink"' in result
        assert '<svg x="0" y="0" xmlns=' in result
        assert '<svg x="76" y="0" xmlns=' in result
        assert result.endswith("</svg></svg>")

    def test_stacked(self):
        result = combine_svgs(_badge(), _badge(), stacked=True)
        assert parse_dimensions(result) == SvgDimensions(width=76, height=40)
        assert '<svg x="0" y="20" xmlns=' in result

    def test_unequal_sizes(self):
        first, second = _badge(100, 20), _badge(60, 30)
        assert parse_dimensions(combine_svgs(first, second)) == SvgDimensions(width=160, height=30)
        assert parse_dimensions(combine_svgs(first, second, stacked=True)) == SvgDimensions(width=100, height=50)

    def test_malformed_fragment_is_fatal(self):
        with pytest.raises(SvgCompositionError):
            combine_svgs(_badge(), '<svg height="20"></svg>')
