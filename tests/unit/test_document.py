"""Tests for loading finding aids."""

from pathlib import Path

import pytest
from lxml import etree

from ead_outline.config import EAD_NAMESPACE
from ead_outline.core.document import (
    EadDocument,
    child_components,
    component_id,
    component_ordinals,
    load_ead,
    normalized_text,
    parse_ead,
)
from ead_outline.errors import EadError, EadParseError, EadSourceError
from tests.unit.samples import make_ead


def test_parse_accepts_str_with_encoding_declaration(finding_aid: EadDocument) -> None:
    assert etree.QName(finding_aid.root).localname == "ead"
    assert len(finding_aid.top_level_components()) == 2


def test_parse_accepts_bytes() -> None:
    document = parse_ead(make_ead('<c id="a"/>').encode("utf-8"))
    assert [c.get("id") for c in document.top_level_components()] == ["a"]


def test_load_reads_file(finding_aid_path: Path) -> None:
    document = load_ead(finding_aid_path)
    assert len(document.top_level_components()) == 2


@pytest.mark.parametrize("data", ["", "<ead>", "not xml at all", b"<ead></eda>"])
def test_parse_rejects_malformed_xml(data: str | bytes) -> None:
    with pytest.raises(EadParseError, match="Cannot parse EAD document"):
        parse_ead(data)


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_ead("<unclosed")
    assert issubclass(EadParseError, EadError)


def test_un_namespaced_document_is_moved_into_ead_namespace() -> None:
    document = parse_ead(
        "<ead><archdesc><dsc><c01 id='x'><did><unittitle>T</unittitle></did></c01>"
        "</dsc></archdesc></ead>"
    )
    components = document.top_level_components()
    assert len(components) == 1
    assert etree.QName(components[0]).namespace == EAD_NAMESPACE
    assert normalized_text(components[0], "ead:did/ead:unittitle") == "T"


def test_top_level_selection_tolerates_c_and_c01() -> None:
    plain = parse_ead(make_ead('<c id="a"/><c id="b"/>'))
    leveled = parse_ead(make_ead('<c01 id="a"/><c01 id="b"/>'))
    assert [c.get("id") for c in plain.top_level_components()] == ["a", "b"]
    assert [c.get("id") for c in leveled.top_level_components()] == ["a", "b"]


def test_child_components_uses_all_nesting_tags_in_document_order() -> None:
    document = parse_ead(
        make_ead(
            '<c01 id="top"><did/><c02 id="one"/><c id="two"/><c12 id="three"/>'
            '<component id="unknown"/></c01>'
        )
    )
    top = document.top_level_components()[0]
    assert [c.get("id") for c in child_components(top)] == ["one", "two", "three"]


def test_normalized_text_collapses_whitespace() -> None:
    document = parse_ead(
        make_ead("<c01><did><unittitle>  Letters\n\t to   <emph>Smith</emph> </unittitle></did></c01>")
    )
    component = document.top_level_components()[0]
    assert normalized_text(component, "ead:did/ead:unittitle") == "Letters to Smith"
    assert normalized_text(component, "ead:did/ead:unitdate") == ""


def test_component_id_prefers_attribute() -> None:
    document = parse_ead(make_ead('<c01 id="ref7"/>'))
    assert component_id(document.top_level_components()[0]) == "ref7"


def test_component_id_generates_structural_id() -> None:
    document = parse_ead(make_ead("<c01/><c01><c02/><!-- note --><c02><c03/></c02></c01>"))
    second = document.top_level_components()[1]
    grandchild = child_components(child_components(second)[1])[0]

    assert component_ordinals(grandchild) == [2, 2, 1]
    assert component_id(grandchild) == "component:2.2.1"
    assert component_id(document.top_level_components()[0]) == "component:1"


def test_component_id_is_stable_across_parses() -> None:
    source = make_ead("<c01/><c01><c02/></c01>")
    first = parse_ead(source)
    second = parse_ead(source)
    ids_first = [component_id(c) for c in first.xpath("//ead:c02")]
    ids_second = [component_id(c) for c in second.xpath("//ead:c02")]
    assert ids_first == ids_second == ["component:2.1"]


def test_locate_returns_xpath_back_to_the_element(finding_aid: EadDocument) -> None:
    component = finding_aid.top_level_components()[1]
    locator = finding_aid.locate(component)
    assert finding_aid.root.xpath(locator) == [component]


def test_str_input_ignores_declared_encoding() -> None:
    document = parse_ead(
        '<?xml version="1.0" encoding="ISO-8859-1"?>'
        + make_ead('<c01 id="a"><did><unittitle>Café</unittitle></did></c01>')
    )
    component = document.top_level_components()[0]
    assert normalized_text(component, "ead:did/ead:unittitle") == "Café"


def test_bytes_input_honours_declared_encoding() -> None:
    source = '<?xml version="1.0" encoding="ISO-8859-1"?>' + make_ead(
        '<c01 id="a"><did><unittitle>Café</unittitle></did></c01>'
    )
    document = parse_ead(source.encode("iso-8859-1"))
    component = document.top_level_components()[0]
    assert normalized_text(component, "ead:did/ead:unittitle") == "Café"


def test_generated_ids_never_collide_with_declared_ids() -> None:
    document = parse_ead(make_ead('<c01 id="component-2"/><c01/><c01 id="component_3"/>'))
    ids = [component_id(c) for c in document.top_level_components()]
    assert ids == ["component-2", "component:2", "component_3"]
    assert len(set(ids)) == len(ids)


def test_load_raises_source_error_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(EadSourceError, match="Finding aid not found"):
        load_ead(tmp_path / "missing.xml")
