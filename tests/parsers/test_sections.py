"""Structured extraction: sections, section params and meta-data."""

from __future__ import annotations

from sassexport.parsers import PARAM_SUFFIX, Parser, parse_structured
from sassexport.parsers.extractor import (
    DeclarationToken,
    MetaDataBlock,
    SectionEnd,
    SectionParam,
    SectionStart,
)
from sassexport.parsers.sections import SectionStateMachine


def test_empty_content_gives_empty_mapping() -> None:
    assert parse_structured("") == {}
    assert parse_structured("$invalid,") == {}


def test_default_section_only() -> None:
    structured = parse_structured("$black: #000;\n$white: #fff;")

    assert list(structured) == ["variables"]
    assert len(structured["variables"]) == 2


def test_section_marker_creates_group() -> None:
    content = """$black: #000;
                 $white: #fff;
                 //@sass-export-section="theme-colors"
                    $brand-gray-light: #eceff1;
                    $brand-gray-medium: #d6d6d6;
                    $brand-gray: #b0bec5;"""
    structured = parse_structured(content)

    assert len(structured["variables"]) == 2
    assert len(structured["theme-colors"]) == 3
    assert structured["theme-colors"][1].name == "brand-gray-medium"


def test_end_marker_returns_to_default_section() -> None:
    content = """$black: #000;
                 $white: #fff;
                 //@sass-export-section="light"
                    $brand-gray-light: #eceff1;
                 //@end-sass-export-section
                 $brand-gray-medium: #d6d6d6;
                 $brand-gray: #b0bec5;"""
    structured = parse_structured(content)

    assert len(structured["variables"]) == 4
    assert [d.name for d in structured["light"]] == ["brand-gray-light"]


def test_invalid_section_names_are_ignored() -> None:
    content = """
        //@sass-export-section=""
          $brand-gray: #b0bec5;
        //@sass-export-section
          $brand-gray: #b0bec5;
    """
    structured = parse_structured(content)

    assert list(structured) == ["variables"]
    assert len(structured["variables"]) == 2


def test_empty_name_keeps_current_named_section() -> None:
    content = """//@sass-export-section="first"
        $a: 1px;
        //@sass-export-section=""
        $b: 2px;"""
    structured = parse_structured(content)

    assert [d.name for d in structured["first"]] == ["a", "b"]


def test_section_name_keeps_inner_punctuation() -> None:
    structured = parse_structured('//@sass-export-section="valid_-["]"\n$brand-gray: #b0bec5;')

    assert "valid_-[]" in structured


def test_reopened_section_appends_to_same_list() -> None:
    content = """
        //@sass-export-section="first"
          $brand-gray: #b0bec5;
          $brand-gray-2: #b0bec5;

        //@sass-export-section="second"
          $brand-gray: #b0bec5;

        //@sass-export-section="first"
          $brand-gray-3: #b0bec5;
    """
    structured = parse_structured(content)

    assert len(structured["first"]) == 3
    assert structured["first"][2].name == "brand-gray-3"
    assert len(structured["second"]) == 1
    assert structured["variables"] == []


def test_params_are_committed_at_end_of_stream() -> None:
    content = """$black: #000;
        //@sass-export-section="theme-colors"
        //@param displayName="Theme Colors"
        //@param description="The colors that define the theme."
          $brand-gray-light: #eceff1;"""
    structured = parse_structured(content)

    assert structured[f"theme-colors{PARAM_SUFFIX}"] == {
        "displayName": "Theme Colors",
        "description": "The colors that define the theme.",
    }


def test_params_per_section_and_outside_sections() -> None:
    content = """$black: #000;
        //@sass-export-section="colors"
        //@param displayName="Theme Colors"
          $brand-gray: #b0bec5;
        //@end-sass-export-section
        //@sass-export-section="typography"
        //@param displayName="Typography"
        //@param description="Defines the text and typography of the app."
          $typography-size-default: 14px;
        //@end-sass-export-section
        //@param displayName="Unused Parameter"
    """
    structured = parse_structured(content)

    assert structured["colors-params"] == {"displayName": "Theme Colors"}
    assert structured["typography-params"] == {
        "displayName": "Typography",
        "description": "Defines the text and typography of the app.",
    }
    assert "variables-params" not in structured
    assert sorted(structured) == [
        "colors",
        "colors-params",
        "typography",
        "typography-params",
        "variables",
    ]


def test_later_param_overwrites_earlier_in_same_section() -> None:
    content = """//@sass-export-section="s"
        //@param label="first"
        //@param label="second"
        $a: 1px;"""

    assert parse_structured(content)["s-params"] == {"label": "second"}


def test_meta_data_attaches_to_next_declaration_only() -> None:
    content = """$black: #000;
        $white: #fff;
        /**
         * @meta-data displayName="Light Gray - Brand"
         * @meta-data description="Brand color for use against dark backgrounds."
         **/
        $brand-gray-light: #eceff1;
        $brand-gray-medium: #d6d6d6;
        /** @meta-data displayName="Gray - Brand" **/
        $brand-gray: #b0bec5;"""
    variables = parse_structured(content)["variables"]

    assert len(variables) == 5
    assert variables[2].meta_data == {
        "displayName": "Light Gray - Brand",
        "description": "Brand color for use against dark backgrounds.",
    }
    assert variables[4].meta_data == {"displayName": "Gray - Brand"}
    for index in (0, 1, 3):
        assert variables[index].meta_data is None
        assert "metaData" not in variables[index].to_dict()


def test_pending_meta_data_survives_structural_markers() -> None:
    structured = SectionStateMachine.run(
        [
            MetaDataBlock({"label": "carried"}),
            SectionStart("tokens"),
            SectionParam("displayName", "Tokens"),
            DeclarationToken("$a: 1px;"),
            DeclarationToken("$b: 2px;"),
            SectionEnd(),
        ]
    )

    assert structured["tokens"][0].meta_data == {"label": "carried"}
    assert structured["tokens"][1].meta_data is None
    assert structured["tokens-params"] == {"displayName": "Tokens"}


def test_pending_meta_data_is_consumed_by_malformed_declaration() -> None:
    structured = SectionStateMachine.run(
        [
            MetaDataBlock({"label": "lost"}),
            DeclarationToken("$broken 1px;"),
            DeclarationToken("$ok: 1px;"),
        ]
    )

    assert [d.name for d in structured["variables"]] == ["ok"]
    assert structured["variables"][0].meta_data is None


def test_switching_sections_commits_params_to_the_section_left() -> None:
    content = """//@sass-export-section="a"
        //@param label="A"
        $x: 1px;
        //@sass-export-section="b"
        $y: 2px;"""
    structured = parse_structured(content)

    assert structured["a-params"] == {"label": "A"}
    assert "b-params" not in structured


def test_section_named_like_params_committed_on_switch() -> None:
    content = """//@sass-export-section="a"
        //@param label="A"
        //@sass-export-section="a-params"
        $x: 1px;
        //@end-sass-export-section
        $y: 2px;"""
    structured = parse_structured(content)

    assert structured["a"] == []
    assert structured["a-params"] == {"label": "A"}
    assert [d.name for d in structured["variables"]] == ["y"]


def test_map_values_inside_sections() -> None:
    content = """//@sass-export-section="breakpoints"
        $breakpoints: (
          small: 767px,
          medium: 992px,
          large: (
            lg: 1200px,
            xl: 1400px
          )
        );"""
    breakpoints = parse_structured(content)["breakpoints"][0]

    assert [e.value for e in breakpoints.map_value[:2]] == ["767px", "992px"]
    assert len(breakpoints.map_value[2].map_value) == 2


def test_parser_object_api() -> None:
    parser = Parser("$black: #000;")

    assert Parser.PARAM_SUFFIX == "-params"
    assert parser.parse_structured()["variables"][0].name == "black"
    assert Parser("").parse() == []
