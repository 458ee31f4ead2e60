"""Tests for colors, color schemes and color mappings."""
import unittest

from drawingml_theme.model.colors import (
    COLOR,
    COLOR_MAPPING_OVERRIDE,
    ColorMapping,
    ColorScheme,
    ColorSchemeAndMapping,
    ColorTransform,
    CustomColor,
    HslColor,
    MasterColorMapping,
    OverrideColorMapping,
    PresetColor,
    SchemeColor,
    ScRgbColor,
    SRgbColor,
    SystemColor,
)
from drawingml_theme.model.enums import (
    ColorSchemeIndex,
    ColorTransformKind,
    PresetColorVal,
    SchemeColorVal,
    SystemColorVal,
)
from drawingml_theme.model.errors import (
    LexicalError,
    MissingAttributeError,
    MissingChildNodeError,
    NotGroupMemberError,
)
from drawingml_theme.utils.xml_utils import parse_xml

SCHEME_ROLES = ("dk1", "lt1", "dk2", "lt2", "accent1", "accent2", "accent3", "accent4", "accent5", "accent6", "hlink", "folHlink")

MAPPING_XML = (
    'bg1="lt1" tx1="dk1" bg2="lt2" tx2="dk2" accent1="accent1" accent2="accent2" accent3="accent3" '
    'accent4="accent4" accent5="accent5" accent6="accent6" hlink="hlink" folHlink="folHlink"'
)


def scheme_xml(name: str = "Office", skip: str = "") -> str:
    roles = []
    for role in SCHEME_ROLES:
        if role == skip:
            continue
        value = "000000" if role.startswith("dk") else "FFFFFF"
        roles.append(f'<a:{role}><a:srgbClr val="{value}"/></a:{role}>')
    return (
        f'<a:clrScheme xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" name="{name}">'
        + "".join(roles)
        + "</a:clrScheme>"
    )


class ColorChoiceTest(unittest.TestCase):
    """Each arm of the color choice builds the matching record."""

    def test_srgb_with_transform_chain(self) -> None:
        node = parse_xml('<srgbClr val="00FF00"><lumMod val="50000"/><lumOff val="-20000"/></srgbClr>')
        color = COLOR.from_xml_element(node)
        self.assertEqual(
            color,
            SRgbColor(
                value=0x00FF00,
                color_transforms=[
                    ColorTransform(ColorTransformKind.LUMINANCE_MODULATE, 50000.0),
                    ColorTransform(ColorTransformKind.LUMINANCE_OFFSET, -20000.0),
                ],
            ),
        )
        assert isinstance(color, SRgbColor)
        self.assertEqual(color.hex, "00FF00")

    def test_valueless_transforms(self) -> None:
        color = COLOR.from_xml_element(parse_xml('<schemeClr val="phClr"><comp/><inv/><gray/><gamma/></schemeClr>'))
        self.assertIsInstance(color, SchemeColor)
        self.assertEqual(
            [t.kind for t in color.color_transforms],
            [ColorTransformKind.COMPLEMENT, ColorTransformKind.INVERSE, ColorTransformKind.GRAYSCALE, ColorTransformKind.GAMMA],
        )
        self.assertTrue(all(t.value is None for t in color.color_transforms))

    def test_transform_value_is_range_checked(self) -> None:
        with self.assertRaises(LexicalError):
            COLOR.from_xml_element(parse_xml('<srgbClr val="000000"><alpha val="100001"/></srgbClr>'))

    def test_other_arms(self) -> None:
        sc = COLOR.from_xml_element(parse_xml('<scrgbClr r="100000" g="0" b="50000"/>'))
        self.assertEqual(sc, ScRgbColor(100000.0, 0.0, 50000.0))
        hsl = COLOR.from_xml_element(parse_xml('<hslClr hue="14400000" sat="100000" lum="50000"/>'))
        self.assertEqual(hsl, HslColor(14400000, 100000.0, 50000.0))
        system = COLOR.from_xml_element(parse_xml('<sysClr val="windowText" lastClr="000000"/>'))
        self.assertEqual(system, SystemColor(SystemColorVal.WINDOW_TEXT, 0))
        preset = COLOR.from_xml_element(parse_xml('<prstClr val="black"/>'))
        self.assertEqual(preset, PresetColor(PresetColorVal.BLACK))
        scheme = COLOR.from_xml_element(parse_xml('<schemeClr val="accent6"/>'))
        self.assertEqual(scheme, SchemeColor(SchemeColorVal.ACCENT6))

    def test_srgb_rejects_short_and_non_hex(self) -> None:
        for value in ("12345", "GGGGGG"):
            with self.assertRaises(LexicalError):
                COLOR.from_xml_element(parse_xml(f'<srgbClr val="{value}"/>'))

    def test_missing_value_names_element_and_attribute(self) -> None:
        with self.assertRaises(MissingAttributeError) as ctx:
            COLOR.from_xml_element(parse_xml('<a:srgbClr xmlns:a="urn:x"/>'))
        self.assertEqual(ctx.exception.element, "a:srgbClr")
        self.assertEqual(ctx.exception.attribute, "val")

    def test_unknown_arm(self) -> None:
        with self.assertRaises(NotGroupMemberError) as ctx:
            COLOR.from_xml_element(parse_xml("<fooClr/>"))
        self.assertEqual(ctx.exception.element, "fooClr")
        self.assertEqual(ctx.exception.group, "EG_ColorChoice")

    def test_custom_color(self) -> None:
        custom = CustomColor.from_xml_element(parse_xml('<custClr name="Brand"><srgbClr val="123456"/></custClr>'))
        self.assertEqual(custom.name, "Brand")
        self.assertEqual(custom.color, SRgbColor(0x123456))

    def test_empty_wrapper_reports_color_group(self) -> None:
        with self.assertRaises(MissingChildNodeError) as ctx:
            CustomColor.from_xml_element(parse_xml("<custClr/>"))
        self.assertEqual(ctx.exception.child, "EG_ColorChoice")


class ColorSchemeTest(unittest.TestCase):
    def test_minimal_scheme(self) -> None:
        scheme = ColorScheme.from_xml_element(parse_xml(scheme_xml()))
        self.assertEqual(scheme.name, "Office")
        colors = scheme.colors()
        self.assertEqual(list(colors), list(SCHEME_ROLES))
        self.assertEqual(colors["dk1"], SRgbColor(0))
        self.assertEqual(colors["lt1"], SRgbColor(0xFFFFFF))
        self.assertEqual(scheme.followed_hyperlink, SRgbColor(0xFFFFFF))
        self.assertEqual(scheme.get(ColorSchemeIndex.DARK2), SRgbColor(0))

    def test_missing_role(self) -> None:
        with self.assertRaises(MissingChildNodeError) as ctx:
            ColorScheme.from_xml_element(parse_xml(scheme_xml(skip="accent3")))
        self.assertEqual(ctx.exception.element, "a:clrScheme")
        self.assertEqual(ctx.exception.child, "accent3")

    def test_missing_name(self) -> None:
        xml = scheme_xml().replace(' name="Office"', "")
        with self.assertRaises(MissingAttributeError):
            ColorScheme.from_xml_element(parse_xml(xml))

    def test_parse_is_idempotent(self) -> None:
        node = parse_xml(scheme_xml())
        self.assertEqual(ColorScheme.from_xml_element(node), ColorScheme.from_xml_element(node))


class ColorMappingTest(unittest.TestCase):
    def test_mapping_and_resolution(self) -> None:
        mapping = ColorMapping.from_xml_element(parse_xml(f"<clrMap {MAPPING_XML}/>"))
        self.assertIs(mapping.background1, ColorSchemeIndex.LIGHT1)
        self.assertIs(mapping.resolve(SchemeColorVal.TEXT1), ColorSchemeIndex.DARK1)
        self.assertIs(mapping.resolve(SchemeColorVal.ACCENT2), ColorSchemeIndex.ACCENT2)
        self.assertIs(mapping.resolve(SchemeColorVal.DARK2), ColorSchemeIndex.DARK2)
        self.assertIsNone(mapping.resolve(SchemeColorVal.PLACEHOLDER_COLOR))

    def test_missing_binding(self) -> None:
        partial = MAPPING_XML.replace('folHlink="folHlink"', "")
        with self.assertRaises(MissingAttributeError) as ctx:
            ColorMapping.from_xml_element(parse_xml(f"<clrMap {partial}/>"))
        self.assertEqual(ctx.exception.attribute, "folHlink")

    def test_override_choice(self) -> None:
        master = COLOR_MAPPING_OVERRIDE.from_xml_element(parse_xml("<masterClrMapping/>"))
        self.assertIsInstance(master, MasterColorMapping)
        override = COLOR_MAPPING_OVERRIDE.from_xml_element(parse_xml(f"<overrideClrMapping {MAPPING_XML}/>"))
        self.assertIsInstance(override, OverrideColorMapping)
        self.assertIs(override.mapping.text2, ColorSchemeIndex.DARK2)

    def test_override_rejects_plain_mapping(self) -> None:
        with self.assertRaises(NotGroupMemberError) as ctx:
            COLOR_MAPPING_OVERRIDE.from_xml_element(parse_xml(f"<clrMap {MAPPING_XML}/>"))
        self.assertEqual(ctx.exception.group, "CT_ColorMappingOverride")
        self.assertEqual(ctx.exception.element, "clrMap")

    def test_override_with_nested_mapping(self) -> None:
        node = parse_xml(f"<overrideClrMapping><clrMapping {MAPPING_XML}/></overrideClrMapping>")
        override = OverrideColorMapping.from_xml_element(node)
        self.assertIs(override.mapping.hyperlink, ColorSchemeIndex.HYPERLINK)

    def test_scheme_and_mapping(self) -> None:
        xml = (
            "<extraClrScheme>"
            + scheme_xml("Alt")
            + f"<clrMap {MAPPING_XML}/></extraClrScheme>"
        )
        entry = ColorSchemeAndMapping.from_xml_element(parse_xml(xml))
        self.assertEqual(entry.color_scheme.name, "Alt")
        self.assertIsNotNone(entry.color_mapping)
        with self.assertRaises(MissingChildNodeError):
            ColorSchemeAndMapping.from_xml_element(parse_xml(f"<extraClrScheme><clrMap {MAPPING_XML}/></extraClrScheme>"))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
