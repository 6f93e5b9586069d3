"""
Tests for node projection.
"""

import pytest

from sysmlview.config import LayoutConfig
from sysmlview.core.projection import grid_position, project_node
from sysmlview.models import Element, Position
from sysmlview.models.kinds import ElementKind, ShapeFamily
from sysmlview.utils.exceptions import UnknownNodeKind


@pytest.mark.unit
class TestGridPosition:
    """Test fallback grid layout."""

    @pytest.mark.parametrize(
        "index,expected",
        [(0, (0, 0)), (1, (320, 0)), (2, (640, 0)), (3, (0, 260)), (7, (320, 520))],
    )
    def test_default_grid(self, index, expected):
        """Test three columns at 320 x 260 spacing."""
        assert grid_position(index) == Position(x=expected[0], y=expected[1])

    def test_custom_layout(self):
        """Test grid honours layout settings."""
        layout = LayoutConfig(columns=2, column_spacing=100, row_spacing=50)
        assert grid_position(3, layout) == Position(x=100, y=50)


@pytest.mark.unit
class TestProjectNode:
    """Test element to view node projection."""

    def test_common_fields(self):
        """Test identity, type, shape and accent."""
        element = Element(
            id="pd-1",
            kind="part-definition",
            spec={"name": "Vehicle", "stereotype": "block", "description": "A car"},
        )

        node = project_node(element)

        assert node.id == "pd-1"
        assert node.kind == "part-definition"
        assert node.type == "sysml.part-definition"
        assert node.shape == ShapeFamily.DEFINITION
        assert node.accent == "#4589FF"
        assert node.name == "Vehicle"
        assert node.stereotype == "block"
        assert node.documentation == "A car"
        assert node.element_kind == ElementKind.DEFINITION
        assert node.position == Position(x=0, y=0)

    def test_missing_name_is_empty(self):
        """Test a node without a name projects to an empty name."""
        node = project_node(Element(id="p", kind="package"))

        assert node.name == ""
        assert node.element_kind is None
        assert node.compartments == []
        assert node.show_compartments is False

    def test_explicit_position_wins_over_index(self):
        """Test explicit positions are used verbatim."""
        element = Element(id="a", kind="package")

        node = project_node(element, {"x": 15, "y": 25}, index=4)

        assert node.position == Position(x=15, y=25)

    def test_partial_position(self):
        """Test a partial position fills the missing coordinate with 0."""
        node = project_node(Element(id="a", kind="package"), {"x": 5})
        assert node.position == Position(x=5, y=0)

    def test_index_selects_grid_slot(self):
        """Test the index drives the fallback position."""
        node = project_node(Element(id="a", kind="package"), index=4)
        assert node.position == Position(x=320, y=260)

    def test_usage_references(self):
        """Test usages expose definition, redefinition and subsetting."""
        element = Element(
            id="pu-1",
            kind="part-usage",
            spec={"name": "engine", "definition": "pd-1", "redefines": "x", "subsets": "y"},
        )

        node = project_node(element)

        assert node.base_definition == "pd-1"
        assert node.redefines == ["x"]
        assert node.subsets == ["y"]
        assert node.element_kind == ElementKind.USAGE

    def test_usage_reference_lists(self):
        """Test redefinition and subsetting lists are kept in order."""
        element = Element(
            id="pu",
            kind="part-usage",
            spec={"redefines": ["Vehicle::engine", "Car::motor"], "subsets": ["parts"]},
        )

        node = project_node(element)

        assert node.redefines == ["Vehicle::engine", "Car::motor"]
        assert node.subsets == ["parts"]
        data = node.model_dump(mode="json", by_alias=True, exclude_none=True)
        assert data["redefines"] == ["Vehicle::engine", "Car::motor"]

    def test_malformed_text_field_dropped(self):
        """Test non-text attribute values are dropped instead of failing the node."""
        element = Element(
            id="bad",
            kind="requirement-usage",
            spec={"name": "Braking", "status": {"state": "draft"}, "stereotype": ["x"]},
        )

        node = project_node(element)

        assert node.name == "Braking"
        assert node.status is None
        assert node.stereotype is None

    def test_scalar_text_field_coerced(self):
        """Test numeric attribute values become strings."""
        element = Element(id="c", kind="constraint-usage", spec={"expression": 42, "name": 7})

        node = project_node(element)

        assert node.emphasis == "42"
        assert node.name == "7"

    def test_malformed_usage_reference_dropped(self):
        """Test usage references of an unexpected shape are dropped."""
        element = Element(id="pu", kind="part-usage", spec={"redefines": {"a": 1}})
        assert project_node(element).redefines is None

    def test_malformed_control_type_dropped(self):
        """Test a non-text control type does not fail the node."""
        element = Element(id="f", kind="activity-control", spec={"controlType": {"k": "fork"}})

        node = project_node(element)

        assert node.control_type is None
        assert node.stereotype is None

    def test_definitions_ignore_usage_references(self):
        """Test definition kinds do not carry a base definition."""
        element = Element(id="pd", kind="part-definition", spec={"definition": "other"})
        assert project_node(element).base_definition is None

    def test_activity_control(self):
        """Test control nodes surface their control type."""
        element = Element(id="f", kind="activity-control", spec={"controlType": "fork"})

        node = project_node(element)

        assert node.control_type == "fork"
        assert node.stereotype == "fork"
        assert node.shape == ShapeFamily.ACTIVITY_CONTROL

    def test_constraint_emphasis(self):
        """Test constraint expressions become the emphasis line."""
        element = Element(id="c", kind="constraint-usage", spec={"expression": "v < 120"})
        assert project_node(element).emphasis == "v < 120"

    def test_calculation_usage_emphasis(self):
        """Test calculation usages emphasize their body."""
        element = Element(id="c", kind="calculation-usage", spec={"calculationBody": "m * a"})
        assert project_node(element).emphasis == "m * a"

    def test_state_defaults(self):
        """Test states get a default stereotype and surface status."""
        node = project_node(Element(id="s", kind="state", spec={"status": "active"}))

        assert node.stereotype == "state"
        assert node.status == "active"

    def test_lifeline_documentation(self):
        """Test lifelines document their classifier."""
        element = Element(id="l", kind="sequence-lifeline", spec={"classifier": "Driver"})

        node = project_node(element)

        assert node.stereotype == "lifeline"
        assert node.documentation == "Driver"

    def test_comment_defaults(self):
        """Test comments get a default name and use the body as documentation."""
        node = project_node(Element(id="c", kind="comment", spec={"body": "Note this"}))

        assert node.name == "Comment"
        assert node.documentation == "Note this"

    def test_tags_are_strings(self):
        """Test tags are kept as strings."""
        element = Element(id="p", kind="package", spec={"tags": ["core", 2]})
        assert project_node(element).tags == ["core", "2"]

    def test_synthesized_compartments_shown(self):
        """Test nodes with compartments show them by default."""
        element = Element(
            id="pd", kind="part-definition", spec={"attributes": [{"name": "mass"}]}
        )

        node = project_node(element)

        assert [c.title for c in node.compartments] == ["attributes"]
        assert node.show_compartments is True

    def test_show_compartments_override(self):
        """Test an explicit showCompartments flag wins."""
        element = Element(
            id="pd",
            kind="part-definition",
            spec={"attributes": [{"name": "mass"}], "showCompartments": False},
        )
        assert project_node(element).show_compartments is False

    def test_precomputed_compartments_used_verbatim(self):
        """Test precomputed compartments replace synthesis."""
        element = Element(
            id="pd",
            kind="part-definition",
            spec={
                "attributes": [{"name": "mass"}],
                "compartments": [{"title": "custom", "items": [{"label": "row"}]}],
            },
        )

        node = project_node(element)

        assert [c.title for c in node.compartments] == ["custom"]

    def test_malformed_precomputed_compartments_fall_back(self):
        """Test malformed precomputed compartments are ignored."""
        element = Element(
            id="pd",
            kind="part-definition",
            spec={"attributes": [{"name": "mass"}], "compartments": "oops"},
        )

        assert [c.title for c in project_node(element).compartments] == ["attributes"]

    def test_definition_parameters_inherited(self):
        """Test action usages merge their definition's parameters."""
        definition = Element(
            id="ad",
            kind="action-definition",
            spec={"parameters": [{"name": "fuel", "direction": "in", "type": "Fuel"}]},
        )
        usage = Element(id="au", kind="action-usage", spec={"definition": "ad"})

        node = project_node(usage, definition=definition)

        (inputs,) = node.compartments
        assert inputs.items[0].label == "fuel"
        assert inputs.items[0].inherited is True

    def test_unknown_kind(self):
        """Test unknown kinds raise."""
        with pytest.raises(UnknownNodeKind):
            project_node(Element(id="x", kind="widget"))

    def test_fresh_output(self):
        """Test projection does not share position objects with the caller."""
        position = Position(x=1, y=2)

        node = project_node(Element(id="a", kind="package"), position)

        assert node.position == position
        assert node.position is not position
