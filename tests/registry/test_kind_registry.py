"""
Tests for the kind registry and built-in viewpoints.
"""

import pytest

from sysmlview.core.compartments import KIND_BUILDERS
from sysmlview.core.projection import NODE_MAPPERS
from sysmlview.core.registry import (
    ACCENTS,
    DEFAULT_NODE_ACCENT,
    EDGE_STYLES,
    SHAPES,
    accent_for,
    all_viewpoints,
    edge_style_for,
    element_kind_for,
    get_available_types_for_viewpoint,
    get_viewpoint_by_id,
    humanize_kind,
    is_definition_kind,
    label_for,
    resolve_edge_kind,
    resolve_node_kind,
    shape_for,
    view_type_for,
)
from sysmlview.models.kinds import (
    EdgeKind,
    EdgeMarker,
    EdgePath,
    ElementKind,
    NodeKind,
    ShapeFamily,
)
from sysmlview.utils.exceptions import UnknownEdgeKind, UnknownKindError, UnknownNodeKind


@pytest.mark.unit
class TestExhaustiveness:
    """Every kind must be covered by every table."""

    def test_every_node_kind_has_shape_and_accent(self):
        """Test shape and accent tables cover all node kinds."""
        assert set(SHAPES) == set(NodeKind)
        assert set(ACCENTS) == set(NodeKind)

    def test_every_node_kind_has_projection_config(self):
        """Test mapper and builder tables cover all node kinds."""
        assert set(NODE_MAPPERS) == set(NodeKind)
        assert set(KIND_BUILDERS) == set(NodeKind)

    def test_every_edge_kind_has_style(self):
        """Test edge style table covers all edge kinds."""
        assert set(EDGE_STYLES) == set(EdgeKind)

    def test_tables_are_read_only(self):
        """Test registry tables cannot be modified."""
        with pytest.raises(TypeError):
            SHAPES[NodeKind.PACKAGE] = ShapeFamily.STATE


@pytest.mark.unit
class TestNodeLookups:
    """Test node kind lookups."""

    @pytest.mark.parametrize(
        "kind,shape",
        [
            ("part-definition", ShapeFamily.DEFINITION),
            ("perform-action", ShapeFamily.ACTIVITY),
            ("constraint-usage", ShapeFamily.PARAMETRIC),
            ("verification-case-usage", ShapeFamily.REQUIREMENT),
            ("use-case-definition", ShapeFamily.USE_CASE),
            ("transition-usage", ShapeFamily.STATE),
            ("state-machine", ShapeFamily.STATE_MACHINE),
            ("library-package", ShapeFamily.BLOCK),
            ("interaction", ShapeFamily.SEQUENCE_LIFELINE),
            ("activity-control", ShapeFamily.ACTIVITY_CONTROL),
        ],
    )
    def test_shape_for(self, kind, shape):
        """Test shape families per kind."""
        assert shape_for(kind) == shape

    def test_shape_for_accepts_enum(self):
        """Test lookups accept enum members as well as strings."""
        assert shape_for(NodeKind.PACKAGE) == ShapeFamily.BLOCK

    def test_unknown_node_kind(self):
        """Test unknown kinds are rejected with the kind in the error."""
        with pytest.raises(UnknownNodeKind, match="kind not found") as exc:
            shape_for("widget-definition")

        assert exc.value.kind == "widget-definition"
        assert isinstance(exc.value, UnknownKindError)

    def test_accent_for(self):
        """Test accent colours, including the neutral fallback."""
        assert accent_for("part-definition") == "#4589FF"
        assert accent_for("satisfy") == "#0f62fe"
        assert accent_for("widget") == DEFAULT_NODE_ACCENT

    def test_is_definition_kind(self):
        """Test definition classification is by suffix."""
        assert is_definition_kind("part-definition")
        assert is_definition_kind("verification-case-definition")
        assert not is_definition_kind("part-usage")
        assert not is_definition_kind("state")

    def test_is_definition_kind_rejects_unknown(self):
        """Test unknown kinds are rejected before the suffix test."""
        with pytest.raises(UnknownNodeKind):
            is_definition_kind("widget-definition")

    def test_element_kind_for(self):
        """Test definition/usage/neither classification."""
        assert element_kind_for("item-definition") == ElementKind.DEFINITION
        assert element_kind_for("item-usage") == ElementKind.USAGE
        assert element_kind_for("comment") is None

    def test_view_type_and_label(self):
        """Test renderer type tag and human label."""
        assert view_type_for("part-usage") == "sysml.part-usage"
        assert label_for("part-usage") == "Part Usage"
        assert label_for("flow-connection") == "Flow Connection"

    def test_resolve_node_kind(self):
        """Test resolving identifiers to enum members."""
        assert resolve_node_kind("state") is NodeKind.STATE


@pytest.mark.unit
class TestEdgeLookups:
    """Test edge kind lookups and styles."""

    def test_unknown_edge_kind(self):
        """Test unknown relationship types are rejected."""
        with pytest.raises(UnknownEdgeKind, match="kind not found"):
            resolve_edge_kind("association")

    def test_humanize_kind(self):
        """Test title-casing of hyphenated kinds."""
        assert humanize_kind("flow-connection") == "Flow Connection"
        assert humanize_kind("succession-as-usage") == "Succession As Usage"
        assert humanize_kind(EdgeKind.SATISFY) == "Satisfy"

    def test_dashed_edges(self):
        """Test dependency-like edges are dashed."""
        for kind in ("dependency", "satisfy", "verify", "refine", "allocate", "include", "extend"):
            assert edge_style_for(kind).dashed, kind
        assert not edge_style_for("transition").dashed

    def test_composition_style(self):
        """Test composition uses a filled diamond at the source and no end marker."""
        style = edge_style_for("composition")

        assert style.marker_start == EdgeMarker.DIAMOND_FILLED
        assert style.marker_end is None
        assert style.path == EdgePath.SMOOTH
        assert style.stroke == "#525252"

    def test_aggregation_style(self):
        """Test aggregation uses a hollow diamond."""
        assert edge_style_for("aggregation").marker_start == EdgeMarker.DIAMOND_HOLLOW

    def test_end_markers(self):
        """Test end marker families."""
        assert edge_style_for("specialization").marker_end == EdgeMarker.TRIANGLE_HOLLOW
        assert edge_style_for("conjugation").marker_end == EdgeMarker.TRIANGLE_HOLLOW
        assert edge_style_for("feature-typing").marker_end == EdgeMarker.ARROW_OPEN
        assert edge_style_for("satisfy").marker_end == EdgeMarker.ARROW_OPEN
        assert edge_style_for("transition").marker_end == EdgeMarker.ARROW_FILLED

    def test_paths(self):
        """Test smooth routing only for ownership and flow connections."""
        assert edge_style_for("flow-connection").path == EdgePath.SMOOTH
        assert edge_style_for("message").path == EdgePath.STRAIGHT

    def test_default_stroke(self):
        """Test edge kinds without a colour use the neutral stroke."""
        assert edge_style_for("binding-connector").stroke == "#8d8d8d"


@pytest.mark.unit
class TestViewpointRegistry:
    """Test the built-in viewpoints."""

    def test_all_viewpoints(self):
        """Test the seven built-in viewpoints in order."""
        ids = [vp.id for vp in all_viewpoints()]

        assert ids == [
            "sysml.structuralDefinition",
            "sysml.usageStructure",
            "sysml.behaviorControl",
            "sysml.interaction",
            "sysml.state",
            "sysml.requirement",
            "sysml.useCase",
        ]

    def test_viewpoints_reference_known_kinds(self):
        """Test every referenced kind is registered."""
        for viewpoint in all_viewpoints():
            for kind in viewpoint.include_node_kinds:
                resolve_node_kind(kind)
            for kind in viewpoint.include_edge_kinds or ():
                resolve_edge_kind(kind)

    def test_get_viewpoint_by_id(self):
        """Test lookup by ID."""
        viewpoint = get_viewpoint_by_id("sysml.requirement")

        assert viewpoint.name == "Requirement Viewpoint"
        assert "requirement-usage" in viewpoint.include_node_kinds
        assert get_viewpoint_by_id("sysml.nope") is None

    def test_available_types(self):
        """Test available types for known and unknown viewpoints."""
        types = get_available_types_for_viewpoint("sysml.interaction")

        assert types == {"node_kinds": ["sequence-lifeline"], "edge_kinds": ["message"]}
        assert get_available_types_for_viewpoint("sysml.nope") == {
            "node_kinds": [],
            "edge_kinds": [],
        }
