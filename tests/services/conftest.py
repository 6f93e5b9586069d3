"""
Shared test fixtures for service tests.
"""

import pytest

from sysmlview.models import Element, Model, Relationship


@pytest.fixture
def vehicle_model() -> Model:
    """Small vehicle model spanning structure, behaviour and requirements."""
    return Model(
        nodes=[
            Element(id="pd-vehicle", kind="part-definition", spec={"name": "Vehicle"}),
            Element(id="pd-engine", kind="part-definition", spec={"name": "Engine"}),
            Element(
                id="pu-engine",
                kind="part-usage",
                spec={"name": "engine", "multiplicity": "[1]"},
            ),
            Element(
                id="ad-drive",
                kind="action-definition",
                spec={
                    "name": "Drive",
                    "parameters": [
                        {"name": "fuel", "direction": "in", "type": "Fuel"},
                        {"name": "distance", "direction": "out", "type": "Length"},
                    ],
                },
            ),
            Element(
                id="au-drive",
                kind="action-usage",
                spec={
                    "name": "drive",
                    "definition": "ad-drive",
                    "parameters": [{"name": "distance", "direction": "out", "type": "Km"}],
                },
            ),
            Element(
                id="req-stop",
                kind="requirement-definition",
                spec={"name": "StoppingDistance", "text": "Stop within 50 m"},
            ),
        ],
        relationships=[
            Relationship(id="r-own", type="composition", source="pd-vehicle", target="pu-engine"),
            Relationship(id="r-def", type="definition", source="pu-engine", target="pd-engine"),
            Relationship(id="r-sat", type="satisfy", source="pd-vehicle", target="req-stop"),
            Relationship(
                id="r-spec", type="specialization", source="pd-engine", target="pd-vehicle"
            ),
        ],
    )


@pytest.fixture
def grid_model() -> Model:
    """Four packages with no stored positions."""
    return Model(
        nodes=[Element(id=node_id, kind="package") for node_id in ("A", "B", "C", "D")],
    )
