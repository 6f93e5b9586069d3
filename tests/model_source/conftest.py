"""
Shared test fixtures for model source tests.
"""

import pytest

from sysmlview.core.model_source.neo4j_source import Neo4jModelSource


@pytest.fixture
def neo4j_source():
    """Create Neo4j model source for testing."""
    return Neo4jModelSource(
        uri="bolt://localhost:7687",
        username="neo4j",
        password="password",
        database="neo4j",
    )


@pytest.fixture
def requirement_records():
    """Node records as returned for the requirement viewpoint."""
    return [
        {
            "labels": ["SysMLElement", "RequirementDefinition"],
            "properties": {
                "id": "req-1",
                "name": "StoppingDistance",
                "text": "Stop within 50 m",
                "tags": '["safety"]',
            },
        },
        {
            "labels": ["SysMLElement", "RequirementUsage"],
            "properties": {"id": "req-2", "name": "stopping", "definition": "req-1"},
        },
    ]
