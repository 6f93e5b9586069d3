"""
Model sources for sysmlview.

Provides the abstract read-only source and its graph database backends.

Available backends:
- Neo4jModelSource: Neo4j graph database
"""

from sysmlview.core.model_source.base import ModelSource
from sysmlview.core.model_source.factory import ModelSourceFactory
from sysmlview.core.model_source.neo4j_source import Neo4jModelSource

__all__ = [
    "ModelSource",
    "Neo4jModelSource",
    "ModelSourceFactory",
]
