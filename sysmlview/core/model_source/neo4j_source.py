"""
Neo4j model source.

Read-only: fetches a snapshot of SysML elements and relationships.
"""

from neo4j import AsyncDriver, AsyncGraphDatabase

from sysmlview.core.model_source.base import ModelSource
from sysmlview.core.model_source.mapper import (
    BASE_LABEL,
    edge_kind_to_rel_type,
    node_kind_to_label,
    record_to_element,
    record_to_relationship,
)
from sysmlview.core.registry import get_viewpoint_by_id
from sysmlview.models.element import Element, Model, Relationship
from sysmlview.models.kinds import EdgeKind
from sysmlview.utils.exceptions import ModelSourceError, ViewpointNotFoundError
from sysmlview.utils.logger import get_logger

logger = get_logger(__name__)

NODES_QUERY = f"""
MATCH (n:{BASE_LABEL})
WHERE $labels IS NULL OR any(label IN labels(n) WHERE label IN $labels)
RETURN labels(n) AS labels, properties(n) AS properties
ORDER BY coalesce(n.createdAt, ''), n.id
"""

DEFINITIONS_QUERY = f"""
MATCH (n:{BASE_LABEL})-[:DEFINITION]->(d:{BASE_LABEL})
WHERE n.id IN $ids AND NOT d.id IN $ids
RETURN DISTINCT labels(d) AS labels, properties(d) AS properties, d.id AS id
ORDER BY id
"""

RELATIONSHIPS_QUERY = f"""
MATCH (s:{BASE_LABEL})-[r]->(t:{BASE_LABEL})
WHERE $types IS NULL OR type(r) IN $types
RETURN type(r) AS type, s.id AS source, t.id AS target, properties(r) AS properties
ORDER BY coalesce(r.createdAt, ''), s.id, t.id
"""


class Neo4jModelSource(ModelSource):
    """
    Neo4j-backed model source.

    Nodes carry the base label plus a PascalCase kind label; relationship
    types are UPPER_SNAKE edge kinds. Filtering by viewpoint is coarse: the
    definitions of fetched nodes and all DEFINITION relationships are always
    included so parameter inheritance survives the filter.
    """

    def __init__(
        self,
        uri: str = "bolt://localhost:7687",
        username: str = "neo4j",
        password: str = "password",
        database: str = "neo4j",
    ):
        """
        Initialize Neo4j model source.

        Args:
            uri: Neo4j connection URI
            username: Username
            password: Password
            database: Database name
        """
        self.uri = uri
        self.username = username
        self.password = password
        self.database = database
        self.driver: AsyncDriver | None = None

    async def connect(self) -> None:
        """
        Establish connection to Neo4j.

        Raises:
            ModelSourceError: If connection fails
        """
        if self.driver is None:
            try:
                self.driver = AsyncGraphDatabase.driver(
                    self.uri,
                    auth=(self.username, self.password),
                )
            except Exception as e:
                logger.error(
                    f"Failed to connect to Neo4j: {e}",
                    extra={"uri": self.uri, "error": str(e)},
                )
                raise ModelSourceError(f"Failed to connect to Neo4j: {e}") from e

    @staticmethod
    def _filters(viewpoint_id: str | None) -> tuple[list[str] | None, list[str] | None]:
        if viewpoint_id is None:
            return None, None

        viewpoint = get_viewpoint_by_id(viewpoint_id)
        if viewpoint is None:
            raise ViewpointNotFoundError(
                f"Viewpoint not found: {viewpoint_id}", {"viewpoint_id": viewpoint_id}
            )

        labels = [node_kind_to_label(kind) for kind in viewpoint.include_node_kinds] or None
        types = None
        if viewpoint.include_edge_kinds is not None:
            types = [edge_kind_to_rel_type(kind) for kind in viewpoint.include_edge_kinds]
            definition = edge_kind_to_rel_type(EdgeKind.DEFINITION.value)
            if definition not in types:
                types.append(definition)
        return labels, types

    async def fetch_model(self, viewpoint_id: str | None = None) -> Model:
        """
        Fetch elements and relationships, optionally coarse-filtered by viewpoint.

        Args:
            viewpoint_id: Optional built-in viewpoint ID

        Returns:
            Model snapshot

        Raises:
            ViewpointNotFoundError: If the viewpoint ID is unknown
            ModelSourceError: If the query fails
        """
        labels, types = self._filters(viewpoint_id)

        try:
            await self.connect()

            async with self.driver.session(database=self.database) as session:
                nodes: list[Element] = []
                result = await session.run(NODES_QUERY, {"labels": labels})
                async for record in result:
                    nodes.append(record_to_element(record["labels"], record["properties"]))

                if labels is not None and nodes:
                    result = await session.run(
                        DEFINITIONS_QUERY, {"ids": [node.id for node in nodes]}
                    )
                    async for record in result:
                        nodes.append(record_to_element(record["labels"], record["properties"]))

                relationships: list[Relationship] = []
                result = await session.run(RELATIONSHIPS_QUERY, {"types": types})
                async for record in result:
                    relationships.append(
                        record_to_relationship(
                            record["type"],
                            record["source"],
                            record["target"],
                            record["properties"] or {},
                        )
                    )
        except ModelSourceError:
            raise
        except Exception as e:
            logger.error(
                f"Failed to fetch model: {e}",
                extra={"viewpoint_id": viewpoint_id, "error": str(e)},
            )
            raise ModelSourceError(f"Failed to fetch model: {e}") from e

        logger.debug(
            f"Fetched {len(nodes)} nodes and {len(relationships)} relationships "
            f"(viewpoint={viewpoint_id})"
        )
        return Model(nodes=nodes, relationships=relationships)

    async def close(self) -> None:
        """Close the Neo4j driver."""
        if self.driver is not None:
            await self.driver.close()
            self.driver = None