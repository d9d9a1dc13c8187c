"""networkx view of a built hive, for analysis and summary stats."""
import networkx as nx

from .records import HiveData


def to_networkx(data: HiveData) -> nx.Graph:
    """
    Build an undirected graph from ``data``.

    Cells become nodes with their type, size and pulse. Edge endpoints
    without a cell (dangling edges) are added with ``placed=False``.
    Parallel edges of different types between the same pair collapse into
    one graph edge keeping the strongest weight.
    """
    G = nx.Graph()

    for cell in data.cells:
        G.add_node(
            cell.id,
            type=cell.cell_type,
            size=cell.size,
            pulse=cell.pulse_intensity,
            placed=True,
        )

    for conn in data.connections:
        for endpoint in (conn.source, conn.target):
            if endpoint not in G:
                G.add_node(endpoint, placed=False)

        if G.has_edge(conn.source, conn.target):
            if G[conn.source][conn.target]["weight"] >= conn.strength:
                continue
        G.add_edge(conn.source, conn.target, weight=conn.strength, type=conn.connection_type)

    return G


def hive_stats(data: HiveData) -> dict:
    """Node, edge and component counts for a built hive."""
    G = to_networkx(data)
    dangling = sum(1 for _, attrs in G.nodes(data=True) if not attrs.get("placed"))
    components = nx.number_connected_components(G) if G.number_of_nodes() else 0

    return {
        "nodeCount": G.number_of_nodes(),
        "edgeCount": G.number_of_edges(),
        "danglingNodeCount": dangling,
        "componentCount": components,
        "density": round(nx.density(G), 4) if G.number_of_nodes() > 1 else 0.0,
        "groupCount": len(data.groups),
    }
