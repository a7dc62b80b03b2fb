"""Graph visualization helpers."""

from __future__ import annotations


def draw_atoms(G, atoms, separators=None, label=True, legend=True, title=True, figsize=None):
    """Draw a graph with vertices colored by atom and separator vertices outlined.

    Vertices shared by several atoms take the color of the first atom (in
    sorted order of size, largest first) that contains them.
    """
    import matplotlib.pyplot as plt
    import networkx as nx
    import numpy as np

    atoms = sorted(atoms, key=lambda a: (-len(a), sorted(map(repr, a))))
    separator_nodes = set().union(*separators) if separators else set()

    if len(atoms) < 10:
        cmap = plt.get_cmap("tab10")
        colors = cmap(np.linspace(0, 1, cmap.N))
    else:
        colors = []
        for cmap_name in ["tab20", "tab20b", "tab20c"]:
            cmap = plt.get_cmap(cmap_name)
            colors.extend(cmap(np.linspace(0, 1, cmap.N)))

    atom_of = {}
    for idx, atom in enumerate(atoms):
        for node in atom:
            atom_of.setdefault(node, idx)

    pos = nx.spring_layout(G, seed=42)
    if figsize:
        plt.figure(figsize=figsize)
    nx.draw_networkx_nodes(
        G,
        pos,
        node_color=[colors[atom_of.get(n, 0) % len(colors)] for n in G.nodes()],
        edgecolors=["#000000" if n in separator_nodes else "none" for n in G.nodes()],
        linewidths=2,
        node_size=500 if len(atoms) < 10 else 300,
    )
    nx.draw_networkx_edges(G, pos, alpha=0.6)
    if label:
        nx.draw_networkx_labels(G, pos, font_size=8, font_color="black")

    for idx in range(len(atoms)):
        plt.scatter([], [], color=colors[idx % len(colors)], label=f"Atom {idx + 1}")
    if legend and atoms:
        plt.legend(scatterpoints=1, frameon=True)
    if title:
        plt.title("Clique Minimal Separator Decomposition")
    plt.axis("off")
    plt.show()


def draw_triangulation(G, fill_edges, fill_color="#FFCB05", edge_color="#00274C", figsize=None):
    """Draw a graph together with the fill edges of its triangulation (dashed)."""
    import matplotlib.pyplot as plt
    import networkx as nx
    from matplotlib.lines import Line2D

    fill = [tuple(edge) for edge in fill_edges]
    pos = nx.spring_layout(G, seed=42)
    if figsize:
        plt.figure(figsize=figsize)
    nx.draw_networkx_nodes(G, pos, node_color="white", edgecolors=edge_color, linewidths=2, node_size=500)
    nx.draw_networkx_edges(G, pos, style="solid", edge_color=edge_color, width=2)
    nx.draw_networkx_edges(G, pos, edgelist=fill, style="--", edge_color=fill_color, width=2)
    nx.draw_networkx_labels(G, pos, font_size=8, font_color="black")

    handles = [
        Line2D([], [], color=edge_color, lw=2, label="Graph edges"),
        Line2D([], [], color=fill_color, lw=2, linestyle="--", label="Fill edges"),
    ]
    plt.legend(handles=handles, loc="upper right")
    plt.axis("off")
    plt.show()
