import time

from cliquesep import CliqueMinimalSeparatorDecomposition, summarize_decomposition
from cliquesep.case_studies import build_random_clique_glued_graph


def main():
    G = build_random_clique_glued_graph(num_pieces=20, piece_size=12, p=0.3, max_clique=3, seed=0)
    start = time.perf_counter()
    dec = CliqueMinimalSeparatorDecomposition(G)
    summary = summarize_decomposition(dec)
    print(f"{G.number_of_nodes()} vertices, {G.number_of_edges()} edges")
    print(summary)
    print(f"time: {time.perf_counter() - start:.3f}s")


if __name__ == "__main__":
    main()
