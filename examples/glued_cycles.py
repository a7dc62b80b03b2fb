from cliquesep import CMSDecompositionConfig, CliqueMinimalSeparatorDecomposition
from cliquesep.case_studies import build_glued_cycles


def main():
    G, _ = build_glued_cycles(num_cycles=4, cycle_length=6)
    dec = CliqueMinimalSeparatorDecomposition(G, config=CMSDecompositionConfig(verbosity=1))
    print("chordal:", dec.is_chordal())
    print("fill edges:", sorted(tuple(sorted(e)) for e in dec.get_fill_edges()))
    for separator, count in dec.get_full_component_count().items():
        print("separator", sorted(separator), "full components:", count)
    for atom in sorted(dec.get_atoms(), key=min):
        print("atom", sorted(atom))


if __name__ == "__main__":
    main()
