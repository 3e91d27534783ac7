from griso import Graph, GraphLabeller, automorphism_count, vf2_automorphism_count
from griso.isomorphism import automorphisms, vertex_permutation

# Directed 3-cycle with named edges: only the rotations survive.
g = Graph()
for vid in (1, 2, 3):
    g.add_vertex(vid, "v")
for u, v in [(1, 2), (2, 3), (3, 1)]:
    g.add_directed_edge(u, v, "next")

labeller = GraphLabeller(g)
for labelling in labeller:
    print(labelling)
print("labellings:", labeller.emitted)

print("|Aut| =", automorphism_count(g), "(VF2:", vf2_automorphism_count(g), ")")
for aut in automorphisms(g):
    print("  ", vertex_permutation(aut))
