import logging

from griso import Graph, find_isomorphism

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

# A small molecule-like graph built twice with different vertex ids
# and insertion order.
g1 = Graph()
g1.add_vertex("c1", "C")
g1.add_vertex("o1", "O")
g1.add_vertex("o2", "O")
g1.add_undirected_edge("c1", "o1", "double")
g1.add_undirected_edge("c1", "o2", "double")

g2 = Graph()
g2.add_vertex(3, "O")
g2.add_vertex(1, "C")
g2.add_vertex(2, "O")
g2.add_undirected_edge(2, 1, "double")
g2.add_undirected_edge(1, 3, "double")

print("isomorphic:", g1.is_isomorphic(g2))
print("mapping:", find_isomorphism(g1, g2))

g3 = Graph()
g3.add_vertex("c1", "C")
g3.add_vertex("o1", "O")
g3.add_vertex("o2", "O")
g3.add_undirected_edge("c1", "o1", "double")
g3.add_undirected_edge("c1", "o2", "single")
print("isomorphic to single/double variant:", g1.is_isomorphic(g3))
