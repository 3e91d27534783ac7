import networkx as nx

from griso import from_networkx
from griso.viz import draw_graph_pair

A = from_networkx(nx.cycle_graph(6))
B = from_networkx(nx.relabel_nodes(nx.cycle_graph(6), {i: f"n{(i * 5) % 6}" for i in range(6)}))

# Saves graph_pair.png; corresponding nodes carry the same label.
draw_graph_pair(A, B, save_path="graph_pair.png")
