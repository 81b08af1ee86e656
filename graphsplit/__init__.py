"""
Signed Graph 3-Partition (graphsplit) Package

Decides whether the nodes of a signed graph can be split into three
non-empty sets, with positive edges kept inside a set and negative edges
crossing sets, by reducing the question to SAT:
- DIMACS CNF encoding of the partition constraints
- External SAT solver processes (MiniSat, Glucose, CaDiCaL, ...)
- In-process solving with Z3
"""

__version__ = "0.1.0"
__author__ = "graphsplit Project Team"
