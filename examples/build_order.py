"""Build order for a small set of packages.

This example demonstrates adding vertices and edges, the error raised
for a cyclic dependency, and the two topological sorts.
"""

from rich.console import Console

import dagstore as ds

console = Console()

# Each vertex carries the package version as its payload
packages = ds.DAG[str]()
for name, version in [
    ("app", "2.1.0"),
    ("http", "0.9.3"),
    ("json", "1.4.0"),
    ("log", "3.0.1"),
    ("tls", "1.2.2"),
]:
    packages.add_vertex(name, version)

# An edge a -> b means "b needs a built first"
packages.add_edge("log", "http")
packages.add_edge("tls", "http")
packages.add_edge("http", "app")
packages.add_edge("json", "app")

try:
    packages.add_edge("app", "log")
except ds.CycleError as e:
    console.print(f"[yellow]Rejected:[/yellow] {e}")

console.print("Insertion-order sort:", [v.id for v in packages.topological_sort()])
console.print("Stable sort:         ", [f"{v.id}=={v.value}" for v in packages.topological_sort_stable()])

ds.print_tree(packages, console=console, title="Packages")
