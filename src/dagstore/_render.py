"""Tree-style rendering of a DAG.

Each root is drawn as the top of its own tree. A vertex reachable along
several paths appears once per path.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

if TYPE_CHECKING:
    from ._graph import DAG


@dataclass(slots=True, frozen=True)
class TreeStyle:
    """Indentation guides for `format_tree`.

    Attributes:
        branch: Appended to the prefix for every child except the last.
        last: Appended to the prefix for the last child.

    """

    branch: str = "    |"
    last: str = "    "


def format_tree(dag: DAG[Any], style: TreeStyle | None = None) -> str:
    """Render *dag* as indented plain text.

    Roots are visited in insertion order, children in adjacency order.
    Every root block ends with an empty line.

    Args:
        dag: The graph to render.
        style: Indentation guides. Defaults to `TreeStyle()`.

    Returns:
        The rendered text, or an empty string for an empty graph.

    Example:
        With edges a -> b and a -> c the default style gives::

            a
                |b
                c

    """
    if style is None:
        style = TreeStyle()
    return "".join(_format_subtree(dag, root, "", style) + "\n" for root in dag.roots())


def _format_subtree(dag: DAG[Any], vertex_id: str, prefix: str, style: TreeStyle) -> str:
    lines = prefix + vertex_id + "\n"
    children = dag.children(vertex_id)
    for i, child_id in enumerate(children):
        guide = style.last if i == len(children) - 1 else style.branch
        lines += _format_subtree(dag, child_id, prefix + guide, style)
    return lines


def build_rich_tree(dag: DAG[Any], title: str = "DAG") -> Tree:
    """Build a Rich Tree with one branch per root of *dag*.

    Args:
        dag: The graph to render.
        title: Label of the top node.

    Returns:
        A rich.tree.Tree ready for printing.

    """
    tree = Tree(f"[bold]{escape(title)}[/bold]")
    for root in dag.roots():
        _add_tree_children(tree.add(f"[cyan]{escape(root)}[/cyan]"), dag, root)
    return tree


def _add_tree_children(parent: Tree, dag: DAG[Any], vertex_id: str) -> None:
    for child_id in dag.children(vertex_id):
        _add_tree_children(parent.add(escape(child_id)), dag, child_id)


def print_tree(dag: DAG[Any], console: Console | None = None, title: str = "DAG") -> None:
    """Print *dag* as a Rich tree.

    Args:
        dag: The graph to render.
        console: Console to print to. Defaults to a new stdout Console.
        title: Label of the top node.

    """
    if console is None:
        console = Console()
    if len(dag) == 0:
        console.print("[dim]Empty graph[/dim]")
        return
    console.print(build_rich_tree(dag, title=title))
