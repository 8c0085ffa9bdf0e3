"""
Graph utilities.

Print, summarize and export the computation graph reachable from a Value.
"""

import numpy as np
from typing import Dict
from collections import Counter
from pathlib import Path

from .engine import build_topo


def get_graph_stats(root) -> Dict:
    """
    Collect statistics of the graph reachable from `root` (no printing).

    Returns:
        dict with nodes, edges, leaves, max/avg fan-in, max/avg fan-out,
        depth (longest operand chain, leaves at depth 0) and per-op counts.
    """
    topo = build_topo(root)
    n_nodes = len(topo)

    fan_ins = [len(v._prev) for v in topo]
    n_edges = sum(fan_ins)

    # fan-out: how many reachable consumers name each node as an operand
    fan_out = Counter()
    for v in topo:
        for child in v._prev:
            fan_out[child.uid] += 1
    fan_outs = [fan_out[v.uid] for v in topo]

    # topo lists operands first, so one forward sweep gives the depth
    depth = {}
    for v in topo:
        depth[v.uid] = 1 + max((depth[c.uid] for c in v._prev), default=-1)

    op_counter = Counter(v._op for v in topo if v._op)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': sum(1 for v in topo if not v._prev),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'depth': depth[root.uid],
        'operations': dict(op_counter),
    }


def print_graph_summary(root) -> Dict:
    """Print a summary block of the graph reachable from `root` and return the stats."""
    stats = get_graph_stats(root)

    print("\n" + "=" * 70)
    print("COMPUTATION GRAPH SUMMARY")
    print("=" * 70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print(f"Depth:              {stats['depth']}")
    if stats['operations']:
        print()
        print("Operation breakdown:")
        for op_type, count in Counter(stats['operations']).most_common(10):
            pct = 100.0 * count / stats['nodes']
            print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")
    print("=" * 70 + "\n")

    return stats


def print_computation_graph(root, max_nodes: int = 20) -> None:
    """
    Print the graph in topological order, one line per node:
        Node <i>: <op> (data, grad) <- [operand indices]
    """
    topo = build_topo(root)
    index = {v.uid: i for i, v in enumerate(topo)}

    print("\n" + "=" * 70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("=" * 70)

    for i, v in enumerate(topo[:max_nodes]):
        op = v._op or (v.label or "leaf")
        if v._prev:
            parent_info = ", ".join(f"Node{index[c.uid]}" for c in v._prev)
            print(f"Node {i:4d}: {op:12s} ({v.data:10.4f}, grad={v.grad:10.4f}) <- [{parent_info}]")
        else:
            print(f"Node {i:4d}: {op:12s} ({v.data:10.4f}, grad={v.grad:10.4f}) [leaf/input]")

    if len(topo) > max_nodes:
        print(f"... ({len(topo) - max_nodes} more nodes)")

    print("=" * 70 + "\n")


def to_dot(root) -> str:
    """
    Graphviz DOT source for the graph reachable from `root`.

    Nodes are boxes labelled with data and grad; each edge runs operand ->
    result and carries the result's op tag.
    """
    lines = [
        "digraph {",
        "    node [shape=box]",
        '    rankdir="LR"',
    ]
    topo = build_topo(root)
    for v in topo:
        name = f"{v.label} | " if v.label else ""
        lines.append(f'    {v.uid} [label="{name}data={v.data:.4f} grad={v.grad:.4f}"]')
    for v in topo:
        for child in v._prev:
            lines.append(f'    {child.uid} -> {v.uid} [label="{v._op}"]')
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(root, path) -> Path:
    """Write `to_dot(root)` to `path`, creating parent directories. Returns the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_dot(root))
    return path
