"""
Write Graphviz DOT files for a few small graphs after a backward pass:
a plain expression, a single neuron and a 2-2-1 MLP.

Render with e.g.  dot -Tsvg plots/value.dot -o value.svg
"""

import argparse
import numpy as np

from scalargrad import Value, backward
from scalargrad.nn import Neuron, MLP
from scalargrad.core.graph_utils import write_dot, print_graph_summary


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Export computation graphs as DOT',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--out-dir', type=str, default='plots',
                       help='Directory for the .dot files')
    parser.add_argument('--seed', type=int, default=0,
                       help='Random seed for neuron/MLP weights')
    parser.add_argument('--summary', action='store_true',
                       help='Also print a summary of every graph')
    return parser.parse_args()


def export(g, path, summary):
    backward(g)
    out = write_dot(g, path)
    print(f"wrote {out}")
    if summary:
        print_graph_summary(g)


def main():
    args = parse_args()
    rng = np.random.default_rng(args.seed)

    a, b, c, d = Value(1.0, label='a'), Value(2.0, label='b'), Value(3.0, label='c'), Value(4.0, label='d')
    export(((a + b) * (c + d)) ** 2, f"{args.out_dir}/value.dot", args.summary)

    neuron = Neuron(1, rng=rng)
    export(neuron([Value(7.0)]), f"{args.out_dir}/neuron.dot", args.summary)

    model = MLP(2, [2, 1], rng=rng)
    export(model([Value(7.0), Value(8.0)])[0], f"{args.out_dir}/mlp.dot", args.summary)


if __name__ == '__main__':
    main()
