"""
Train an MLP on the two-moons dataset with plain SGD.

Example:
    python train_moons.py --steps 100 --hidden 16,16 --ascii --plot moons.png
"""

import argparse
import numpy as np

from scalargrad.nn import MLP
from scalargrad.data import load_moons_data
from scalargrad.training import TrainConfig, train, ascii_contour, plot_decision_boundary


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Two-moons MLP training',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--hidden', type=str, default='16,16',
                       help='Comma-separated hidden layer sizes')
    parser.add_argument('--steps', type=int, default=100,
                       help='Number of SGD steps')
    parser.add_argument('--alpha', type=float, default=1e-4,
                       help='L2 regularization strength')
    parser.add_argument('--lr-start', type=float, default=1.0,
                       help='Initial learning rate')
    parser.add_argument('--lr-decay', type=float, default=0.9,
                       help='Total linear learning-rate decay over the run')
    parser.add_argument('--samples', type=int, default=100,
                       help='Number of generated points (ignored with --data)')
    parser.add_argument('--noise', type=float, default=0.1,
                       help='Noise of the generated points (ignored with --data)')
    parser.add_argument('--seed', type=int, default=1337,
                       help='Random seed for data and weights')
    parser.add_argument('--data', type=str, default=None,
                       help='CSV file with columns x,y,label (generated when omitted)')
    parser.add_argument('--ascii', action='store_true',
                       help='Print an ASCII contour of the decision boundary')
    parser.add_argument('--plot', type=str, default=None,
                       help='Save a decision-boundary figure to this path')
    parser.add_argument('--quiet', action='store_true',
                       help='Do not print per-step progress')
    return parser.parse_args()


def main():
    args = parse_args()
    config = TrainConfig(
        hidden_sizes=tuple(int(h) for h in args.hidden.split(',') if h.strip()),
        steps=args.steps,
        alpha=args.alpha,
        lr_start=args.lr_start,
        lr_decay=args.lr_decay,
        n_samples=args.samples,
        noise=args.noise,
        seed=args.seed,
        data_path=args.data,
        verbose=not args.quiet,
    )

    rng = np.random.default_rng(config.seed)
    X, y = load_moons_data(config.data_path, n_samples=config.n_samples,
                           noise=config.noise, rng=rng)
    model = MLP(2, config.layer_sizes, rng=rng)
    print(model)
    print(f"number of parameters {len(model.parameters())}")

    history = train(model, X, y, config)
    final_loss, final_acc = history[-1]
    print(f"final loss {final_loss:.4f}, accuracy {final_acc * 100:.2f}%")

    if args.ascii:
        print(ascii_contour(model))
    if args.plot:
        plot_decision_boundary(model, X, y, save_path=args.plot)


if __name__ == '__main__':
    main()
