from argparse import ArgumentParser

from linear_regression.config import reference_hparams
from linear_regression.matrix import Matrix
from linear_regression.solver import fit_1d, fit_nd

# perfectly linear, slope -3
features_1d = [1, 2, 3, 4, 5]
labels_1d = [-3, -6, -9, -12, -15]

# y = 3.5 x1 - 2 x2
features_2d = [[-1, 3], [2, -4], [5, -2], [3, -1]]
labels_2d = [[-9.5], [15], [21.5], [12.5]]

# fewer rows than features, only usable with the ridge penalty
features_3d = [[1, 3, 5], [2, 4, 6]]
labels_3d = [[311], [414]]


def format_matrix(matrix: Matrix) -> str:
    """One line per row, elements separated by commas."""
    return "\n".join(", ".join(f"{v:g}" for v in row) for row in matrix.tolist())


def run_case(case: str, args) -> str:
    hparams = reference_hparams[case]
    alpha = hparams.alpha if args.alpha is None else args.alpha
    lam = hparams.lam if args.lam is None else args.lam
    iterations = hparams.iterations if args.iterations is None else args.iterations
    if case == "1d":
        return f"{fit_1d(features_1d, labels_1d, alpha, lam, iterations):g}"
    features, labels = (features_2d, labels_2d) if case == "2d" else (features_3d, labels_3d)
    theta = fit_nd(features, labels, alpha, lam, iterations, progress=args.progress)
    return format_matrix(theta)


def main(args):
    cases = list(reference_hparams) if args.case == "all" else [args.case]
    for i, case in enumerate(cases, 1):
        print(f"Test case {i} ({case}):")
        print(run_case(case, args))
        print()


def cli():
    parser = ArgumentParser(description="Fit the bundled reference datasets.")
    parser.add_argument(
        "--case", choices=[*reference_hparams, "all"], default="all", help="dataset to fit."
    )
    parser.add_argument("--alpha", type=float, default=None, help="learning rate override.")
    parser.add_argument("--lam", type=float, default=None, help="ridge penalty override.")
    parser.add_argument(
        "--iterations", type=int, default=None, help="number of gradient descent updates."
    )
    parser.add_argument("--progress", action="store_true", help="show a progress bar.")
    args = parser.parse_args()
    main(args)


if __name__ == "__main__":
    cli()
