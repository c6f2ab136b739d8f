"""Pareto optimization CLI runner.

Usage:
    python -m engopt.cli.run_pareto --model dual_hx_18 --pop 64 --gen 50
    python -m engopt.cli.run_pareto --model linkage --config engopt.yml --outdir ./results

Outputs:
    pareto_X.npy  - Decision vectors of Pareto front
    pareto_F.npy  - Objective values of Pareto front
    pareto_G.npy  - Constraint values of Pareto front
    summary.json  - Run metadata and statistics
"""

from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from ..paths import OUTPUT_DIR


def main(argv: list[str] | None = None) -> int:
    """Run Pareto optimization.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success).
    """
    from ..core.registry import list_models

    parser = argparse.ArgumentParser(description="Run multi-objective Pareto optimization")
    parser.add_argument("--model", type=str, required=True, choices=list_models(), help="Model key")
    parser.add_argument("--config", type=str, default=None, help="YAML configuration file")
    parser.add_argument("--pop", type=int, default=None, help="Population size")
    parser.add_argument("--gen", type=int, default=None, help="Number of generations")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--algorithm", type=str, default=None, choices=["auto", "ga", "nsga2", "nsga3"]
    )
    parser.add_argument(
        "--output", "--outdir", type=str, default=None, dest="output", help="Output directory"
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)

    # Import here to avoid loading pymoo at module level
    from ..adapters.optimize import optimize_model
    from ..core.archive_io import save_archive
    from ..core.config import default_config, load_config, merge_config
    from ..core.logging import get_logger, set_log_level

    if args.verbose:
        set_log_level("DEBUG")
    logger = get_logger(__name__).bind(model=args.model)

    config = load_config(args.config) if args.config else default_config()
    overrides = {
        k: v
        for k, v in {
            "pop_size": args.pop,
            "n_gen": args.gen,
            "seed": args.seed,
            "algorithm": args.algorithm,
        }.items()
        if v is not None
    }
    config = merge_config(config, {"optimization": overrides})
    opt = config.optimization

    output_dir = Path(args.output) if args.output else OUTPUT_DIR / args.model
    output_dir.mkdir(parents=True, exist_ok=True)

    with logger.timer("run_pareto", n_gen=opt.n_gen):
        pareto, problem = optimize_model(args.model, config.fixed_data(args.model), opt)

    F = pareto.F
    n_pareto = pareto.n_solutions
    feasible = pareto.feasible_mask

    summary = {
        "model": args.model,
        "n_pareto": n_pareto,
        "n_evals": problem.n_evals,
        "elapsed_s": pareto.elapsed_s,
        "pop_size": opt.pop_size,
        "n_gen": opt.n_gen,
        "seed": opt.seed,
        "algorithm": opt.algorithm,
        "n_obj": problem.n_obj,
        "n_constr": problem.N_CONSTR,
        "F_min": F.min(axis=0).tolist() if n_pareto > 0 else [],
        "F_max": F.max(axis=0).tolist() if n_pareto > 0 else [],
        "n_feasible": int(np.sum(feasible)),
        "feasible_fraction": float(np.mean(feasible)) if n_pareto > 0 else 0.0,
    }

    save_archive(output_dir, pareto.X, F, pareto.G, summary)

    logger.info(
        "pareto archive written",
        outdir=str(output_dir),
        n_pareto=n_pareto,
        n_feasible=summary["n_feasible"],
    )

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
