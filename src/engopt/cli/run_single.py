"""Single candidate evaluation CLI.

Usage:
    python -m engopt.cli.run_single --model linkage --x "[95, 260, 120]"
    python -m engopt.cli.run_single --model dual_hx_18 --random --seed 7

Outputs JSON with F, G, and diagnostics to stdout.
"""

from __future__ import annotations

import argparse
import json

import numpy as np


def main(argv: list[str] | None = None) -> int:
    """Run single candidate evaluation.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success, 2 = invalid input).
    """
    from ..core.registry import list_models

    parser = argparse.ArgumentParser(description="Evaluate a single design vector")
    parser.add_argument("--model", type=str, required=True, choices=list_models(), help="Model key")
    parser.add_argument("--config", type=str, default=None, help="YAML configuration file")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (with --random)")
    parser.add_argument("--x", type=str, default=None, help="Candidate vector as JSON array")
    parser.add_argument("--random", action="store_true", help="Use random candidate")

    args = parser.parse_args(argv)

    from ..core.config import default_config, load_config
    from ..core.encoding import InvalidInputError
    from ..core.evaluator import evaluate_candidate
    from ..core.logging import get_logger
    from ..core.registry import get_model

    logger = get_logger(__name__)
    config = load_config(args.config) if args.config else default_config()
    spec = get_model(args.model)

    # Get candidate
    if args.x is not None:
        x = np.array(json.loads(args.x), dtype=np.float64)
    elif args.random:
        rng = np.random.default_rng(args.seed)
        x = spec.random_candidate(rng)
    else:
        x = spec.mid_bounds_candidate()

    try:
        result = evaluate_candidate(x, spec, config.fixed_data(spec.name))
    except InvalidInputError as exc:
        logger.error("invalid design vector", model=spec.name, error=str(exc))
        return 2

    # Format output
    output = {
        "model": spec.name,
        "x": x.tolist(),
        "F": result.F.tolist(),
        "G": result.G.tolist(),
        "objective_names": spec.objective_names,
        "constraint_names": spec.constraint_names,
        "is_feasible": result.is_feasible,
        "max_violation": result.max_violation,
        "metrics": result.diag.get("metrics", {}),
        "timings": result.diag.get("timings", {}),
    }

    print(json.dumps(output, indent=2, default=float))

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
