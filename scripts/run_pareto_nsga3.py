#!/usr/bin/env python3
"""Run a 3-objective heat exchanger Pareto optimization using NSGA-III.

Objectives (dual_hx_18 / dual_hx_11):
1. Weight (minimize)
2. Heat transfer (maximize -> minimize negative)
3. Pressure drop (minimize)

Uses NSGA-III with Das-Dennis reference directions.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from engopt.adapters.optimize import optimize_model
from engopt.core.config import OptimizationConfig
from engopt.core.evaluator import evaluate_candidate


def main():
    parser = argparse.ArgumentParser(description="Run 3-obj NSGA-III heat exchanger optimization")
    parser.add_argument("--model", type=str, default="dual_hx_18", choices=["dual_hx_18", "dual_hx_11"])
    parser.add_argument("--pop", type=int, default=100, help="Population size")
    parser.add_argument("--gen", type=int, default=50, help="Number of generations")
    parser.add_argument("--seed", type=int, default=1, help="Random seed")
    parser.add_argument("--outdir", type=str, default="results_nsga3", help="Output directory")
    parser.add_argument("--partitions", type=int, default=12, help="Ref dir partitions")

    args = parser.parse_args()

    opt = OptimizationConfig(
        pop_size=args.pop,
        n_gen=args.gen,
        seed=args.seed,
        algorithm="nsga3",
        n_partitions=args.partitions,
    )

    print(f"Starting NSGA-III run: model={args.model}, pop={args.pop}, gen={args.gen}")
    pareto, problem = optimize_model(args.model, config=opt)

    output_dir = Path(args.outdir)
    output_dir.mkdir(parents=True, exist_ok=True)

    rows = []
    for x in pareto.X:
        res = evaluate_candidate(x, problem.spec, problem.cfg)
        m = res.diag["metrics"]
        rows.append(
            {
                "heat_transfer_W": m["heat_transfer"],
                "weight_kg": m["weight"],
                "pressure_drop_Pa": m["pressure_drop"],
                "feasible": res.is_feasible,
            }
        )

    with open(output_dir / "pareto_metrics.json", "w") as f:
        json.dump(rows, f, indent=2)

    summary = {
        "config": vars(args),
        "metrics": {
            "total_time_s": pareto.elapsed_s,
            "n_evals": problem.n_evals,
            "n_pareto": pareto.n_solutions,
            "n_feasible": int(pareto.feasible_mask.sum()),
        },
        "objectives_min": pareto.F.min(axis=0).tolist() if pareto.n_solutions else [],
        "objectives_max": pareto.F.max(axis=0).tolist() if pareto.n_solutions else [],
    }
    with open(output_dir / "run_summary.json", "w") as f:
        json.dump(summary, f, indent=2)

    print(f"Run complete in {pareto.elapsed_s:.2f}s. Results in {output_dir}/")
    if pareto.n_solutions:
        F = pareto.F
        print(f"Pareto size: {pareto.n_solutions}")
        print(f"Weight range: {F[:, 0].min():.2f} to {F[:, 0].max():.2f}")
        print(f"Heat range: {-F[:, 1].max():.0f} to {-F[:, 1].min():.0f} W")
        print(f"Pressure drop range: {F[:, 2].min():.1f} to {F[:, 2].max():.1f}")


if __name__ == "__main__":
    main()
