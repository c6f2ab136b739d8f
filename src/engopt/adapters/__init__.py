"""Adapters to external optimizers.

Note: pymoo is imported by the submodules only, so ``engopt.core`` and the
models stay usable without it.
"""
