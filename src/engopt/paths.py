from pathlib import Path

# Calculate repository root relative to this file
# src/engopt/paths.py -> src/engopt -> src -> ROOT
REPO_ROOT = Path(__file__).resolve().parent.parent.parent

# Canonical directories
OUTPUT_DIR = REPO_ROOT / "outputs"
