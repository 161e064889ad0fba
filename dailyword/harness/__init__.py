from .core import run_case, run_batch, sample_targets
from .io import write_csv, write_manifest

__all__ = ["run_case", "run_batch", "sample_targets", "write_csv", "write_manifest"]
