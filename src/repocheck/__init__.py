from .dsl import drift, matrix, pipeline, sh
from .model import Step
from .runner import StepFailure, run_pipeline, run_step

__all__ = ["drift", "matrix", "pipeline", "sh", "Step", "StepFailure", "run_pipeline", "run_step"]
