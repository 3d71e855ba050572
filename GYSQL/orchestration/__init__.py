"""Pipeline orchestration."""

from .pipeline import PipelineResult, run_pipeline

__all__ = ["PipelineResult", "run_pipeline"]
