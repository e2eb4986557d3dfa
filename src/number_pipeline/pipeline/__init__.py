"""
Pipeline Package - Run Orchestration.

Components:
    - NumberPipeline: Reads, filters and fans out to observers
    - execute: Resolves the filter name first, then runs the pipeline

Design Principles:
    - All dependencies injected via constructor
    - Registry errors end the run before any read
    - Source errors degrade to a run over zero numbers
"""

from number_pipeline.pipeline.number_pipeline import NumberPipeline, execute

__all__ = [
    "NumberPipeline",
    "execute",
]
