from bencomp.stats.aggregate import aggregate_results, median
from bencomp.stats.pipeline import PipelineStage, batch_time, bottleneck_stage, stage_durations

__all__ = [
    "aggregate_results",
    "median",
    "PipelineStage",
    "batch_time",
    "bottleneck_stage",
    "stage_durations",
]
