from .metrics import PipelineMetricsExporter

__all__ = ["PipelineMetricsExporter"]
