from use_cases.metric.create_metric_use_case import CreateMetricUseCase
from use_cases.metric.get_component_metrics_use_case import GetComponentMetricsUseCase

__all__ = [
    "CreateMetricUseCase",
    "GetComponentMetricsUseCase",
]
