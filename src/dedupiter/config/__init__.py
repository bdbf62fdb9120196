from .pipeline import StepConfig, StreamPipelineConfig, load_pipeline_config
from .resolution import LogLevelDecision, configure_logging, resolve_log_level

__all__ = [
    "LogLevelDecision",
    "StepConfig",
    "StreamPipelineConfig",
    "configure_logging",
    "load_pipeline_config",
    "resolve_log_level",
]
