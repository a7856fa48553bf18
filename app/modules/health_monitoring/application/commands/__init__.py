from .analysis_commands import RecordAnalysisCommand

__all__ = ["RecordAnalysisCommand"]
