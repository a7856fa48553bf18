"""
Health Monitoring Application Layer

Commands: RecordAnalysisCommand
Queries: ListAnalysesQuery, GetLatestAnalysisQuery
"""
