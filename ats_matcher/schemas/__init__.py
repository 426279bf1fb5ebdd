from .analysis import (
    AnalysisDetails,
    AnalysisOptions,
    AnalysisReport,
    AnalysisResult,
    AnalyzeRequest,
    ExtractTextResponse,
)

__all__ = [
    "AnalysisOptions",
    "AnalysisDetails",
    "AnalysisResult",
    "AnalysisReport",
    "AnalyzeRequest",
    "ExtractTextResponse",
]
