from .insight import AiInsight
from .prediction import Milestone, PredictionPoint, PredictionResult
from .records import BodyProfile, WeightRecord, WeightRecordsResponse
from .stats import Granularity, PeriodChange, SmoothedRecord, StatGroup, WeekdayStat
from .summary import BmiCategory, TimeRange, WeightSummary

__all__ = [
    'AiInsight',
    'BmiCategory',
    'BodyProfile',
    'Granularity',
    'Milestone',
    'PeriodChange',
    'PredictionPoint',
    'PredictionResult',
    'SmoothedRecord',
    'StatGroup',
    'TimeRange',
    'WeekdayStat',
    'WeightRecord',
    'WeightRecordsResponse',
    'WeightSummary',
]
