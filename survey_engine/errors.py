"""Errors raised by the engine's collaborators. The decision pipeline itself never raises."""


class SurveyEngineError(Exception):
    """Base class for survey engine errors."""


class SurveyCatalogError(SurveyEngineError):
    """Survey definitions could not be fetched or decoded."""
