class AnalysisError(Exception):
    """The analysis service could not produce a usable analysis."""


class InvalidSortSpec(ValueError):
    pass


class InvalidLimit(ValueError):
    pass
