#------------------------------------------------------------
#                          errors.py
#        Exception types raised by the generator pipeline.

REMOTE_FETCH_ERROR_TEMPLATE = "Failed to fetch repos: {status} {reason}"

class StatsGeneratorError(Exception):
    pass

class ConfigurationError(StatsGeneratorError):
    pass

class RemoteFetchError(StatsGeneratorError):

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason or ""
        super().__init__(REMOTE_FETCH_ERROR_TEMPLATE.format(status=status_code, reason=self.reason).strip())

class ParseError(StatsGeneratorError):
    pass
