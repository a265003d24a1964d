class RowParseError(Exception):
    """The uploaded file could not be read as a table."""


class EnrichmentError(Exception):
    """Enrichment of a single company failed."""


class ServiceError(EnrichmentError):
    pass


class NoJsonFound(EnrichmentError):
    pass


class MalformedJson(EnrichmentError):
    pass
