class MappingError(ValueError):
    pass


class UnknownMappingsError(LookupError):
    pass
