class IdpMetadataError(Exception):
    """Base exception class"""


class BadConfiguration(IdpMetadataError):
    pass


class MetadataParseError(IdpMetadataError):
    """The metadata document cannot be parsed at all."""

    def __init__(self, details):
        super(MetadataParseError, self).__init__(
            '; '.join(detail.message for detail in details) or 'unparsable metadata'
        )
        self.details = details
