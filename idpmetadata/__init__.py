from idpmetadata.exceptions import BadConfiguration, IdpMetadataError, MetadataParseError  # noqa: F401
from idpmetadata.loaders import fetch_idp_metadata, load_idps  # noqa: F401
from idpmetadata.mapper import map_idp_metadata, whitelist_idp_metadata  # noqa: F401
from idpmetadata.parser import IdpMetadataParser, parse_idp_metadata  # noqa: F401
from idpmetadata.utils import IdpEntityDescriptor  # noqa: F401
from idpmetadata.validators import IdpEntityDescriptorValidator  # noqa: F401
