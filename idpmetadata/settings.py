# -*- coding: utf-8 -*-

# Metadata tags (prefixed, as published by the SPID registry)

ENTITY_DESCRIPTOR_TAG = 'md:EntityDescriptor'
X509_CERTIFICATE_TAG = 'ds:X509Certificate'
SINGLE_SIGN_ON_SERVICE_TAG = 'md:SingleSignOnService'
SINGLE_LOGOUT_SERVICE_TAG = 'md:SingleLogoutService'

ENTITY_ID_ATTR = 'entityID'
LOCATION_ATTR = 'Location'

################

# SPID registry

SPID_METADATA_URL = 'https://registry.spid.gov.it/metadata/idp/spid-entities-idps.xml'

SPID_IDP_IDENTIFIERS = {
    'https://id.lepida.it/idp/shibboleth': 'lepidaid',
    'https://identity.infocert.it': 'infocertid',
    'https://identity.sieltecloud.it': 'sielteid',
    'https://idp.namirialtsp.com/idp': 'namirialid',
    'https://login.id.tim.it/affwebservices/public/saml2sso': 'timid',
    'https://loginspid.aruba.it': 'arubaid',
    'https://posteid.poste.it': 'posteid',
    'https://spid.intesa.it': 'intesaid',
    'https://spid.register.it': 'spiditalia',
}

################

# Validation errors

MANDATORY_ERROR = 'the attribute is mandatory'
EMPTY_VALUE_ERROR = 'the value must not be empty'
URL_ERROR = 'the value is not a valid URL'
NO_CERTIFICATE_ERROR = 'at least one ds:X509Certificate is required'
EMPTY_CERTIFICATE_ERROR = 'the certificate must not be empty'

########

# Misc
HTTP_TIMEOUT = 10  # seconds
