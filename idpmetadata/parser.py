# -*- coding: utf-8 -*-
from collections import namedtuple

from lxml import etree

from idpmetadata import log
from idpmetadata.exceptions import MetadataParseError
from idpmetadata.settings import (
    ENTITY_DESCRIPTOR_TAG, ENTITY_ID_ATTR, LOCATION_ATTR, SINGLE_LOGOUT_SERVICE_TAG, SINGLE_SIGN_ON_SERVICE_TAG,
    X509_CERTIFICATE_TAG,
)
from idpmetadata.utils import find_all, find_first, get_attribute, strip_whitespace, text_content
from idpmetadata.validators import IdpEntityDescriptorValidator, ValidationDetail, format_details

ParsedMetadata = namedtuple('ParsedMetadata', ['descriptors', 'rejected'])

RejectedDescriptor = namedtuple('RejectedDescriptor', ['index', 'entity_id', 'details'])


def _build_xml_parser(encoding=None):
    return etree.XMLParser(
        encoding=encoding,
        recover=True,
        resolve_entities=False,
        no_network=True,
    )


class IdpMetadataParser(object):
    """
    Extracts the Identity Providers described by a SAML2 metadata document.

    Every md:EntityDescriptor is decoded on its own: a broken descriptor is
    reported and skipped, the others are returned in document order.

    Args:
        validator: Object exposing decode(data) -> DecodeResult.
        logger: Where rejected descriptors are reported.
    """

    def __init__(self, validator=None, logger=None):
        self._validator = validator or IdpEntityDescriptorValidator()
        self._logger = logger or log.logger

    def parse(self, xml):
        """
        Args:
            xml (str or bytes): The metadata document.

        Returns:
            A list of IdpEntityDescriptor.

        Raises:
            MetadataParseError: If the document cannot be parsed at all.
        """
        result = self.collect(xml)
        for rejected in result.rejected:
            self._logger.warning(
                'Invalid md:EntityDescriptor [%s]. %s',
                rejected.entity_id, format_details(rejected.details)
            )
        return result.descriptors

    def collect(self, xml):
        """
        Same as parse() but nothing is logged: rejected descriptors are
        returned together with the valid ones.

        Returns:
            A ParsedMetadata instance.
        """
        root = self._parse_xml(xml)
        descriptors = []
        rejected = []
        for index, element in enumerate(find_all(root, ENTITY_DESCRIPTOR_TAG)):
            result = self._validator.decode(self._extract(element))
            if result.is_valid:
                descriptors.append(result.value)
            else:
                rejected.append(
                    RejectedDescriptor(index, element.get(ENTITY_ID_ATTR), result.errors)
                )
        return ParsedMetadata(descriptors, rejected)

    def _parse_xml(self, xml):
        if isinstance(xml, str):
            xml = xml.encode('utf-8')
            parser = _build_xml_parser('utf-8')
        else:
            parser = _build_xml_parser()
        try:
            root = etree.fromstring(xml, parser=parser)
        except SyntaxError:
            root = None
        if root is None:
            self._fail(parser.error_log)
        return root

    @staticmethod
    def _fail(error_log):
        raise MetadataParseError([
            ValidationDetail(None, err.line, err.column, err.domain_name,
                             err.type_name, err.message, err.path)
            for err in error_log
        ])

    @staticmethod
    def _extract(element):
        certificates = [
            strip_whitespace(text_content(cert))
            for cert in find_all(element, X509_CERTIFICATE_TAG)
        ]
        return {
            'certificates': certificates,
            'entity_id': element.get(ENTITY_ID_ATTR),
            'entry_point': get_attribute(
                find_first(element, SINGLE_SIGN_ON_SERVICE_TAG), LOCATION_ATTR
            ),
            'logout_url': get_attribute(
                find_first(element, SINGLE_LOGOUT_SERVICE_TAG), LOCATION_ATTR
            ),
        }


def parse_idp_metadata(xml, validator=None):
    """
    Parses a SAML2 metadata document into a list of IdpEntityDescriptor.
    """
    return IdpMetadataParser(validator=validator).parse(xml)
