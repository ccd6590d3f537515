# -*- coding: utf-8 -*-
import requests

from idpmetadata import log
from idpmetadata.mapper import map_idp_metadata
from idpmetadata.parser import IdpMetadataParser
from idpmetadata.validators import IdpEntityDescriptorValidator

logger = log.logger


def fetch_idp_metadata(url, timeout=None):
    """
    Downloads the IdP metadata document.

    Errors raised by requests (connection errors, HTTP error statuses)
    are left to the caller.
    """
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.text


class IdpMetadataHTTPLoader(object):
    """
    Loads IdP metadata from an HTTP URL.

    Args:
        timeout (float): Seconds to wait for the server.
    """

    def __init__(self, timeout=None):
        self._timeout = timeout

    def load(self, location):
        xml = fetch_idp_metadata(location, timeout=self._timeout)
        logger.debug("Loaded IdP metadata from '{}`".format(location))
        return xml


class IdpMetadataFileLoader(object):
    """
    Loads IdP metadata from a local file.
    """

    def load(self, location):
        with open(location, 'rb') as fp:
            xml = fp.read()
        logger.debug("Loaded IdP metadata from '{}`".format(location))
        return xml


def get_loader(conf):
    if conf.is_remote:
        return IdpMetadataHTTPLoader(conf.timeout)
    return IdpMetadataFileLoader()


def load_idps(conf, loader=None, parser=None):
    """
    Loads, parses and whitelists the IdP metadata described by conf.

    Args:
        conf (Config): The configuration.
        loader: Object exposing load(location) -> str or bytes. Defaults to
            the loader matching the configured source.
        parser: Object exposing parse(xml) -> list of IdpEntityDescriptor.

    Returns:
        A dict of { key: IdpEntityDescriptor }.

    Raises:
        MetadataParseError: If the document cannot be parsed.
    """
    loader = loader or get_loader(conf)
    parser = parser or IdpMetadataParser(
        validator=IdpEntityDescriptorValidator(conf.require_certificate)
    )
    xml = loader.load(conf.metadata_location)
    descriptors = parser.parse(xml)
    logger.debug(
        'Found {} valid md:EntityDescriptor in {}'.format(
            len(descriptors), conf.metadata_location
        )
    )
    return map_idp_metadata(descriptors, conf.idps)
