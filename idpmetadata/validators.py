# -*- coding: utf-8 -*-
from collections import namedtuple

from voluptuous import All, Length, MultipleInvalid, Required, Schema, Url

from idpmetadata.settings import (
    EMPTY_CERTIFICATE_ERROR, EMPTY_VALUE_ERROR, MANDATORY_ERROR, NO_CERTIFICATE_ERROR, URL_ERROR,
)
from idpmetadata.utils import IdpEntityDescriptor

ValidationDetail = namedtuple(
    'ValidationDetail',
    ['value', 'line', 'column', 'domain_name', 'type_name', 'message', 'path']
)


class DecodeResult(namedtuple('DecodeResult', ['value', 'errors'])):
    """
    Outcome of decoding raw descriptor data: either a value with no errors
    or no value and a list of ValidationDetail.
    """

    __slots__ = ()

    @property
    def is_valid(self):
        return not self.errors


def format_details(details):
    return ' / '.join(
        '{}: {}'.format(detail.path, detail.message) if detail.path else detail.message
        for detail in details
    )


class IdpEntityDescriptorValidator(object):
    """
    Decodes the data extracted from an md:EntityDescriptor into an
    IdpEntityDescriptor.

    Args:
        require_certificate (bool): When true a descriptor needs at least one
            ds:X509Certificate and none of them can be empty.
    """

    _sources = {
        'entity_id': 'md:EntityDescriptor - attribute: entityID',
        'entry_point': 'md:SingleSignOnService - attribute: Location',
        'logout_url': 'md:SingleLogoutService - attribute: Location',
        'certificates': 'ds:X509Certificate',
    }

    def __init__(self, require_certificate=False, record_class=None):
        self._require_certificate = require_certificate
        self._record_class = record_class or IdpEntityDescriptor
        self._init_schema()

    def _init_schema(self):
        url = All(
            str,
            Length(min=1, msg=EMPTY_VALUE_ERROR),
            Url(msg=URL_ERROR),
        )
        self._schema = Schema({
            Required('entity_id', msg=MANDATORY_ERROR): All(
                str, Length(min=1, msg=EMPTY_VALUE_ERROR)
            ),
            Required('entry_point', msg=MANDATORY_ERROR): url,
            Required('logout_url', msg=MANDATORY_ERROR): url,
            Required('certificates', msg=MANDATORY_ERROR): self._certificates_schema(),
        })

    def _certificates_schema(self):
        if not self._require_certificate:
            return [str]
        return All(
            [All(str, Length(min=1, msg=EMPTY_CERTIFICATE_ERROR))],
            Length(min=1, msg=NO_CERTIFICATE_ERROR),
        )

    def decode(self, data):
        """
        Args:
            data (dict): entity_id, entry_point, logout_url and certificates,
                with None standing for a missing attribute or element.

        Returns:
            A DecodeResult.
        """
        present = {k: v for k, v in data.items() if v is not None}
        try:
            validated = self._schema(present)
        except MultipleInvalid as e:
            return DecodeResult(None, self._build_errors(present, e.errors))
        return DecodeResult(self._build_record(validated), [])

    def _build_record(self, validated):
        return self._record_class(
            entity_id=validated['entity_id'],
            entry_point=validated['entry_point'],
            logout_url=validated['logout_url'],
            certificates=tuple(validated['certificates']),
        )

    def _build_errors(self, data, errors):
        details = []
        for err in errors:
            _val = data
            for _ in err.path:
                try:
                    _val = _val[_]
                except (KeyError, IndexError, TypeError):
                    _val = None
            _paths = [str(_path) for _path in err.path]
            if _paths:
                _paths[0] = self._sources.get(_paths[0], _paths[0])
            path = '/'.join(_paths)
            details.append(
                ValidationDetail(_val, None, None, None, None, err.msg, path)
            )
        return details
