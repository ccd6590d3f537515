# -*- coding: utf-8 -*-
import json

import yaml
from voluptuous import ALLOW_EXTRA, All, Any, Invalid, Range, Schema, Url

from idpmetadata import settings
from idpmetadata.exceptions import BadConfiguration


class ConfigValidator(object):

    def __init__(self, confdata):
        self._confdata = confdata
        self._init_schema()
        self._init_custom_validators()

    def _init_schema(self):
        self._schema = {
            'metadata_url': Url(),
            'metadata_file': str,
            'idps': {str: str},
            'require_certificate': bool,
            'timeout': All(Any(int, float), Range(min=0, min_included=False)),
            'log_file': str,
        }

    def _init_custom_validators(self):
        def check_metadata_source(data):
            sources = [
                key for key in ('metadata_url', 'metadata_file') if data.get(key)
            ]
            if len(sources) != 1:
                raise Invalid(
                    'Configuration error: exactly one of metadata_url and '
                    'metadata_file must be set'
                )
            return data

        self._custom_validators = [
            check_metadata_source,
        ]

    def validate(self):
        try:
            self._validate()
        except Invalid as e:
            self._fail(e)

    @staticmethod
    def _fail(exc):
        raise BadConfiguration(str(exc))

    def _validate(self):
        if not isinstance(self._confdata, dict):
            raise Invalid('Configuration error: expected a mapping')
        schema = Schema(
            All(self._schema, *self._custom_validators),
            extra=ALLOW_EXTRA,
        )
        schema(self._confdata)


class Config(object):

    def __init__(self, confdata):
        self._confdata = confdata

    @property
    def metadata_url(self):
        return self._confdata.get('metadata_url')

    @property
    def metadata_file(self):
        return self._confdata.get('metadata_file')

    @property
    def metadata_location(self):
        return self.metadata_url or self.metadata_file

    @property
    def is_remote(self):
        return bool(self.metadata_url)

    @property
    def idps(self):
        return dict(self._confdata.get('idps', settings.SPID_IDP_IDENTIFIERS))

    @property
    def require_certificate(self):
        return self._confdata.get('require_certificate', False)

    @property
    def timeout(self):
        return self._confdata.get('timeout', settings.HTTP_TIMEOUT)

    @property
    def log_file(self):
        return self._confdata.get('log_file')


class BaseConfigParser(object):

    def __init__(self, path):
        self._path = path
        self._fp = None

    def parse(self):
        try:
            return self._parse()
        except OSError:
            raise BadConfiguration(
                'Cannot read the configuration file: {}'.format(self._path))
        except Exception:
            raise BadConfiguration(
                'Syntax error in the configuration file: {}'.format(self._path))

    def _parse(self):
        with open(self._path, 'r') as fp:
            self._fp = fp
            return self._deserialize()


class YAMLConfigParser(BaseConfigParser):

    def _deserialize(self):
        return yaml.safe_load(self._fp)


class JSONConfigParser(BaseConfigParser):

    def _deserialize(self):
        return json.load(self._fp)


def _get_parser_class(fileformat):
    try:
        return {
            'yaml': YAMLConfigParser,
            'json': JSONConfigParser,
        }[fileformat]
    except KeyError:
        raise BadConfiguration(
            'Unknown configuration type: {}'.format(fileformat))


def load(f_name, f_type='yaml'):
    """
    Load configuration from a YAML or JSON file
    """
    parser = _get_parser_class(f_type)(f_name)
    confdata = parser.parse()
    ConfigValidator(confdata).validate()
    return Config(confdata)
