# -*- coding: utf-8 -*-
import unittest
from unittest.mock import Mock

from idpmetadata.mapper import map_idp_metadata, whitelist_idp_metadata
from idpmetadata.utils import IdpEntityDescriptor


def _descriptor(entity_id, entry_point='https://idp/sso'):
    return IdpEntityDescriptor(entity_id, entry_point, 'https://idp/slo', ('CERT',))


class MapIdpMetadataTestCase(unittest.TestCase):

    def test_whitelisted(self):
        idp1 = _descriptor('idp1')
        idp2 = _descriptor('idp2')
        mapping = map_idp_metadata([idp1, idp2], {'idp1': 'provA', 'idp2': 'provB'})
        self.assertEqual(mapping, {'provA': idp1, 'provB': idp2})

    def test_last_write_wins(self):
        first = _descriptor('idp1', 'https://idp/first')
        second = _descriptor('idp1bis', 'https://idp/second')
        mapping = map_idp_metadata([first, second], {'idp1': 'k', 'idp1bis': 'k'})
        self.assertEqual(mapping, {'k': second})

    def test_duplicate_entity_ids(self):
        first = _descriptor('idp1', 'https://idp/first')
        second = _descriptor('idp1', 'https://idp/second')
        mapping = map_idp_metadata([first, second], {'idp1': 'k'})
        self.assertIs(mapping['k'], second)

    def test_unsupported_idp(self):
        idp1 = _descriptor('idp1')
        unknown = _descriptor('unknown')
        with self.assertLogs('idpmetadata', level='WARNING') as cm:
            mapping = map_idp_metadata([idp1, unknown], {'idp1': 'provA'})
        self.assertEqual(mapping, {'provA': idp1})
        self.assertEqual(len(cm.output), 1)
        self.assertIn('[unknown]', cm.output[0])

    def test_empty_key_is_unsupported(self):
        mapping, unsupported = whitelist_idp_metadata(
            [_descriptor('idp1')], {'idp1': ''}
        )
        self.assertEqual(mapping, {})
        self.assertEqual(unsupported, ['idp1'])

    def test_unsupported_in_input_order(self):
        mapping, unsupported = whitelist_idp_metadata(
            [_descriptor('a'), _descriptor('b'), _descriptor('c')], {'b': 'B'}
        )
        self.assertEqual(list(mapping), ['B'])
        self.assertEqual(unsupported, ['a', 'c'])

    def test_injected_logger(self):
        logger = Mock()
        map_idp_metadata([_descriptor('a'), _descriptor('b')], {}, logger=logger)
        self.assertEqual(logger.warning.call_count, 2)

    def test_fresh_mapping(self):
        descriptors = [_descriptor('idp1')]
        whitelist = {'idp1': 'provA'}
        first = map_idp_metadata(descriptors, whitelist)
        second = map_idp_metadata(descriptors, whitelist)
        self.assertIsNot(first, second)
        first.clear()
        self.assertEqual(whitelist, {'idp1': 'provA'})
        self.assertEqual(len(second), 1)

    def test_empty_input(self):
        self.assertEqual(map_idp_metadata([], {'idp1': 'provA'}), {})
