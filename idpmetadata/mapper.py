# -*- coding: utf-8 -*-
from idpmetadata import log

logger = log.logger


def whitelist_idp_metadata(descriptors, idp_ids):
    """
    Indexes the descriptors by the key idp_ids associates to their entity id.

    Args:
        descriptors (list of IdpEntityDescriptor): In metadata order.
        idp_ids (dict): entity id -> internal key.

    Returns:
        A (mapping, unsupported) tuple: mapping is a dict of
        { key: IdpEntityDescriptor } where a later descriptor replaces an
        earlier one with the same key, unsupported lists the entity ids with
        no key, in input order.
    """
    mapping = {}
    unsupported = []
    for descriptor in descriptors:
        key = idp_ids.get(descriptor.entity_id)
        if key:
            mapping[key] = descriptor
        else:
            unsupported.append(descriptor.entity_id)
    return mapping, unsupported


def map_idp_metadata(descriptors, idp_ids, logger=logger):
    mapping, unsupported = whitelist_idp_metadata(descriptors, idp_ids)
    for entity_id in unsupported:
        logger.warning(
            'Unsupported SPID idp from metadata repository [%s]', entity_id
        )
    return mapping
