# -*- coding: utf-8 -*-
import re
from collections import namedtuple

from lxml import etree

WHITESPACE = re.compile(r'\s+')

IdpEntityDescriptor = namedtuple(
    'IdpEntityDescriptor',
    ['entity_id', 'entry_point', 'logout_url', 'certificates'],
)


def qualified_name(element):
    """
    Returns the tag of an element the way it is written in the source
    document, i.e. 'md:EntityDescriptor'.

    Elements bound to an undeclared prefix keep the whole prefixed name as
    their local name (libxml2 recovery), so both cases end up the same.
    """
    localname = element.tag.rpartition('}')[2]
    if element.prefix:
        return '{}:{}'.format(element.prefix, localname)
    return localname


def find_all(element, tag):
    """Element itself and its descendants with the given prefixed tag, in document order."""
    return [
        el for el in element.iter(tag=etree.Element)
        if qualified_name(el) == tag
    ]


def find_first(element, tag):
    for el in element.iterdescendants(tag=etree.Element):
        if qualified_name(el) == tag:
            return el
    return None


def get_attribute(element, name):
    if element is None:
        return None
    return element.get(name)


def text_content(element):
    return ''.join(element.itertext())


def strip_whitespace(value):
    return WHITESPACE.sub('', value)
