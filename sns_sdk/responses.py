"""
Parsers for SNS XML response bodies.

SNS answers every request with XML in the
``http://sns.amazonaws.com/doc/2010-03-31/`` namespace. Namespaces are
stripped on parse so elements are addressed by their local names.
"""

from typing import Dict, List, Optional
from xml.etree import ElementTree as ET


def parse_xml(body) -> ET.Element:
    """
    Parse a response body and strip namespaces from every tag.

    Args:
        body: Response body as bytes or str

    Returns:
        Root element

    Raises:
        xml.etree.ElementTree.ParseError: If the body is not well-formed XML
    """
    if isinstance(body, str):
        body = body.encode('utf-8')
    root = ET.fromstring(body)
    for element in root.iter():
        if isinstance(element.tag, str) and element.tag.startswith('{'):
            element.tag = element.tag.split('}', 1)[1]
    return root


def find_text(root: ET.Element, path: str, default: str = '') -> str:
    """Text of the element at path, or default when the element is missing or empty."""
    element = root.find(path)
    if element is None or element.text is None:
        return default
    return element.text


def members_to_list(container: Optional[ET.Element]) -> List[Dict[str, str]]:
    """
    Transform a list of <member> elements into a list of dicts.

    Each member's child tags become keys and their text the values. Members
    keep the order SNS returned them in.

    Example:
        <Topics><member><TopicArn>arn:...</TopicArn></member></Topics>
        -> [{'TopicArn': 'arn:...'}]
    """
    if container is None:
        return []
    return [
        {child.tag: child.text or '' for child in member}
        for member in container.findall('member')
    ]


def entries_to_dict(container: Optional[ET.Element]) -> Dict[str, str]:
    """
    Transform <entry><key/><value/></entry> pairs into one flat dict.

    Used by GetTopicAttributes, which does not return a member list.
    """
    if container is None:
        return {}
    attributes = {}
    for entry in container.findall('entry'):
        key = find_text(entry, 'key')
        if key:
            attributes[key] = find_text(entry, 'value')
    return attributes


def find_error(root: ET.Element) -> Optional[ET.Element]:
    """Locate an <Error> element holding both <Code> and <Message>, if any."""
    error = root if root.tag == 'Error' else root.find('.//Error')
    if error is None:
        return None
    if error.find('Code') is None or error.find('Message') is None:
        return None
    return error
