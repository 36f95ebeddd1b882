# chancellor/assets/importers/structured.py
import json
import xml.etree.ElementTree as ET
from typing import Any, Dict

from chancellor.assets.importers.base import AssetImporter
from chancellor.assets.importers.text import decode_utf8
from chancellor.assets.types import JsonResource, XmlResource


class JsonImporter(AssetImporter):
    def decode(self, path: str, data: bytes) -> JsonResource:
        return JsonResource(path=path, value=json.loads(decode_utf8(data)))


class XmlImporter(AssetImporter):
    """
    Parses XML into plain dicts / lists / strings:

        <item id="3"><name>Sword</name><tag>a</tag><tag>b</tag></item>

    becomes

        {"item": {"@id": "3", "name": "Sword", "tag": ["a", "b"]}}

    Text around child elements is joined with single spaces under "#text";
    its position relative to the children is not kept.
    """

    def decode(self, path: str, data: bytes) -> XmlResource:
        # ElementTree reads the encoding from the XML declaration itself.
        root = ET.fromstring(data)
        return XmlResource(path=path, value={root.tag: element_to_tree(root)})


def element_to_tree(element: ET.Element) -> Any:
    children = list(element)
    # Mixed content: text before the first child and after each one.
    pieces = [element.text] + [child.tail for child in children]
    text = " ".join(p.strip() for p in pieces if p and p.strip())

    if not element.attrib and not children:
        return text or None

    node: Dict[str, Any] = {f"@{k}": v for k, v in element.attrib.items()}

    for child in children:
        value = element_to_tree(child)
        if child.tag not in node:
            node[child.tag] = value
        elif isinstance(node[child.tag], list):
            node[child.tag].append(value)
        else:
            node[child.tag] = [node[child.tag], value]

    if text:
        node["#text"] = text

    return node
