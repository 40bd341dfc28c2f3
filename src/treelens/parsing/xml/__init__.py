from .attributes import RawAttribute, parse_attributes, split_attributes
from .tokenizer import TokenType, XmlToken, tokenize_xml
from .tree import XmlNodeType, XmlTreeNode, build_xml_tree, css_nodes, parse_xml

__all__ = [
    "RawAttribute",
    "TokenType",
    "XmlNodeType",
    "XmlToken",
    "XmlTreeNode",
    "build_xml_tree",
    "css_nodes",
    "parse_attributes",
    "parse_xml",
    "split_attributes",
    "tokenize_xml",
]
