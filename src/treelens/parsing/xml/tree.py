"""
XML Tree Builder.

Reduces the token stream to a nested tree using a single stack of open
ancestors. Mismatched close tags are ignored rather than searched for, so
overlapping markup nests whatever follows under the still-open element.

When a ``style`` element closes, its text is parsed as CSS and the element's
children are replaced by css-rule nodes, each owning css-prop nodes.
"""

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Dict, List, Union

from ...config import ROOT_ID, is_void_tag
from ..css.parser import CssRoot, parse_css
from .attributes import parse_attributes
from .tokenizer import TokenType, XmlToken, tokenize_xml

logger = logging.getLogger(__name__)


class XmlNodeType(StrEnum):
    ROOT = "root"
    ELEMENT = "element"
    TEXT = "text"
    CSS_RULE = "css-rule"
    CSS_PROP = "css-prop"


@dataclass
class XmlTreeNode:
    tag: str
    type: XmlNodeType = XmlNodeType.ELEMENT
    attrs: Dict[str, str] = field(default_factory=dict)
    children: List[Union["XmlTreeNode", str]] = field(default_factory=list)
    # Declared value, css-prop nodes only
    css_value: str | None = None

    @property
    def elements(self) -> List["XmlTreeNode"]:
        return [c for c in self.children if isinstance(c, XmlTreeNode)]

    @property
    def texts(self) -> List[str]:
        return [c for c in self.children if isinstance(c, str)]


def css_nodes(css_root: CssRoot) -> List[XmlTreeNode]:
    """Convert parsed CSS rules into css-rule / css-prop tree nodes."""
    return [
        XmlTreeNode(
            tag=rule.selector,
            type=XmlNodeType.CSS_RULE,
            children=[
                XmlTreeNode(tag=decl.prop, type=XmlNodeType.CSS_PROP, css_value=decl.val)
                for decl in rule.properties
            ],
        )
        for rule in css_root.rules
    ]


def _element(token: XmlToken) -> XmlTreeNode:
    return XmlTreeNode(tag=token.name or "unknown", attrs=parse_attributes(token.attrs))


def build_xml_tree(tokens: List[XmlToken]) -> XmlTreeNode:
    """
    Build a tree from tokens.

    Args:
        tokens: Output of tokenize_xml.

    Returns:
        Synthetic root whose children are the top-level document nodes.
    """
    root = XmlTreeNode(tag=ROOT_ID, type=XmlNodeType.ROOT)
    stack: List[XmlTreeNode] = [root]

    for token in tokens:
        parent = stack[-1]

        if token.type == TokenType.OPEN:
            node = _element(token)
            parent.children.append(node)
            if not is_void_tag(token.name):
                stack.append(node)

        elif token.type == TokenType.CLOSE:
            if len(stack) > 1 and parent.tag == token.name:
                if parent.tag.lower() == "style":
                    stylesheet = "".join(parent.texts)
                    parent.children = css_nodes(parse_css(stylesheet))
                stack.pop()
            else:
                logger.debug(f"Ignoring unmatched close tag </{token.name}>")

        elif token.type == TokenType.SELF_CLOSING:
            parent.children.append(_element(token))

        elif token.type in (TokenType.TEXT, TokenType.CDATA):
            if token.content.strip():
                parent.children.append(token.content)

        # Comments, processing instructions and doctypes are not represented

    return root


def parse_xml(source: str) -> XmlTreeNode:
    """Tokenize and build in one step."""
    return build_xml_tree(tokenize_xml(source))
