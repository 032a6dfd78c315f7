"""Anchor planning.

Before a document is emitted, every node reachable from its root is visited
once in depth-first pre-order. A node reached a second time is shared (or
closes a cycle) and receives an anchor label; the label has to be known
before the node's first full expansion, which is why planning runs to
completion before emission starts.
"""

import logging

from yamlgraph.config import DEFAULT_ANCHOR_FORMAT
from yamlgraph.nodes import CollectionNode

logger = logging.getLogger(__name__)


class AnchorTable:
    """Identity-keyed map from node to anchor label.

    A node that is absent has not been visited. A node mapped to None has
    been visited once. A node mapped to a string is shared.
    """

    def __init__(self):
        self._labels = {}
        # Holding the nodes keeps their id() values from being reused.
        self._nodes = {}
        self._order = []

    def __contains__(self, node):
        return id(node) in self._labels

    def __getitem__(self, node):
        return self._labels[id(node)]

    def __len__(self):
        return len(self._labels)

    def get(self, node, default=None):
        return self._labels.get(id(node), default)

    def visit(self, node):
        """Record the first visit of ``node``."""
        self._labels[id(node)] = None
        self._nodes[id(node)] = node

    def label(self, node, label):
        """Assign ``label`` to a previously visited node."""
        self._labels[id(node)] = label
        self._order.append(label)

    def labels(self):
        """Labels in the order they were assigned."""
        return list(self._order)


class AnchorPlanner:
    """Builds the AnchorTable for one document.

    ``ignore_anchor`` may be given as a callable, or overridden in a
    subclass, to exempt nodes from ever receiving an anchor.
    """

    def __init__(self, anchor_format=DEFAULT_ANCHOR_FORMAT, ignore_anchor=None):
        self.anchor_format = anchor_format
        if ignore_anchor is not None:
            self.ignore_anchor = ignore_anchor
        self.last_anchor_id = 0

    def ignore_anchor(self, node):
        return False

    def plan(self, root):
        anchors = AnchorTable()
        self.last_anchor_id = 0
        self._anchor_node(root, anchors, set())
        return anchors

    def generate_anchor(self, node):
        self.last_anchor_id += 1
        anchor = self.anchor_format % self.last_anchor_id
        logger.debug(f"Anchor {anchor} assigned to shared {node.id} node")
        return anchor

    def _anchor_node(self, node, anchors, exempt_seen):
        if self.ignore_anchor(node):
            # Exempt nodes never get a label; their children are planned once.
            if id(node) in exempt_seen:
                return
            exempt_seen.add(id(node))
        elif node in anchors:
            if anchors[node] is None:
                anchors.label(node, self.generate_anchor(node))
            return
        else:
            anchors.visit(node)
        if isinstance(node, CollectionNode):
            for child in node.children():
                self._anchor_node(child, anchors, exempt_seen)
