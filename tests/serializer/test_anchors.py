"""Tests for anchor planning."""

import pytest

from yamlgraph import AnchorPlanner, AnchorTable, ScalarNode, SequenceNode, MappingNode


STR = 'tag:yaml.org,2002:str'
SEQ = 'tag:yaml.org,2002:seq'
MAP = 'tag:yaml.org,2002:map'


class TestAnchorTable:
    """Identity-keyed anchor table."""

    def test_states(self, scalar):
        table = AnchorTable()
        node = scalar('x')
        assert node not in table
        assert table.get(node) is None
        table.visit(node)
        assert node in table
        assert table[node] is None
        table.label(node, 'id0001')
        assert table[node] == 'id0001'
        assert table.labels() == ['id0001']

    def test_identity_not_equality(self, scalar):
        """Equal-looking nodes are different keys."""
        table = AnchorTable()
        first = scalar('x')
        second = scalar('x')
        table.visit(first)
        assert first in table
        assert second not in table
        assert len(table) == 1

    def test_missing_key(self, scalar):
        with pytest.raises(KeyError):
            AnchorTable()[scalar('x')]


class TestAnchorPlanner:
    """Second visits get labels; first visits do not."""

    def test_tree_has_no_anchors(self, scalar, sequence, mapping):
        leaves = [scalar('a'), scalar('b'), scalar('c')]
        root = mapping([(leaves[0], sequence([leaves[1], leaves[2]]))])
        table = AnchorPlanner().plan(root)
        assert len(table) == 5
        assert table.labels() == []
        for node in leaves + [root]:
            assert node in table
            assert table[node] is None

    def test_label_on_second_visit(self, scalar, sequence):
        item = scalar('x')
        root = sequence([item, item, item])
        planner = AnchorPlanner()
        table = planner.plan(root)
        assert table[item] == 'id0001'
        assert table[root] is None
        assert planner.last_anchor_id == 1

    def test_cycle_terminates(self, scalar):
        root = MappingNode(MAP, [])
        root.value.append((scalar('self'), root))
        table = AnchorPlanner().plan(root)
        assert table[root] == 'id0001'

    def test_deep_cycle(self):
        """A cycle closing several levels down labels only the re-entered node."""
        top = SequenceNode(SEQ, [])
        node = top
        chain = [top]
        for _ in range(10):
            child = SequenceNode(SEQ, [])
            node.value.append(child)
            chain.append(child)
            node = child
        node.value.append(top)
        table = AnchorPlanner().plan(top)
        assert table[top] == 'id0001'
        assert [table[n] for n in chain[1:]] == [None] * 10

    def test_shared_subtree_not_redescended(self, scalar, sequence):
        """Children of a shared node are only visited along the first path."""
        leaf = scalar('leaf')
        shared = sequence([leaf])
        root = sequence([shared, shared])
        table = AnchorPlanner().plan(root)
        assert table[shared] == 'id0001'
        assert table[leaf] is None

    def test_labels_in_detection_order(self, scalar, sequence):
        a, b, c = scalar('a'), scalar('b'), scalar('c')
        root = sequence([a, b, c, c, b, a])
        table = AnchorPlanner().plan(root)
        assert table.labels() == ['id0001', 'id0002', 'id0003']
        assert (table[c], table[b], table[a]) == ('id0001', 'id0002', 'id0003')

    def test_counter_restarts_per_plan(self, scalar, sequence):
        item = scalar('x')
        root = sequence([item, item])
        planner = AnchorPlanner()
        assert planner.plan(root)[item] == 'id0001'
        assert planner.plan(root)[item] == 'id0001'

    def test_anchor_format(self, scalar, sequence):
        item = scalar('x')
        table = AnchorPlanner('anchor_%d').plan(sequence([item, item]))
        assert table[item] == 'anchor_1'

    def test_ignore_anchor_callable(self, scalar, sequence):
        """Exempt nodes are never labelled but their children are planned."""
        leaf = scalar('leaf')
        exempt = sequence([leaf, leaf])
        root = sequence([exempt, exempt])
        planner = AnchorPlanner(ignore_anchor=lambda node: node is exempt)
        table = planner.plan(root)
        assert exempt not in table
        assert table[leaf] == 'id0001'
        assert planner.last_anchor_id == 1

    def test_ignore_anchor_subclass(self, scalar, sequence):

        class NoScalarAnchors(AnchorPlanner):
            def ignore_anchor(self, node):
                return isinstance(node, ScalarNode)

        item = scalar('x')
        table = NoScalarAnchors().plan(sequence([item, item]))
        assert item not in table
        assert table.labels() == []
