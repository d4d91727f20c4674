"""
Tests du Block Store — lecture de l'arbre, snapshots, flag dirty.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from src import Block, BlockNotFound, BlockStore, VisualBuilder


# ── Helpers ───────────────────────────────────────────────────────────────

def make_tree():
    """row → (col_a → heading, col_b) + text en racine."""
    builder = VisualBuilder()
    row = builder.add_block("row")
    col_a = builder.add_block("column", row.id)
    col_b = builder.add_block("column", row.id)
    heading = builder.add_block("heading", col_a.id)
    text = builder.add_block("text")
    return builder, row, col_a, col_b, heading, text


# ── Lecture ───────────────────────────────────────────────────────────────

class TestReads:
    def test_children_tries_par_order(self):
        store = BlockStore()
        store._insert(Block(id="b", kind="text", order=1))
        store._insert(Block(id="a", kind="text", order=0))
        store._insert(Block(id="c", kind="text", order=2))
        assert [b.id for b in store.children(None)] == ["a", "b", "c"]
        assert [b.id for b in store.roots()] == ["a", "b", "c"]

    def test_require_leve_block_not_found(self):
        with pytest.raises(BlockNotFound) as exc:
            BlockStore().require("nope")
        assert exc.value.code == "NOT_FOUND"
        assert exc.value.context == {"block_id": "nope"}

    def test_get_none(self):
        store = BlockStore()
        assert store.get(None) is None
        assert store.get("absent") is None

    def test_walk_pre_ordre_avec_profondeur(self):
        builder, row, col_a, col_b, heading, text = make_tree()
        walked = [(b.id, depth) for b, depth in builder.store.walk()]
        assert walked == [
            (row.id, 0),
            (col_a.id, 1),
            (heading.id, 2),
            (col_b.id, 1),
            (text.id, 0),
        ]

    def test_subtree_ids_racine_incluse(self):
        builder, row, col_a, col_b, heading, _ = make_tree()
        assert builder.store.subtree_ids(row.id) == [row.id, col_a.id, heading.id, col_b.id]
        assert builder.store.subtree_ids(heading.id) == [heading.id]

    def test_is_in_subtree(self):
        builder, row, col_a, col_b, heading, text = make_tree()
        store = builder.store
        assert store.is_in_subtree(heading.id, row.id)
        assert store.is_in_subtree(row.id, row.id)
        assert not store.is_in_subtree(text.id, row.id)
        assert not store.is_in_subtree(row.id, heading.id)
        assert not store.is_in_subtree(None, row.id)

    def test_ancestors(self):
        builder, row, col_a, _, heading, _ = make_tree()
        assert builder.store.ancestors(heading.id) == [col_a.id, row.id]
        assert builder.store.ancestors(row.id) == []

    def test_index_of(self):
        builder, row, col_a, col_b, _, text = make_tree()
        assert builder.store.index_of(col_b.id) == 1
        assert builder.store.index_of(text.id) == 1


# ── Snapshots ─────────────────────────────────────────────────────────────

class TestSnapshots:
    def test_snapshot_independant_du_store(self):
        builder, _, _, _, heading, _ = make_tree()
        snapshot = builder.store.snapshot()
        builder.update_block_props(heading.id, {"text": "Modifié"})

        original = next(b for b in snapshot.blocks if b.id == heading.id)
        assert original.props["text"] == "Your Heading Here"

    def test_restore_ne_partage_pas_les_objets(self):
        builder, _, _, _, heading, _ = make_tree()
        snapshot = builder.store.snapshot()
        builder.store.restore(snapshot)
        builder.store.get(heading.id).props["text"] = "muté"

        original = next(b for b in snapshot.blocks if b.id == heading.id)
        assert original.props["text"] == "Your Heading Here"


# ── Dirty ─────────────────────────────────────────────────────────────────

class TestDirty:
    def test_store_neuf_propre(self):
        assert BlockStore().dirty is False

    def test_mutation_marque_dirty_puis_mark_clean(self):
        builder = VisualBuilder()
        builder.add_block("container")
        assert builder.dirty is True
        builder.mark_saved()
        assert builder.dirty is False

    def test_edition_de_props_marque_dirty(self):
        builder = VisualBuilder()
        block = builder.add_block("text")
        builder.mark_saved()
        builder.update_block_props(block.id, {"text": "x"})
        assert builder.dirty is True
