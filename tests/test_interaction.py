"""
Tests de l'Interaction State et du drag-and-drop en trois phases.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from src import (
    DropTarget,
    ExistingBlockDrag,
    InvalidDevice,
    NewComponentDrag,
    VisualBuilder,
)


def child_ids(builder, parent_id):
    return [b.id for b in builder.store.children(parent_id)]


# ── Device / preview / sélection ──────────────────────────────────────────

class TestInteractionState:
    def test_defauts(self):
        state = VisualBuilder().interaction
        assert state.device == "desktop"
        assert state.preview_mode is False
        assert state.editing is True
        assert state.selected_block_id is None
        assert state.drag is None

    def test_device_invalide(self):
        builder = VisualBuilder()
        with pytest.raises(InvalidDevice):
            builder.set_device("watch")
        assert builder.interaction.device == "desktop"

    def test_selection_d_un_id_inconnu(self):
        builder = VisualBuilder()
        builder.select("ghost")
        assert builder.interaction.selected_block_id is None

    def test_preview_vide_la_selection_et_le_drag(self):
        builder = VisualBuilder()
        text = builder.add_block("text")
        builder.start_drag(ExistingBlockDrag(block_id=text.id))
        builder.set_preview_mode(True)
        assert builder.interaction.selected_block_id is None
        assert builder.interaction.drag is None
        assert builder.interaction.editing is False

    def test_pas_de_drag_en_preview(self):
        builder = VisualBuilder()
        builder.set_preview_mode(True)
        assert builder.start_drag(NewComponentDrag(kind="text")) is False
        assert builder.interaction.drag is None

    def test_interaction_hors_historique(self):
        builder = VisualBuilder()
        text = builder.add_block("text")
        depth = builder.history.undo_depth
        builder.select(text.id)
        builder.hover(text.id)
        builder.set_device("tablet")
        builder.set_preview_mode(True)
        assert builder.history.undo_depth == depth
        assert builder.dirty is True


# ── Drag-and-drop ─────────────────────────────────────────────────────────

class TestDragAndDrop:
    def test_nouveau_composant(self):
        builder = VisualBuilder()
        container = builder.add_block("container")
        builder.start_drag(NewComponentDrag(kind="heading"))
        assert builder.drag_over(DropTarget(parent_id=container.id, index=0)) is True

        block = builder.drop()

        assert block.kind == "heading"
        assert child_ids(builder, container.id) == [block.id]
        assert builder.interaction.drag is None
        assert builder.interaction.drop_target is None

    def test_une_seule_mutation_par_drop(self):
        builder = VisualBuilder()
        builder.start_drag(NewComponentDrag(kind="text"))
        builder.drag_over(DropTarget(parent_id=None, index=0))
        builder.drag_over(DropTarget(parent_id=None, index=0))
        depth = builder.history.undo_depth
        builder.drop()
        assert builder.history.undo_depth == depth + 1
        assert len(builder.store) == 1

    def test_annulation_sans_mutation(self):
        builder = VisualBuilder()
        builder.start_drag(NewComponentDrag(kind="text"))
        builder.drag_over(DropTarget(parent_id=None, index=0))
        builder.cancel_drag()
        assert builder.drop() is None
        assert len(builder.store) == 0
        assert builder.can_undo is False

    def test_drop_hors_zone(self):
        builder = VisualBuilder()
        builder.start_drag(NewComponentDrag(kind="text"))
        builder.drag_over(DropTarget(parent_id=None, index=0))
        builder.drag_over(None)
        assert builder.drop() is None
        assert len(builder.store) == 0

    def test_cible_invalide_ignoree(self):
        builder = VisualBuilder()
        row = builder.add_block("row")
        builder.start_drag(NewComponentDrag(kind="heading"))
        assert builder.drag_over(DropTarget(parent_id=row.id, index=0)) is False
        assert builder.interaction.drop_target is None
        assert builder.drop() is None
        assert child_ids(builder, row.id) == []

    def test_drop_dans_son_propre_sous_arbre_refuse(self):
        builder = VisualBuilder()
        row = builder.add_block("row")
        col = builder.add_block("column", row.id)
        builder.start_drag(ExistingBlockDrag(block_id=row.id))
        assert builder.can_drop(DropTarget(parent_id=col.id, index=0)) is False
        assert builder.drag_over(DropTarget(parent_id=col.id, index=0)) is False

    def test_deplacement_vers_la_fin_du_meme_parent(self):
        """La drop zone compte le bloc glissé : index 3 = après c."""
        builder = VisualBuilder()
        container = builder.add_block("container")
        a = builder.add_block("text", container.id)
        b = builder.add_block("text", container.id)
        c = builder.add_block("text", container.id)

        builder.start_drag(ExistingBlockDrag(block_id=a.id))
        builder.drag_over(DropTarget(parent_id=container.id, index=3))
        builder.drop()

        assert child_ids(builder, container.id) == [b.id, c.id, a.id]

    def test_deplacement_vers_le_debut_du_meme_parent(self):
        builder = VisualBuilder()
        container = builder.add_block("container")
        a = builder.add_block("text", container.id)
        b = builder.add_block("text", container.id)
        c = builder.add_block("text", container.id)

        builder.start_drag(ExistingBlockDrag(block_id=c.id))
        builder.drag_over(DropTarget(parent_id=container.id, index=1))
        builder.drop()

        assert child_ids(builder, container.id) == [a.id, c.id, b.id]

    def test_deplacement_vers_un_autre_parent(self):
        builder = VisualBuilder()
        container = builder.add_block("container")
        text = builder.add_block("text", container.id)
        row = builder.add_block("row")
        col = builder.add_block("column", row.id)

        builder.start_drag(ExistingBlockDrag(block_id=text.id))
        builder.drag_over(DropTarget(parent_id=col.id, index=0))
        moved = builder.drop()

        assert moved.parent_id == col.id
        assert child_ids(builder, container.id) == []

    def test_drag_over_sans_drag(self):
        builder = VisualBuilder()
        builder.interaction.drag_over(DropTarget(parent_id=None, index=0))
        assert builder.interaction.drop_target is None
