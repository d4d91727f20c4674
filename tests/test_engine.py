"""
Tests du Mutation Engine — add / move / duplicate / remove / update.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from src import (
    BlockNotFound,
    ComponentDefinition,
    ComponentRegistry,
    CyclicMove,
    InvalidDevice,
    InvalidParent,
    InvalidSettings,
    UnknownKind,
    VisualBuilder,
)
from src.blocks import DEFAULT_COMPONENTS, HEADING


# ── Helpers ───────────────────────────────────────────────────────────────

def child_ids(builder, parent_id):
    return [b.id for b in builder.store.children(parent_id)]


def orders(builder, parent_id):
    return [b.order for b in builder.store.children(parent_id)]


def state(builder):
    return builder.export().to_persisted()


# ── add_block ─────────────────────────────────────────────────────────────

class TestAddBlock:
    def test_racine_order_zero(self):
        builder = VisualBuilder()
        row = builder.add_block("row")
        assert row.parent_id is None
        assert row.order == 0
        assert child_ids(builder, None) == [row.id]

    def test_ids_prefixes_et_uniques(self):
        builder = VisualBuilder()
        ids = {builder.add_block("text").id for _ in range(20)}
        assert len(ids) == 20
        assert all(i.startswith("block_") for i in ids)

    def test_defaults_copies_profondes(self):
        builder = VisualBuilder()
        block = builder.add_block("heading")
        block.props["text"] = "muté"
        block.styles.desktop["color"] = "red"
        assert HEADING.default_props["text"] == "Your Heading Here"
        assert "color" not in HEADING.default_styles.desktop

    def test_insertion_a_l_index_decale_les_freres(self):
        builder = VisualBuilder()
        container = builder.add_block("container")
        a = builder.add_block("text", container.id)
        b = builder.add_block("text", container.id, 0)
        assert child_ids(builder, container.id) == [b.id, a.id]
        assert orders(builder, container.id) == [0, 1]

    @pytest.mark.parametrize("index,expected_position", [(None, 2), (99, 2), (-5, 0), (1, 1)])
    def test_index_borne(self, index, expected_position):
        builder = VisualBuilder()
        container = builder.add_block("container")
        builder.add_block("text", container.id)
        builder.add_block("text", container.id)
        new = builder.add_block("button", container.id, index)
        assert child_ids(builder, container.id).index(new.id) == expected_position
        assert orders(builder, container.id) == [0, 1, 2]

    def test_nouveau_bloc_selectionne(self):
        builder = VisualBuilder()
        block = builder.add_block("container")
        assert builder.interaction.selected_block_id == block.id

    def test_kind_inconnu(self):
        builder = VisualBuilder()
        with pytest.raises(UnknownKind):
            builder.add_block("carousel")
        assert len(builder.store) == 0
        assert builder.can_undo is False

    def test_parent_inexistant(self):
        builder = VisualBuilder()
        with pytest.raises(InvalidParent):
            builder.add_block("text", "ghost")
        assert builder.can_undo is False

    def test_parent_feuille(self):
        builder = VisualBuilder()
        heading = builder.add_block("heading")
        with pytest.raises(InvalidParent):
            builder.add_block("text", heading.id)

    def test_kind_refuse_par_le_parent(self):
        """Une row n'accepte que des colonnes."""
        builder = VisualBuilder()
        row = builder.add_block("row")
        with pytest.raises(InvalidParent):
            builder.add_block("heading", row.id)
        assert child_ids(builder, row.id) == []


# ── move_block ────────────────────────────────────────────────────────────

class TestMoveBlock:
    def test_reordonne_dans_le_meme_parent(self):
        builder = VisualBuilder()
        container = builder.add_block("container")
        a = builder.add_block("text", container.id)
        b = builder.add_block("text", container.id)
        c = builder.add_block("text", container.id)
        builder.move_block(a.id, container.id, 2)
        assert child_ids(builder, container.id) == [b.id, c.id, a.id]
        assert orders(builder, container.id) == [0, 1, 2]

    def test_change_de_parent_et_renumerote_les_anciens_freres(self):
        builder = VisualBuilder()
        container = builder.add_block("container")
        heading = builder.add_block("heading", container.id)
        text = builder.add_block("text", container.id)
        button = builder.add_block("button", container.id)

        builder.move_block(text.id, None, 0)

        assert child_ids(builder, container.id) == [heading.id, button.id]
        assert orders(builder, container.id) == [0, 1]
        assert child_ids(builder, None) == [text.id, container.id]
        assert builder.get_block(text.id).parent_id is None

    def test_deplace_le_sous_arbre(self):
        builder = VisualBuilder()
        row = builder.add_block("row")
        col = builder.add_block("column", row.id)
        heading = builder.add_block("heading", col.id)
        other_row = builder.add_block("row")

        builder.move_block(col.id, other_row.id)

        assert child_ids(builder, other_row.id) == [col.id]
        assert child_ids(builder, col.id) == [heading.id]
        assert child_ids(builder, row.id) == []

    def test_dans_son_propre_sous_arbre(self):
        builder = VisualBuilder()
        row = builder.add_block("row")
        col = builder.add_block("column", row.id)
        before = state(builder)
        with pytest.raises(CyclicMove):
            builder.move_block(row.id, col.id)
        assert state(builder) == before

    def test_sur_lui_meme(self):
        builder = VisualBuilder()
        container = builder.add_block("container")
        with pytest.raises(CyclicMove):
            builder.move_block(container.id, container.id)

    def test_bloc_introuvable(self):
        with pytest.raises(BlockNotFound):
            VisualBuilder().move_block("ghost", None)

    def test_parent_invalide_sans_historique(self):
        builder = VisualBuilder()
        row = builder.add_block("row")
        heading = builder.add_block("heading")
        depth = builder.history.undo_depth
        with pytest.raises(InvalidParent):
            builder.move_block(heading.id, row.id)
        assert builder.history.undo_depth == depth
        assert builder.get_block(heading.id).parent_id is None

    def test_meme_position_enregistree(self):
        builder = VisualBuilder()
        text = builder.add_block("text")
        depth = builder.history.undo_depth
        builder.move_block(text.id, None, 0)
        assert builder.history.undo_depth == depth + 1


# ── duplicate_block ───────────────────────────────────────────────────────

class TestDuplicateBlock:
    def test_clone_du_sous_arbre(self):
        builder = VisualBuilder()
        row = builder.add_block("row")
        col = builder.add_block("column", row.id)
        heading = builder.add_block("heading", col.id)
        builder.update_block_props(heading.id, {"text": "Titre"})

        clone = builder.duplicate_block(row.id)

        assert child_ids(builder, None) == [row.id, clone.id]
        (clone_col,) = builder.store.children(clone.id)
        (clone_heading,) = builder.store.children(clone_col.id)
        assert clone_heading.props == {**heading.props}
        assert clone_heading.kind == "heading"
        original_ids = set(builder.store.subtree_ids(row.id))
        clone_ids = set(builder.store.subtree_ids(clone.id))
        assert original_ids.isdisjoint(clone_ids)

    def test_insere_juste_apres_l_original(self):
        builder = VisualBuilder()
        container = builder.add_block("container")
        a = builder.add_block("text", container.id)
        b = builder.add_block("text", container.id)
        clone = builder.duplicate_block(a.id)
        assert child_ids(builder, container.id) == [a.id, clone.id, b.id]
        assert orders(builder, container.id) == [0, 1, 2]

    def test_clone_selectionne(self):
        builder = VisualBuilder()
        text = builder.add_block("text")
        clone = builder.duplicate_block(text.id)
        assert builder.interaction.selected_block_id == clone.id

    def test_clone_independant(self):
        builder = VisualBuilder()
        text = builder.add_block("text")
        clone = builder.duplicate_block(text.id)
        builder.update_block_styles(clone.id, "desktop", {"color": "red"})
        assert "color" not in builder.get_block(text.id).styles.desktop

    def test_parent_plein(self):
        registry = ComponentRegistry(DEFAULT_COMPONENTS + [
            ComponentDefinition(kind="slot", name="Slot", category="layout",
                                can_have_children=True, max_children=1),
        ])
        builder = VisualBuilder(registry=registry)
        slot = builder.add_block("slot")
        text = builder.add_block("text", slot.id)
        with pytest.raises(InvalidParent):
            builder.duplicate_block(text.id)
        with pytest.raises(InvalidParent):
            builder.add_block("text", slot.id)

    def test_introuvable(self):
        with pytest.raises(BlockNotFound):
            VisualBuilder().duplicate_block("ghost")


# ── remove_block ──────────────────────────────────────────────────────────

class TestRemoveBlock:
    def test_supprime_le_sous_arbre(self):
        builder = VisualBuilder()
        row = builder.add_block("row")
        col = builder.add_block("column", row.id)
        builder.add_block("heading", col.id)
        assert builder.remove_block(row.id) is True
        assert len(builder.store) == 0

    def test_idempotent(self):
        builder = VisualBuilder()
        text = builder.add_block("text")
        keep = builder.add_block("text")
        assert builder.remove_block(text.id) is True
        after_first = state(builder)
        depth = builder.history.undo_depth
        assert builder.remove_block(text.id) is False
        assert state(builder) == after_first
        assert builder.history.undo_depth == depth
        assert child_ids(builder, None) == [keep.id]

    def test_renumerote_les_freres(self):
        builder = VisualBuilder()
        a = builder.add_block("text")
        b = builder.add_block("text")
        c = builder.add_block("text")
        builder.remove_block(b.id)
        assert child_ids(builder, None) == [a.id, c.id]
        assert orders(builder, None) == [0, 1]

    def test_efface_selection_et_survol_du_sous_arbre(self):
        builder = VisualBuilder()
        row = builder.add_block("row")
        col = builder.add_block("column", row.id)
        builder.select(col.id)
        builder.hover(col.id)
        builder.remove_block(row.id)
        assert builder.interaction.selected_block_id is None
        assert builder.interaction.hovered_block_id is None

    def test_garde_une_selection_hors_sous_arbre(self):
        builder = VisualBuilder()
        a = builder.add_block("text")
        b = builder.add_block("text")
        builder.select(a.id)
        builder.remove_block(b.id)
        assert builder.interaction.selected_block_id == a.id


# ── Édition ───────────────────────────────────────────────────────────────

class TestUpdates:
    def test_props_fusion_superficielle(self):
        builder = VisualBuilder()
        heading = builder.add_block("heading")
        builder.update_block_props(heading.id, {"text": "Bonjour"})
        props = builder.get_block(heading.id).props
        assert props == {"text": "Bonjour", "level": "h2", "align": "left"}

    def test_props_bloc_introuvable(self):
        with pytest.raises(BlockNotFound):
            VisualBuilder().update_block_props("ghost", {"text": "x"})

    def test_styles_un_seul_device(self):
        builder = VisualBuilder()
        heading = builder.add_block("heading")
        desktop = dict(heading.styles.desktop)
        tablet = dict(heading.styles.tablet)
        builder.update_block_styles(heading.id, "mobile", {"color": "red"})
        styles = builder.get_block(heading.id).styles
        assert styles.desktop == desktop
        assert styles.tablet == tablet
        assert styles.mobile == {"fontSize": "1.5rem", "color": "red"}

    def test_styles_device_invalide(self):
        builder = VisualBuilder()
        heading = builder.add_block("heading")
        depth = builder.history.undo_depth
        with pytest.raises(InvalidDevice):
            builder.update_block_styles(heading.id, "watch", {"color": "red"})
        assert builder.history.undo_depth == depth

    def test_styles_globaux(self):
        builder = VisualBuilder()
        builder.update_global_styles("tablet", {"padding": "8px"})
        builder.update_global_styles("tablet", {"margin": "0"})
        assert builder.store.global_styles.tablet == {"padding": "8px", "margin": "0"}
        assert builder.store.global_styles.desktop == {}

    def test_settings_alias_et_fusion(self):
        builder = VisualBuilder()
        settings = builder.update_settings({"containerWidth": "960px", "colors": {"primary": "#ff0000"}})
        assert settings.container_width == "960px"
        assert settings.colors["primary"] == "#ff0000"
        assert settings.colors["accent"] == "#f59e0b"
        assert builder.store.settings.container_width == "960px"

    def test_settings_cle_inconnue(self):
        builder = VisualBuilder()
        with pytest.raises(InvalidSettings) as exc:
            builder.update_settings({"theme": "dark"})
        assert exc.value.code == "INVALID_SETTINGS"
        assert exc.value.context == {"key": "theme"}
        assert builder.can_undo is False

    def test_settings_valeur_invalide(self, caplog):
        builder = VisualBuilder()
        with caplog.at_level("WARNING", logger="src.engine"):
            with pytest.raises(InvalidSettings):
                builder.update_settings({"containerWidth": ["960px"]})
            with pytest.raises(InvalidSettings):
                builder.update_settings({"colors": "red"})
        assert "update_settings rejeté" in caplog.text
        assert builder.store.settings.container_width == "1200px"
        assert builder.can_undo is False

    @pytest.mark.parametrize("call", [
        lambda b, block_id: b.update_block_props(block_id, None),
        lambda b, block_id: b.update_block_styles(block_id, "desktop", None),
        lambda b, block_id: b.update_global_styles("mobile", None),
    ])
    def test_partiel_invalide_sans_historique(self, call):
        builder = VisualBuilder()
        heading = builder.add_block("heading")
        builder.update_block_props(heading.id, {"text": "v1"})
        builder.undo()
        before = state(builder)
        depth = builder.history.undo_depth
        with pytest.raises(TypeError):
            call(builder, heading.id)
        assert builder.history.undo_depth == depth
        assert builder.can_redo is True
        assert state(builder) == before

    def test_clear_all_annulable(self):
        builder = VisualBuilder()
        builder.add_block("container")
        builder.update_settings({"spacing": "compact"})
        before = state(builder)
        builder.clear_all()
        assert len(builder.store) == 0
        assert builder.store.settings.spacing == "normal"
        builder.undo()
        assert state(builder) == before
