"""
Registry des composants — catalogue statique consulté (jamais modifié) par le moteur.
"""
from typing import Dict, Iterable, List, Optional

from ..core.errors import UnknownKind
from .base import ComponentDefinition


class ComponentRegistry:
    """
    Catalogue kind → ComponentDefinition.

    Usage:
        >>> registry = ComponentRegistry([CONTAINER, ROW, COLUMN])
        >>> registry.require("row").can_have_children
        True
    """

    def __init__(self, definitions: Iterable[ComponentDefinition] = ()):
        self._definitions: Dict[str, ComponentDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: ComponentDefinition) -> None:
        if definition.kind in self._definitions:
            raise ValueError(f"Kind déjà enregistré : {definition.kind!r}")
        self._definitions[definition.kind] = definition

    def get(self, kind: str) -> Optional[ComponentDefinition]:
        return self._definitions.get(kind)

    def require(self, kind: str) -> ComponentDefinition:
        definition = self._definitions.get(kind)
        if definition is None:
            raise UnknownKind(f"Kind inconnu : {kind!r}. Registry : {self.kinds()}", kind=kind)
        return definition

    def __contains__(self, kind: object) -> bool:
        return kind in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def kinds(self) -> List[str]:
        return list(self._definitions)

    def categories(self) -> List[str]:
        """Catégories présentes, dans l'ordre de première apparition."""
        return list(dict.fromkeys(d.category for d in self._definitions.values()))

    def by_category(self, category: str) -> List[ComponentDefinition]:
        return [d for d in self._definitions.values() if d.category == category]

    def search(self, query: str = "", category: str = "all") -> List[ComponentDefinition]:
        """Filtre de la palette : catégorie ("all" = toutes) + texte sur nom/description."""
        q = query.lower()
        return [
            d for d in self._definitions.values()
            if (category == "all" or d.category == category)
            and (not q or q in d.name.lower() or q in d.description.lower())
        ]

    def containment_error(
        self,
        parent_kind: Optional[str],
        child_kind: str,
        sibling_count: int = 0,
    ) -> Optional[str]:
        """
        Raison pour laquelle `child_kind` ne peut pas aller sous `parent_kind`, ou None.

        parent_kind=None désigne la racine du document : seul `allowed_parents`
        de l'enfant est alors vérifié. `sibling_count` = enfants déjà présents
        (hors bloc déplacé) pour contrôler `max_children`.
        """
        child = self.get(child_kind)

        if parent_kind is None:
            if child is not None and child.allowed_parents is not None:
                return f"{child_kind!r} ne peut pas être placé à la racine"
            return None

        parent = self.get(parent_kind)
        if parent is None:
            return f"kind parent inconnu : {parent_kind!r}"
        if not parent.can_have_children:
            return f"{parent_kind!r} n'accepte pas d'enfants"
        if not parent.accepts(child_kind):
            return f"{parent_kind!r} n'accepte pas {child_kind!r} (autorisés : {parent.allowed_children})"
        if child is not None and child.allowed_parents is not None and parent_kind not in child.allowed_parents:
            return f"{child_kind!r} ne peut pas être placé dans {parent_kind!r}"
        if parent.max_children is not None and sibling_count >= parent.max_children:
            return f"{parent_kind!r} est plein ({parent.max_children} enfants max)"
        return None

    def catalog(self) -> List[dict]:
        """Catalogue JSON : une entrée par composant, définition sérialisée (cf. GET /catalog)."""
        return [
            {
                "kind":       d.kind,
                "name":       d.name,
                "category":   d.category,
                "definition": d.model_dump(mode="json"),
            }
            for d in self._definitions.values()
        ]
