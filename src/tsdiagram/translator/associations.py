"""Member association inference.

Runs once over the complete set of FileDeclarations. Every property type,
method return type and method parameter whose identities include a known
entity id becomes a directed association from the owning entity to the
referenced one.
"""

import logging

from tsdiagram.models.diagram import (
    Association,
    AssociationSource,
    Entity,
    FileDeclaration,
    MemberEntity,
)

logger = logging.getLogger(__name__)

MANY = "0..*"
ONE = "1"


class AssociationInferrer:
    """Infers "has-a" edges between translated entities.

    Edges are unique per run on (from id, to id, label, source) and are
    attached to the FileDeclaration where the owning entity is first seen.
    Entities without an identity never take part.
    """

    def __init__(self, declarations: list[FileDeclaration]) -> None:
        """Initialize the inferrer with the full result set.

        Args:
            declarations: Every FileDeclaration of the run
        """
        self.declarations = declarations
        self._entities: dict[str, Entity] = {}
        for declaration in declarations:
            for entity in declaration.entities:
                if entity.id and entity.id not in self._entities:
                    self._entities[entity.id] = entity

    @property
    def known_ids(self) -> set[str]:
        """Identities of all entities of the run."""
        return set(self._entities)

    def infer(self) -> list[Association]:
        """Infer associations and store them on each FileDeclaration.

        Returns:
            All association edges of the run, in discovery order
        """
        seen: set[tuple[str, str, str, str]] = set()
        associations: list[Association] = []

        for declaration in self.declarations:
            file_associations: list[Association] = []
            for entity in declaration.member_entities:
                for association in self._entity_associations(entity):
                    if association.key in seen:
                        continue
                    seen.add(association.key)
                    file_associations.append(association)
            declaration.member_associations = file_associations
            associations.extend(file_associations)

        logger.info(f"Inferred {len(associations)} member associations")
        return associations

    def _entity_associations(self, entity: MemberEntity) -> list[Association]:
        if not entity.id:
            return []

        found: list[Association] = []

        for prop in entity.properties:
            found += self._edges(
                entity, prop.type_ids, prop.name, AssociationSource.PROPERTY, prop.type
            )

        for method in entity.methods:
            if method.return_type_ids:
                found += self._edges(
                    entity,
                    method.return_type_ids,
                    method.name,
                    AssociationSource.RETURN,
                    method.return_type,
                )
            for argument in method.argument_ids or []:
                found += self._edges(
                    entity,
                    argument.ids,
                    argument.name,
                    AssociationSource.ARGUMENT,
                    argument.type,
                )

        return found

    def _edges(
        self,
        owner: MemberEntity,
        type_ids: list[str],
        label: str,
        source: AssociationSource,
        type_text: str | None,
    ) -> list[Association]:
        multiplicity = MANY if type_text and type_text.endswith("[]") else ONE
        edges = []
        for type_id in type_ids:
            target = self._entities.get(type_id)
            if target is None:
                continue
            edges.append(
                Association(
                    from_id=owner.id,
                    from_name=owner.name,
                    to_id=target.id,
                    to_name=target.name,
                    label=label,
                    source=source,
                    multiplicity=multiplicity,
                )
            )
        return edges


def infer_associations(declarations: list[FileDeclaration]) -> list[Association]:
    """Convenience function to infer associations of a run.

    Args:
        declarations: Every FileDeclaration of the run

    Returns:
        All association edges of the run
    """
    return AssociationInferrer(declarations).infer()
