"""
    Registre des entités supprimables

    Associe chaque entité à son modèle ORM et à la liste ordonnée de ses
    relations dépendantes. Les règles sont validées à l'enregistrement,
    contre les métadonnées du schéma.
"""

from typing import Dict, Iterable, List, Tuple

from sqlalchemy import MetaData

from db.base import metadata as default_metadata
from db.models import Grade, ClassRoom, Branch, Student, Professor, Course, Teaching
from .base import EntityKind, RelationRule, UnknownEntity, InvalidRelationRule


class EntityRegistry:
    """Registre entité -> (modèle, règles)"""

    def __init__(self, metadata: MetaData = default_metadata):
        self.metadata = metadata
        self._entries: Dict[EntityKind, Tuple[type, Tuple[RelationRule, ...]]] = {}

    def register(self, entity: EntityKind, model, rules: Iterable[RelationRule] = (), strict: bool = True) -> None:
        """
        Enregistre une entité

        Args:
            entity: entité supprimable
            model: classe ORM de la table cible
            rules: relations dépendantes, dans l'ordre d'évaluation
            strict: exige une règle pour chaque clé étrangère visant la table cible

        Raises:
            InvalidRelationRule: table ou colonne inconnue, clé étrangère sans règle
        """

        if model.__table__.name not in self.metadata.tables:
            raise InvalidRelationRule(f"Table cible inconnue pour {entity.value}: {model.__table__.name}")

        rules = self.validate_rules(rules)
        if strict:
            self.check_coverage(model.__table__.name, rules)

        self._entries[entity] = (model, rules)

    def validate_rules(self, rules: Iterable[RelationRule]) -> Tuple[RelationRule, ...]:
        """ Vérifie que chaque règle désigne une table et une colonne existantes """
        validated = []

        for rule in rules:
            table = self.metadata.tables.get(rule.dependent_table)
            if table is None:
                raise InvalidRelationRule(f"Table dépendante inconnue: {rule.dependent_table}")

            if rule.foreign_key not in table.c:
                raise InvalidRelationRule(
                    f"Colonne {rule.foreign_key} absente de la table {rule.dependent_table}"
                )

            validated.append(rule)

        return tuple(validated)

    def check_coverage(self, target_table: str, rules: Tuple[RelationRule, ...]) -> None:
        """ Vérifie que chaque clé étrangère visant target_table est couverte par une règle """
        covered = {(rule.dependent_table, rule.foreign_key) for rule in rules}
        missing = []

        for table in self.metadata.sorted_tables:
            if table.name == target_table:
                continue  # auto-référence

            for fk in table.foreign_keys:
                if fk.column.table.name != target_table:
                    continue

                if (table.name, fk.parent.name) not in covered:
                    missing.append(f"{table.name}.{fk.parent.name}")

        if missing:
            raise InvalidRelationRule(
                f"Clé(s) étrangère(s) vers {target_table} sans règle: {', '.join(missing)}"
            )

    def model_for(self, entity: EntityKind):
        return self._lookup(entity)[0]

    def rules_for(self, entity: EntityKind) -> Tuple[RelationRule, ...]:
        return self._lookup(entity)[1]

    def entities(self) -> List[EntityKind]:
        return list(self._entries)

    def _lookup(self, entity: EntityKind):
        try:
            return self._entries[entity]
        except KeyError:
            raise UnknownEntity(f"Entité non enregistrée: {entity}") from None

    def __contains__(self, entity) -> bool:
        return entity in self._entries


def cascade(table: str, foreign_key: str) -> RelationRule:
    return RelationRule(dependent_table=table, foreign_key=foreign_key, cascade=True)

def restrict(table: str, foreign_key: str) -> RelationRule:
    return RelationRule(dependent_table=table, foreign_key=foreign_key, cascade=False)


# Relations dépendantes du schéma scolaire, dans l'ordre d'évaluation
SCHOOL_RELATIONS = {
    EntityKind.GRADE: (Grade, [
        cascade("class_room", "gradeId"),
        cascade("branch", "gradeId"),
        restrict("T_student", "gradeId"),
        restrict("homework", "gradeId"),
        restrict("grade_config", "gradeId"),
        restrict("teaching_grades", "gradeId"),
    ]),
    EntityKind.CLASS_ROOM: (ClassRoom, [
        restrict("T_student", "classRoomId"),
    ]),
    EntityKind.BRANCH: (Branch, [
        cascade("class_room", "branchId"),
    ]),
    EntityKind.STUDENT: (Student, [
        cascade("absences", "studentId"),
        cascade("scholarships", "studentId"),
        restrict("payments", "studentId"),
        restrict("T_report_card", "studentId"),
    ]),
    EntityKind.PROFESSOR: (Professor, [
        restrict("teaching_assignment", "professorId"),
        restrict("homework", "professorId"),
    ]),
    EntityKind.TEACHING: (Teaching, [
        cascade("teaching_grades", "teachingId"),
    ]),
    EntityKind.COURSE: (Course, [
        cascade("grade_config", "courseId"),
        restrict("homework", "courseId"),
        restrict("T_report_card", "courseId"),
        restrict("teaching_assignment", "courseId"),
    ]),
}


def build_school_registry(metadata: MetaData = default_metadata) -> EntityRegistry:
    """ Registre par défaut de l'application """
    registry = EntityRegistry(metadata)

    for entity, (model, rules) in SCHOOL_RELATIONS.items():
        registry.register(entity, model, rules)

    return registry
