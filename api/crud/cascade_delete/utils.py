"""
    Utilitaires de présentation de la suppression en cascade

    Traduction des noms de tables et rendu des messages affichés à
    l'utilisateur. Les textes sont repris tels quels par l'interface.
"""

from .base import DeleteOutcomeKind

# Table statique, en lecture seule
TABLE_DISPLAY_NAMES = {
    "T_student": "étudiant(s)",
    "absences": "absence(s)",
    "teaching_assignment": "affectation(s) d'enseignement",
    "payments": "paiement(s)",
    "homework": "devoir(s)",
    "class_room": "salle(s) de classe",
    "branch": "filière(s)",
    "grade_config": "configuration(s)",
    "scholarships": "bourse(s)",
    "T_report_card": "bulletin(s)",
    "teaching_grades": "niveau(x) d'enseignement",
}

def get_table_display_name(table_name: str) -> str:
    """
    Convertit un nom de table en libellé lisible

    Args:
        table_name: nom de la table en base

    Returns:
        str: libellé, ou le nom brut si la table n'est pas traduite
    """

    return TABLE_DISPLAY_NAMES.get(table_name, table_name)

def not_found_message(entity_name: str) -> str:
    return f"{entity_name} non trouvé"

def blocked_message(count: int, display_name: str) -> str:
    return f"Impossible de supprimer car il y a {count} {display_name} lié(s)"

def deleted_message(entity_name: str) -> str:
    return f"{entity_name} supprimé avec succès"

def storage_failure_message(cause: str) -> str:
    return f"Erreur lors de la suppression: {cause}"

def render_message(outcome) -> str:
    """
    Rend le message utilisateur d'une issue de suppression

    Args:
        outcome: DeleteOutcome

    Returns:
        str: message affiché tel quel par l'interface
    """

    entity_name = outcome.entity.value

    if outcome.kind == DeleteOutcomeKind.NOT_FOUND:
        return not_found_message(entity_name)

    if outcome.kind == DeleteOutcomeKind.BLOCKED:
        return blocked_message(outcome.count, outcome.display_name)

    if outcome.kind == DeleteOutcomeKind.STORAGE_FAILURE:
        return storage_failure_message(outcome.cause)

    return deleted_message(entity_name)
