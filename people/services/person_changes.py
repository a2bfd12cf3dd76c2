"""
Partial update diffing.

Decides which person fields a PATCH actually changes. Works on plain
snapshots (anything with name/surname/patronymic/age/gender/nationality
attributes) so it can be tested without a database; the store turns the
result into a single UPDATE.
"""


def person_changes(current, requested):
    """
    Diff the requested update against the current person.

    Args:
        current: snapshot of the stored person (labels, not ids)
        requested: PersonUpdateDTO

    Returns:
        list of (field, new_value) in a stable order; empty when nothing
        would change
    """
    changes = []

    for field in ('name', 'surname'):
        value = getattr(requested, field)
        if value and value != getattr(current, field):
            changes.append((field, value))

    # None means absent; '' clears the stored patronymic
    if requested.patronymic is not None and requested.patronymic != (current.patronymic or ''):
        changes.append(('patronymic', requested.patronymic))

    if requested.age and requested.age != current.age:
        changes.append(('age', requested.age))

    for field in ('gender', 'nationality'):
        value = getattr(requested, field)
        if value and value != getattr(current, field):
            changes.append((field, value))

    return changes
