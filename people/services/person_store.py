"""
Person Store - Persistence Layer

Relational CRUD over the people table with gender and nationality
normalized into their own lookup tables:
- Create: lookup-or-insert both labels, insert the person
- Read: person joined with its labels
- List: equality filters over any supplied field, offset/limit window
- Partial update: only fields that are supplied AND different are written
- Delete: remove the person, then drop lookup rows nobody references

Create, update and delete each run in one transaction; any failure rolls
back everything written so far.
"""

import logging

from django.db import DatabaseError, transaction

from people.dtos import PersonDTO, PersonFilterDTO, PersonUpdateDTO
from people.exceptions import PersistenceError, PersonNotFoundError
from people.models import Gender, Nationality, Person
from people.services.person_changes import person_changes


class PersonStore:
    """Django ORM backed person persistence"""

    def __init__(self, logger=None):
        self.logger = logger or logging.getLogger(__name__)

    def create(self, person: PersonDTO) -> int:
        """
        Insert an enriched person.

        Args:
            person: complete PersonDTO (id is ignored)

        Returns:
            int: id of the new person row
        """
        with transaction.atomic():
            gender = self._lookup_or_insert(Gender, 'gender', person.gender)
            nationality = self._lookup_or_insert(Nationality, 'nationality', person.nationality)

            try:
                row = Person.objects.create(
                    name=person.name,
                    surname=person.surname,
                    patronymic=person.patronymic,
                    age=person.age,
                    gender=gender,
                    nationality=nationality,
                )
            except DatabaseError as exc:
                self.logger.info("Failed to insert person: person=%s error=%s", person, exc)
                raise PersistenceError(f"failed to insert person: {exc}") from exc

        self.logger.debug("Person row inserted: id=%s person=%s", row.pk, person)
        return row.pk

    def get_by_id(self, person_id: int) -> PersonDTO:
        """Return the person with its gender and nationality labels."""
        try:
            row = Person.objects.select_related('gender', 'nationality').get(pk=person_id)
        except Person.DoesNotExist:
            self.logger.info("Failed to get person by ID: id=%s error=not found", person_id)
            raise PersonNotFoundError(person_id)
        except DatabaseError as exc:
            self.logger.info("Failed to get person by ID: id=%s error=%s", person_id, exc)
            raise PersistenceError(f"failed to get person: {exc}") from exc

        person = PersonDTO.from_model(row)
        self.logger.info("Person retrieved successfully: id=%s person=%s", person_id, person)
        return person

    def list_by_filter(self, filters: PersonFilterDTO, offset: int, limit: int):
        """
        List people matching every supplied filter, ordered by id.

        Empty strings and age=0 leave a field unfiltered. All matches are
        exact. `offset` rows are skipped and at most `limit` returned.

        Returns:
            list of PersonDTO, possibly empty
        """
        queryset = Person.objects.select_related('gender', 'nationality')

        if filters.name:
            queryset = queryset.filter(name=filters.name)
        if filters.surname:
            queryset = queryset.filter(surname=filters.surname)
        if filters.patronymic:
            queryset = queryset.filter(patronymic=filters.patronymic)
        if filters.age:
            queryset = queryset.filter(age=filters.age)
        if filters.gender:
            queryset = queryset.filter(gender__gender=filters.gender)
        if filters.nationality:
            queryset = queryset.filter(nationality__nationality=filters.nationality)

        try:
            people = [
                PersonDTO.from_model(row)
                for row in queryset.order_by('id')[offset:offset + limit]
            ]
        except DatabaseError as exc:
            self.logger.info("Failed to query people with filters: filters=%s error=%s", filters, exc)
            raise PersistenceError(f"failed to query people: {exc}") from exc

        self.logger.info("People retrieved with filters: filters=%s count=%s", filters, len(people))
        return people

    def update_by_id(self, person_id: int, update: PersonUpdateDTO) -> None:
        """
        Apply a partial update.

        Only fields that are supplied and differ from the stored value are
        written. Changed gender/nationality labels are resolved to lookup
        rows first (created if missing). Nothing to change is a successful
        no-op.
        """
        with transaction.atomic():
            try:
                row = (
                    Person.objects
                    .select_for_update(of=('self',))
                    .select_related('gender', 'nationality')
                    .get(pk=person_id)
                )
            except Person.DoesNotExist:
                self.logger.info("Failed to fetch current person data: id=%s error=not found", person_id)
                raise PersonNotFoundError(person_id)
            except DatabaseError as exc:
                self.logger.info("Failed to fetch current person data: id=%s error=%s", person_id, exc)
                raise PersistenceError(f"failed to fetch current person data: {exc}") from exc

            changes = person_changes(PersonDTO.from_model(row), update)
            if not changes:
                self.logger.info("Nothing to update: id=%s", person_id)
                return

            columns = {}
            for field, value in changes:
                if field == 'gender':
                    value = self._lookup_or_insert(Gender, 'gender', value)
                elif field == 'nationality':
                    value = self._lookup_or_insert(Nationality, 'nationality', value)
                columns[field] = value

            try:
                updated = Person.objects.filter(pk=person_id).update(**columns)
            except DatabaseError as exc:
                self.logger.info("Failed to update people: id=%s error=%s", person_id, exc)
                raise PersistenceError(f"failed to update person: {exc}") from exc

            if updated == 0:
                self.logger.info("No person record updated: id=%s", person_id)
                raise PersonNotFoundError(person_id)

        self.logger.info(
            "Person and related data updated successfully: id=%s fields=%s",
            person_id, [field for field, _ in changes]
        )

    def delete_by_id(self, person_id: int) -> None:
        """
        Delete a person, then drop its gender/nationality rows if no other
        person still references them.

        Cleanup failures are logged and do not fail the delete.
        """
        self.logger.debug("Deleting person by ID: id=%s", person_id)

        with transaction.atomic():
            try:
                refs = (
                    Person.objects
                    .filter(pk=person_id)
                    .values('gender_id', 'nationality_id')
                    .first()
                )
                if refs is None:
                    self.logger.info("Failed to get gender/nationality ID for person: id=%s", person_id)
                    raise PersonNotFoundError(person_id)

                Person.objects.filter(pk=person_id).delete()
            except DatabaseError as exc:
                self.logger.info("Failed to delete person: id=%s error=%s", person_id, exc)
                raise PersistenceError(f"failed to delete person: {exc}") from exc

            self._delete_if_unreferenced(Gender, refs['gender_id'])
            self._delete_if_unreferenced(Nationality, refs['nationality_id'])

        self.logger.debug("Successfully deleted person and checked for unused gender/nationality: id=%s", person_id)

    def _lookup_or_insert(self, model, field, label):
        """Resolve a label to its lookup row, inserting it when missing."""
        try:
            row, created = model.objects.get_or_create(**{field: label})
        except DatabaseError as exc:
            self.logger.info("Failed to insert %s: %s=%s error=%s", field, field, label, exc)
            raise PersistenceError(f"failed to insert {field}: {exc}") from exc

        if created:
            self.logger.debug("Inserted new %s: %s", field, label)
        return row

    def _delete_if_unreferenced(self, model, pk):
        """Best-effort removal of a lookup row no person points to anymore."""
        try:
            with transaction.atomic():
                model.objects.filter(pk=pk, people__isnull=True).delete()
        except DatabaseError as exc:
            self.logger.warning(
                "Could not clean up %s row: id=%s error=%s", model._meta.model_name, pk, exc
            )
