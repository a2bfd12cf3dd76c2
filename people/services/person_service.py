"""
Person Service - Business Logic Layer

Thin layer between the HTTP views and persistence:
- Parses string identifiers and filter values (InvalidFormatError on bad input)
- Enriches new people through the EnrichmentClient before storing them
- Delegates to the PersonStore, logging every outcome

Store and enrichment errors are propagated unchanged.
"""

import logging

from people.dtos import PersonFilterDTO, PersonUpdateDTO, ReceivedPersonDTO
from people.exceptions import InvalidFormatError
from people.services.enrichment_client import EnrichmentClient
from people.services.person_store import PersonStore


def parse_int(value, label, minimum=None):
    """
    Parse a client supplied string as an integer.

    Raises:
        InvalidFormatError: "invalid <label> format"
    """
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidFormatError(f"invalid {label} format")
    if minimum is not None and number < minimum:
        raise InvalidFormatError(f"invalid {label} format")
    return number


class PersonService:
    """Service layer for person lifecycle"""

    def __init__(self, store=None, enrichment=None, logger=None):
        self.logger = logger or logging.getLogger(__name__)
        self.store = store or PersonStore()
        self.enrichment = enrichment or EnrichmentClient.from_settings()

    def create_person(self, received: ReceivedPersonDTO) -> int:
        """
        Enrich and store a new person.

        Returns:
            int: id of the new person

        Raises:
            EnrichmentError: an external lookup failed, nothing was stored
            PersistenceError: the insert failed and was rolled back
        """
        try:
            person = self.enrichment.enrich(received)
        except Exception as exc:
            self.logger.info("Failed to retrieve extra person data: name=%s error=%s", received.name, exc)
            raise

        try:
            person_id = self.store.create(person)
        except Exception as exc:
            self.logger.info("Failed to create person: person=%s error=%s", person, exc)
            raise

        self.logger.info("Person created successfully: id=%s person=%s", person_id, person)
        return person_id

    def get_person_by_id(self, id_str):
        person_id = self._parse_id(id_str)

        try:
            person = self.store.get_by_id(person_id)
        except Exception as exc:
            self.logger.info("Failed to get person by ID: id=%s error=%s", id_str, exc)
            raise

        self.logger.info("Person received successfully: id=%s", id_str)
        return person

    def get_people_by_filter(self, name='', surname='', patronymic='', age='0',
                             gender='', nationality='', page=None, limit=None):
        """
        List people by exact-match filters.

        `age` is a string; "0" leaves age unfiltered. `page` is the number of
        rows to skip and `limit` the maximum number of rows returned; both
        are required non-negative integers.
        """
        age_value = parse_int(age, 'age', minimum=0) if age not in (None, '') else 0
        offset = self._parse_window(page, 'page')
        count = self._parse_window(limit, 'limit')

        filters = PersonFilterDTO(
            name=name or '',
            surname=surname or '',
            patronymic=patronymic or '',
            age=age_value,
            gender=gender or '',
            nationality=nationality or '',
        )

        try:
            people = self.store.list_by_filter(filters, offset=offset, limit=count)
        except Exception as exc:
            self.logger.info("Failed to get people by filter: filters=%s error=%s", filters, exc)
            raise

        self.logger.info(
            "People received successfully by filter: filters=%s page=%s limit=%s count=%s",
            filters, page, limit, len(people)
        )
        return people

    def update_person_by_id(self, update: PersonUpdateDTO, id_str):
        person_id = self._parse_id(id_str)

        try:
            self.store.update_by_id(person_id, update)
        except Exception as exc:
            self.logger.info("Failed to update person: id=%s person=%s error=%s", person_id, update, exc)
            raise

        self.logger.info("Person updated successfully: id=%s person=%s", person_id, update)
        return person_id

    def delete_person_by_id(self, id_str):
        person_id = self._parse_id(id_str)

        try:
            self.store.delete_by_id(person_id)
        except Exception as exc:
            self.logger.info("Failed to delete person: id=%s error=%s", person_id, exc)
            raise

        self.logger.info("Person deleted successfully: id=%s", person_id)
        return person_id

    def _parse_id(self, id_str):
        try:
            return parse_int(id_str, 'id')
        except InvalidFormatError:
            self.logger.info("Invalid ID format: id=%s", id_str)
            raise

    def _parse_window(self, value, label):
        if value in (None, ''):
            self.logger.info("Missing pagination parameter: %s", label)
            raise InvalidFormatError(f"invalid {label} format")
        try:
            return parse_int(value, label, minimum=0)
        except InvalidFormatError:
            self.logger.info("Invalid %s format: %s=%s", label, label, value)
            raise
