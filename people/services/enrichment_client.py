"""
Enrichment Client - External Lookup Calls

Guesses age, gender and nationality for a first name by calling three
external services one after another:
- age:         GET <AGIFY_URL>?name=<name>        -> {"age": 42, ...}
- gender:      GET <GENDERIZE_URL>?name=<name>    -> {"gender": "male", ...}
- nationality: GET <NATIONALIZE_URL>?name=<name>  -> {"country": [{"country_id": "US", ...}, ...]}

All three calls share ONE deadline. It is computed when enrichment starts
and each call only gets the time left, so a slow first call shortens the
budget of the next ones. The first failing stage aborts the whole
enrichment; there are no retries and no partial results.
"""

import logging
import time

import requests
from django.conf import settings

from people.dtos import PersonDTO, ReceivedPersonDTO
from people.exceptions import EnrichmentError


class EnrichmentClient:
    """Turns a ReceivedPersonDTO into a complete PersonDTO"""

    AGE = 'age'
    GENDER = 'gender'
    NATIONALITY = 'nationality'

    def __init__(self, agify_url, genderize_url, nationalize_url, timeout=3.0,
                 session=None, logger=None, clock=None):
        self.agify_url = agify_url
        self.genderize_url = genderize_url
        self.nationalize_url = nationalize_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger(__name__)
        self._clock = clock or time.monotonic

    @classmethod
    def from_settings(cls, **kwargs):
        """Build a client from the ENRICHMENT settings dict."""
        config = settings.ENRICHMENT
        return cls(
            agify_url=config['AGIFY_URL'],
            genderize_url=config['GENDERIZE_URL'],
            nationalize_url=config['NATIONALIZE_URL'],
            timeout=config['TIMEOUT'],
            **kwargs
        )

    def enrich(self, received: ReceivedPersonDTO) -> PersonDTO:
        """
        Enrich a client supplied person.

        Args:
            received: name, surname and optional patronymic from the client

        Returns:
            PersonDTO: the received fields plus age, gender and nationality

        Raises:
            EnrichmentError: naming the first stage that failed
        """
        deadline = self._clock() + self.timeout
        name = received.name

        age = self._get_age(name, deadline)
        gender = self._get_gender(name, deadline)
        nationality = self._get_nationality(name, deadline)

        person = PersonDTO(
            name=received.name,
            surname=received.surname,
            patronymic=received.patronymic,
            age=age,
            gender=gender,
            nationality=nationality,
        )
        self.logger.debug(
            "Person enriched with extra data: name=%s age=%s gender=%s nationality=%s",
            name, age, gender, nationality
        )
        return person

    def _get_age(self, name, deadline):
        body = self._fetch(self.AGE, self.agify_url, name, deadline)
        age = body.get('age') if isinstance(body, dict) else None
        if isinstance(age, bool) or not isinstance(age, int) or age < 0:
            raise self._error(self.AGE, name, f"no age found in response: {body!r}")

        self.logger.info("Successfully retrieved person age: name=%s age=%s", name, age)
        return age

    def _get_gender(self, name, deadline):
        body = self._fetch(self.GENDER, self.genderize_url, name, deadline)
        gender = body.get('gender') if isinstance(body, dict) else None
        if not isinstance(gender, str) or not gender:
            raise self._error(self.GENDER, name, f"no gender found in response: {body!r}")

        self.logger.info("Successfully retrieved person gender: name=%s gender=%s", name, gender)
        return gender

    def _get_nationality(self, name, deadline):
        body = self._fetch(self.NATIONALITY, self.nationalize_url, name, deadline)
        countries = body.get('country') if isinstance(body, dict) else None
        if not isinstance(countries, list):
            raise self._error(self.NATIONALITY, name, f"unexpected response: {body!r}")
        if not countries:
            raise self._error(self.NATIONALITY, name, "no nationality found")

        first = countries[0]
        country_id = first.get('country_id') if isinstance(first, dict) else None
        if not isinstance(country_id, str) or not country_id:
            raise self._error(self.NATIONALITY, name, f"unexpected country entry: {first!r}")

        self.logger.info(
            "Successfully retrieved person nationality: name=%s nationality=%s", name, country_id
        )
        return country_id

    def _fetch(self, stage, url, name, deadline):
        """GET url?name=<name> within what is left of the deadline and decode JSON."""
        remaining = deadline - self._clock()
        if remaining <= 0:
            raise self._error(stage, name, "enrichment deadline exceeded")

        try:
            response = self.session.get(url, params={'name': name}, timeout=remaining)
            response.raise_for_status()
        except requests.Timeout as exc:
            raise self._error(stage, name, f"request timed out: {exc}") from exc
        except requests.RequestException as exc:
            raise self._error(stage, name, f"request failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise self._error(stage, name, f"could not decode response: {exc}") from exc

    def _error(self, stage, name, cause):
        self.logger.info("Failed to get %s: name=%s error=%s", stage, name, cause)
        return EnrichmentError(stage, cause)
