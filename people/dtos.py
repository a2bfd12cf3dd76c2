"""
Data Transfer Objects for the People Domain

DTOs passed between the HTTP layer, the service, the enrichment client and
the store.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ReceivedPersonDTO:
    """Client supplied person, before enrichment"""
    name: str
    surname: str
    patronymic: Optional[str] = None


@dataclass
class PersonDTO:
    """Complete person as stored and returned"""
    name: str
    surname: str
    age: int
    gender: str
    nationality: str
    patronymic: Optional[str] = None
    id: Optional[int] = None

    @classmethod
    def from_model(cls, person):
        return cls(
            id=person.pk,
            name=person.name,
            surname=person.surname,
            patronymic=person.patronymic,
            age=person.age,
            gender=person.gender.gender,
            nationality=person.nationality.nationality,
        )


@dataclass
class PersonUpdateDTO:
    """
    Requested changes for a partial update.

    Empty strings and a zero age mean "not supplied". patronymic=None means
    "not supplied"; an empty string clears it.
    """
    name: str = ''
    surname: str = ''
    patronymic: Optional[str] = None
    age: int = 0
    gender: str = ''
    nationality: str = ''


@dataclass
class PersonFilterDTO:
    """Equality filters for listing; empty strings and age=0 are ignored"""
    name: str = ''
    surname: str = ''
    patronymic: str = ''
    age: int = 0
    gender: str = ''
    nationality: str = ''
