"""
Person API views.

POST   /person          create (enriched by name)  201 | 400 bad body | 409
GET    /person/<id>     read                        200 | 400
GET    /person/filter   filtered list               200 | 400
PATCH  /person/<id>     partial update              200 | 400 bad body | 409
DELETE /person/<id>     delete                      200 | 409

Reads answer 400 and writes 409 for every service error, whatever its
kind; the error message in `data.details` tells them apart.
"""
import logging
from functools import lru_cache

from rest_framework import status
from rest_framework.decorators import api_view

from people.exceptions import EnrichmentError, PersonError
from people.serializers import (
    PersonSerializer,
    PersonCreateSerializer,
    PersonUpdateSerializer
)
from people.services import EnrichmentClient, PersonService
from people_project.response_formatter import error_response, success_response

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def get_enrichment_client():
    """One client (and one pooled requests.Session) per process."""
    return EnrichmentClient.from_settings()


def get_person_service():
    return PersonService(enrichment=get_enrichment_client())


@api_view(['POST'])
def person_create(request):
    """
    Create a person and enrich it with age, gender and nationality.

    Body: {"name": str, "surname": str, "patronymic": str (optional)}
    """
    serializer = PersonCreateSerializer(data=request.data)
    if not serializer.is_valid():
        logger.info("Failed to bind JSON for creating person: errors=%s", serializer.errors)
        return error_response(
            message="Invalid input",
            data=serializer.errors,
            status_code=status.HTTP_400_BAD_REQUEST
        )

    received = serializer.to_dto()
    logger.debug("Received request to create person: %s", received)

    try:
        person_id = get_person_service().create_person(received)
    except EnrichmentError as e:
        return error_response(
            message="Failed to retrieve extra person data",
            data={'details': str(e)},
            status_code=status.HTTP_409_CONFLICT
        )
    except PersonError as e:
        return error_response(
            message="Failed to create person",
            data={'details': str(e)},
            status_code=status.HTTP_409_CONFLICT
        )

    return success_response(
        data={'id': person_id},
        message="Person created successfully",
        status_code=status.HTTP_201_CREATED
    )


@api_view(['GET'])
def person_filter(request):
    """
    List people by exact-match filters.

    Query params:
    - name, surname, patronymic, gender, nationality: optional
    - age: optional, "0" means unfiltered
    - page: rows to skip (required)
    - limit: maximum rows returned (required)
    """
    params = request.query_params
    logger.debug("Received request for person filter: params=%s", dict(params))

    try:
        people = get_person_service().get_people_by_filter(
            name=params.get('name', ''),
            surname=params.get('surname', ''),
            patronymic=params.get('patronymic', ''),
            age=params.get('age', '0'),
            gender=params.get('gender', ''),
            nationality=params.get('nationality', ''),
            page=params.get('page'),
            limit=params.get('limit'),
        )
    except PersonError as e:
        return error_response(
            message="Failed to get people by filter",
            data={'details': str(e)},
            status_code=status.HTTP_400_BAD_REQUEST
        )

    return success_response(
        data=PersonSerializer(people, many=True).data,
        message="People received successfully"
    )


@api_view(['GET', 'PATCH', 'DELETE'])
def person_detail(request, pk):
    """
    Retrieve, partially update or delete a person.
    """
    service = get_person_service()

    if request.method == 'GET':
        logger.debug("Received request for person: id=%s", pk)
        try:
            person = service.get_person_by_id(pk)
        except PersonError as e:
            return error_response(
                message="Failed to get person by ID",
                data={'details': str(e)},
                status_code=status.HTTP_400_BAD_REQUEST
            )
        return success_response(
            data=PersonSerializer(person).data,
            message="Person received successfully"
        )

    elif request.method == 'PATCH':
        logger.debug("Received request to update person: id=%s", pk)
        serializer = PersonUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            logger.info("Failed to bind JSON for updating person: id=%s errors=%s", pk, serializer.errors)
            return error_response(
                message="Invalid input",
                data=serializer.errors,
                status_code=status.HTTP_400_BAD_REQUEST
            )
        try:
            person_id = service.update_person_by_id(serializer.to_dto(), pk)
        except PersonError as e:
            return error_response(
                message="Failed to update person",
                data={'details': str(e)},
                status_code=status.HTTP_409_CONFLICT
            )
        return success_response(
            data={'id': person_id},
            message="Person updated successfully"
        )

    elif request.method == 'DELETE':
        logger.debug("Received request to delete person: id=%s", pk)
        try:
            person_id = service.delete_person_by_id(pk)
        except PersonError as e:
            return error_response(
                message="Failed to delete person",
                data={'details': str(e)},
                status_code=status.HTTP_409_CONFLICT
            )
        return success_response(
            data={'id': person_id},
            message="Person deleted successfully"
        )
