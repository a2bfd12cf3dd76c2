"""
Serializers for the Person API

Output shape: {id, name, surname, patronymic?, age, gender, nationality}.
`id` is included on top of the stored fields so listed records can be
addressed by the /person/<id> routes; it is never accepted on input.
"""
from rest_framework import serializers

from people.dtos import PersonUpdateDTO, ReceivedPersonDTO


class PersonSerializer(serializers.Serializer):
    """Read serializer for PersonDTO; patronymic is omitted when null"""
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    surname = serializers.CharField(read_only=True)
    patronymic = serializers.CharField(read_only=True, allow_null=True)
    age = serializers.IntegerField(read_only=True)
    gender = serializers.CharField(read_only=True)
    nationality = serializers.CharField(read_only=True)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if data.get('patronymic') is None:
            data.pop('patronymic', None)
        return data


class PersonCreateSerializer(serializers.Serializer):
    """Write serializer for creating a person; the rest is guessed from the name"""
    name = serializers.CharField(max_length=100)
    surname = serializers.CharField(max_length=100)
    patronymic = serializers.CharField(max_length=100, required=False, allow_null=True, allow_blank=True)

    def to_dto(self) -> ReceivedPersonDTO:
        data = self.validated_data
        return ReceivedPersonDTO(
            name=data['name'],
            surname=data['surname'],
            patronymic=data.get('patronymic'),
        )


class PersonUpdateSerializer(serializers.Serializer):
    """Write serializer for partial updates; every field is optional"""
    name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    surname = serializers.CharField(max_length=100, required=False, allow_blank=True)
    patronymic = serializers.CharField(max_length=100, required=False, allow_null=True, allow_blank=True)
    age = serializers.IntegerField(min_value=0, required=False)
    gender = serializers.CharField(max_length=50, required=False, allow_blank=True)
    nationality = serializers.CharField(max_length=10, required=False, allow_blank=True)

    def to_dto(self) -> PersonUpdateDTO:
        return PersonUpdateDTO(**self.validated_data)
