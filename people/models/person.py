from django.db import models

from .gender import Gender
from .nationality import Nationality


class Person(models.Model):
    """
    Core person record.

    Age, gender and nationality are guessed from the name when the person
    is created. Gender and nationality are normalized into their own lookup
    tables; PROTECT keeps a referenced lookup row from being deleted.
    """

    # Name fields
    name = models.CharField(max_length=100)
    surname = models.CharField(max_length=100)
    patronymic = models.CharField(max_length=100, null=True, blank=True)

    # Demographics
    age = models.PositiveIntegerField()
    gender = models.ForeignKey(
        Gender,
        on_delete=models.PROTECT,
        related_name='people'
    )
    nationality = models.ForeignKey(
        Nationality,
        on_delete=models.PROTECT,
        related_name='people'
    )

    class Meta:
        db_table = 'people'
        ordering = ['id']

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        parts = [self.surname, self.name, self.patronymic]
        return ' '.join(part for part in parts if part)
