from django.db import models


class Gender(models.Model):
    """
    Gender label lookup row.

    One row per distinct label; people with the same gender share it.
    Rows are created on demand (lookup-or-insert) when a person is created
    or updated with a label that does not exist yet.
    """
    gender = models.CharField(
        max_length=50,
        unique=True,
        help_text="Gender label, e.g. 'male'"
    )

    class Meta:
        db_table = 'genders'
        ordering = ['gender']

    def __str__(self):
        return self.gender
