from django.db import models


class Nationality(models.Model):
    """Country code lookup row, shared by every person of that nationality."""
    nationality = models.CharField(
        max_length=10,
        unique=True,
        help_text="Country code, e.g. 'US'"
    )

    class Meta:
        db_table = 'nationalities'
        verbose_name_plural = 'nationalities'
        ordering = ['nationality']

    def __str__(self):
        return self.nationality
