from .person_views import (
    person_create,
    person_filter,
    person_detail
)
