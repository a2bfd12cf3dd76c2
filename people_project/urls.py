"""
URL configuration for people_project.

The person API is mounted at the root so the public routes are
/person, /person/filter and /person/<id>.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('people.urls')),
]
