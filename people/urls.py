"""
URL configuration for the People API.

/person/filter must be matched before /person/<pk>.
"""
from django.urls import path

from . import views

app_name = 'people'

urlpatterns = [
    path('person', views.person_create, name='person_create'),
    path('person/filter', views.person_filter, name='person_filter'),
    path('person/<str:pk>', views.person_detail, name='person_detail'),
]
