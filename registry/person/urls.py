"""
URL configuration for canonical people.
"""
from django.urls import path

from . import views

app_name = 'person'

urlpatterns = [
    path('<int:person_id>/', views.person_detail, name='person_detail'),
    path('<int:person_id>/activation-key/', views.activation_key_detail, name='activation_key_detail'),
]
