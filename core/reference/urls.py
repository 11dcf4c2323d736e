"""
URL configuration for reference data.
"""
from django.urls import path

from . import views

app_name = 'reference'

urlpatterns = [
    path('types/', views.type_list, name='type_list'),
    path('countries/', views.country_list, name='country_list'),
    path('roles/', views.role_info_list, name='role_info_list'),
]
