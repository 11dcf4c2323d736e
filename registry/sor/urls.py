"""
URL configuration for the System of Record module.
"""
from django.urls import path

from . import views

app_name = 'sor'

urlpatterns = [
    # SOR person endpoints
    path('<str:source_sor>/people/', views.sor_person_list, name='sor_person_list'),
    path('<str:source_sor>/people/<str:sor_person_id>/', views.sor_person_detail, name='sor_person_detail'),

    # Role endpoints
    path('<str:source_sor>/people/<str:sor_person_id>/roles/', views.role_list, name='role_list'),
    path(
        '<str:source_sor>/people/<str:sor_person_id>/roles/<str:sor_role_id>/',
        views.role_detail,
        name='role_detail'
    ),
]
