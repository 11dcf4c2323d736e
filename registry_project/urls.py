"""
URL configuration for registry_project.

Routes:
    reference/  Read-only reference data listings
    sor/        System of Record views of people and roles
    people/     Canonical person views
"""
from django.urls import path, include

urlpatterns = [
    path('reference/', include('core.reference.urls')),
    path('sor/', include('registry.sor.urls')),
    path('people/', include('registry.person.urls')),
]
