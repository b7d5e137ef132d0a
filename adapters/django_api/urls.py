"""
CVR Django adapter URL routing.
"""

from django.urls import path

from adapters.django_api import views


urlpatterns = [
    path("registry/businesses/register", views.register_business_view),
    path("registry/businesses/verify", views.verify_business_view),
    path("registry/businesses/<int:business_id>", views.business_detail_view),
    path(
        "registry/businesses/<int:business_id>/verified",
        views.business_verified_view,
    ),
    path("registry/owners/<str:owner>/business", views.owner_business_view),
    path("registry/snapshot", views.registry_snapshot_view),
]
