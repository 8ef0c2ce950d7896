# apps/customers/urls.py
from django.urls import path

from apps.core import converters  # noqa: F401

from . import views

app_name = "customers"

urlpatterns = [
    path("account/address/<path:address_id>/", views.address_edit_view, name="address_edit"),
    path(
        "<locale:lang>/account/address/<path:address_id>/",
        views.address_edit_view,
        name="address_edit",
    ),
]
