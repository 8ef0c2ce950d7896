from django.conf import settings
from django.http import HttpResponse
from django.shortcuts import redirect
from django.urls import include, path


def healthcheck(_):
    return HttpResponse("OK")


def root_dispatch(_):
    return redirect("accounts:dashboard")


urlpatterns = [
    path("", root_dispatch, name="home"),
    path("health/", healthcheck, name="health"),
    path("", include(("apps.accounts.urls", "accounts"), namespace="accounts")),
    path("", include(("apps.customers.urls", "customers"), namespace="customers")),
]

if settings.DEBUG:
    urlpatterns += [path("__debug__/", include("debug_toolbar.urls"))]
