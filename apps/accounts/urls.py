from django.urls import path

from apps.core import converters  # noqa: F401

from .views import dashboard_view, login_view, logout_view

app_name = "accounts"

urlpatterns = [
    path("account/", dashboard_view, name="dashboard"),
    path("account/login/", login_view, name="login"),
    path("account/logout/", logout_view, name="logout"),
    # Locale-prefixed variants share names; reverse() picks by kwargs
    path("<locale:lang>/account/", dashboard_view, name="dashboard"),
    path("<locale:lang>/account/login/", login_view, name="login"),
    path("<locale:lang>/account/logout/", logout_view, name="logout"),
]
