from functools import wraps
from urllib.parse import urlencode

from django.shortcuts import redirect
from django.urls import reverse

from .session import get_customer_access_token


def login_url(lang: str | None = None) -> str:
    if lang:
        return reverse("accounts:login", kwargs={"lang": lang})
    return reverse("accounts:login")


def redirect_to_customer_login(request, lang: str | None = None):
    query = urlencode({"next": request.get_full_path()})
    return redirect(f"{login_url(lang)}?{query}")


def customer_login_required(view_func):
    """Send visitors without a customer access token to the login page."""

    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not get_customer_access_token(request):
            return redirect_to_customer_login(request, kwargs.get("lang"))
        return view_func(request, *args, **kwargs)

    return _wrapped
