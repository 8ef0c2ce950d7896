import logging

from django.contrib import messages
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from apps.customers.services import account_root_url
from apps.storefront.client import CustomerNotFound, StorefrontError, get_storefront_client

from .decorators import customer_login_required, login_url
from .forms import LoginForm
from .session import (
    clear_customer_access_token,
    get_customer_access_token,
    store_customer_access_token,
)

logger = logging.getLogger(__name__)


def _safe_next(request) -> str | None:
    next_url = request.POST.get("next") or request.GET.get("next")
    if next_url and url_has_allowed_host_and_scheme(
        next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        return next_url
    return None


def login_view(request, lang=None):
    if get_customer_access_token(request):
        return redirect(account_root_url(lang))

    form = LoginForm(request.POST or None)
    form_error = None
    if request.method == "POST" and form.is_valid():
        try:
            token = get_storefront_client().create_access_token(
                form.cleaned_data["email"], form.cleaned_data["password"]
            )
        except StorefrontError as exc:
            form_error = exc.message
        else:
            store_customer_access_token(request, token)
            return redirect(_safe_next(request) or account_root_url(lang))

    status = 400 if form_error else 200
    return render(
        request,
        "accounts/login.html",
        {"form": form, "form_error": form_error, "next": _safe_next(request) or ""},
        status=status,
    )


@require_POST
def logout_view(request, lang=None):
    token = get_customer_access_token(request)
    if token:
        try:
            get_storefront_client().delete_access_token(token)
        except StorefrontError as exc:
            # the local session is cleared regardless
            logger.warning("Could not revoke customer access token: %s", exc.message)
    request.session.flush()
    return redirect(login_url(lang))


@customer_login_required
def dashboard_view(request, lang=None):
    token = get_customer_access_token(request)
    try:
        address_book = get_storefront_client().get_address_book(token)
    except CustomerNotFound:
        clear_customer_access_token(request)
        messages.info(request, "Your session has expired. Please sign in again.")
        return redirect(login_url(lang))
    except StorefrontError as exc:
        messages.error(request, exc.message)
        return render(request, "accounts/dashboard.html", {"address_book": None, "lang": lang})

    return render(
        request, "accounts/dashboard.html", {"address_book": address_book, "lang": lang}
    )
