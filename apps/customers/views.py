# apps/customers/views.py
import logging

from django.contrib import messages
from django.http import QueryDict
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from apps.accounts.decorators import redirect_to_customer_login
from apps.accounts.session import clear_customer_access_token, get_customer_access_token
from apps.storefront.client import CustomerNotFound, StorefrontError, get_storefront_client
from apps.storefront.records import AddressBook

from .forms import AddressForm
from .reconcile import resolve_address
from .services import (
    NEW_ADDRESS_ID,
    account_root_url,
    dispatch_address_mutation,
    extract_address,
)

logger = logging.getLogger(__name__)


def _read_submission(request):
    """
    Return ``(data, delete_intent)``.

    HTML forms cannot send DELETE, so ``POST`` with ``_method=delete`` counts too.
    """
    if request.method == "DELETE":
        return QueryDict(request.body), True
    data = request.POST
    return data, (data.get("_method") or "").strip().lower() == "delete"


def _render_address_page(
    request, address_id, lang, address_book, *, submission=None, form_error=None, status=200
):
    address = resolve_address(address_id, address_book)
    hidden_id = address.id if address else address_id

    if submission is not None:
        # keep what the customer typed
        initial = extract_address(submission)
        initial["defaultAddress"] = bool(submission.get("defaultAddress"))
    elif address is not None:
        initial = address.as_initial()
        initial["defaultAddress"] = address_book.is_default(address)
    else:
        initial = {"defaultAddress": False}
    initial["addressId"] = hidden_id

    context = {
        "form": AddressForm(initial=initial),
        "form_error": form_error,
        "is_new_address": address_id == NEW_ADDRESS_ID,
        "address": address,
        "account_url": account_root_url(lang),
        "lang": lang,
    }
    return render(request, "customers/address_form.html", context, status=status)


# ---------------------------------------------------------------------
# 📍 Address add / edit / delete
# ---------------------------------------------------------------------
@require_http_methods(["GET", "POST", "DELETE"])
def address_edit_view(request, address_id: str, lang=None):
    """
    GET renders the add/edit form for ``address_id`` ("add" for a new address).
    POST/DELETE applies the submission to the storefront account.
    """
    client = get_storefront_client()
    token = get_customer_access_token(request)

    if request.method == "GET":
        if not token:
            return redirect_to_customer_login(request, lang)
        try:
            address_book = client.get_address_book(token)
        except CustomerNotFound:
            clear_customer_access_token(request)
            return redirect_to_customer_login(request, lang)
        except StorefrontError as exc:
            messages.error(request, exc.message)
            return redirect(account_root_url(lang))
        return _render_address_page(request, address_id, lang, address_book)

    submission, delete = _read_submission(request)
    outcome = dispatch_address_mutation(client, submission, token, delete=delete, lang=lang)
    if outcome.ok:
        messages.success(request, "Address deleted." if delete else "Address saved.")
        return redirect(outcome.redirect_to)

    try:
        address_book = client.get_address_book(token)
    except StorefrontError as exc:
        logger.warning("Could not reload addresses after failed mutation: %s", exc.message)
        address_book = AddressBook()
    return _render_address_page(
        request,
        address_id,
        lang,
        address_book,
        # a delete carries no address fields; show the stored ones instead
        submission=None if delete else submission,
        form_error=outcome.form_error,
        status=400,
    )
