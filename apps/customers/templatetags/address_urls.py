from __future__ import annotations

from django import template
from django.urls import reverse

register = template.Library()


@register.simple_tag
def address_edit_url(address_id: str, lang: str | None = None) -> str:
    """{% address_edit_url address.id lang %} -> locale-aware add/edit/delete URL."""
    kwargs = {"address_id": address_id}
    if lang:
        kwargs["lang"] = lang
    return reverse("customers:address_edit", kwargs=kwargs)
