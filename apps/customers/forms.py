# apps/customers/forms.py
from django import forms


def _text(label, autocomplete, *, required=False, input_type="text"):
    widget = forms.TextInput(
        attrs={
            "type": input_type,
            "autocomplete": autocomplete,
            "placeholder": label,
            "aria-label": label.rstrip("*"),
        }
    )
    return forms.CharField(label=label.rstrip("*"), required=required, widget=widget)


class AddressForm(forms.Form):
    """
    Shipping address form.

    Field names match the Storefront ``MailingAddressInput`` keys so the
    submitted data can be forwarded without renaming. Only used to render the
    page; the browser enforces ``required`` and the storefront validates the rest.
    """

    addressId = forms.CharField(widget=forms.HiddenInput)
    firstName = _text("First name", "given-name", required=True)
    lastName = _text("Last name", "family-name", required=True)
    company = _text("Company", "organization")
    address1 = _text("Address line 1*", "address-line1", required=True)
    address2 = _text("Address line 2", "address-line2")
    city = _text("City", "address-level2", required=True)
    province = _text("State / Province", "address-level1", required=True)
    zip = _text("Zip / Postal Code", "postal-code", required=True)
    country = _text("Country", "country-name", required=True)
    phone = _text("Phone", "tel", input_type="tel")
    defaultAddress = forms.BooleanField(label="Set as default address", required=False)
