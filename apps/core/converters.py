from django.urls import register_converter


class LocaleConverter:
    """Storefront locale prefix such as ``en`` or ``fr-ca``."""

    regex = "[a-zA-Z]{2}(?:-[a-zA-Z]{2})?"

    def to_python(self, value):
        return value.lower()

    def to_url(self, value):
        return value


register_converter(LocaleConverter, "locale")
