from django.apps import apps as django_apps
from django.conf import settings
from django.core.management.base import BaseCommand
from django.urls import NoReverseMatch, reverse

REQUIRED_APPS = ["apps.accounts", "apps.customers", "apps.core"]

REQUIRED_URLS = [
    ("accounts:dashboard", {}),
    ("accounts:dashboard", {"lang": "en-ca"}),
    ("accounts:login", {}),
    ("accounts:logout", {}),
    ("customers:address_edit", {"address_id": "add"}),
    ("customers:address_edit", {"lang": "en-ca", "address_id": "add"}),
]

REQUIRED_SETTINGS = [
    "STOREFRONT_DOMAIN",
    "STOREFRONT_ACCESS_TOKEN",
    "STOREFRONT_API_VERSION",
]


class Command(BaseCommand):
    help = "Run project health checks for the storefront account pages."

    def handle(self, *args, **options):
        ok = True

        self.stdout.write(self.style.MIGRATE_HEADING("== Installed apps =="))
        for app in REQUIRED_APPS:
            if not django_apps.is_installed(app):
                self.stdout.write(self.style.ERROR(f"Missing in INSTALLED_APPS: {app}"))
                ok = False
            else:
                self.stdout.write(self.style.SUCCESS(f"OK: {app}"))

        self.stdout.write(self.style.MIGRATE_HEADING("\n== URLs existence =="))
        for name, kwargs in REQUIRED_URLS:
            try:
                url = reverse(name, kwargs=kwargs)
                self.stdout.write(self.style.SUCCESS(f"OK: url '{name}' -> {url}"))
            except NoReverseMatch:
                self.stdout.write(self.style.ERROR(f"Missing url name: {name} {kwargs}"))
                ok = False

        self.stdout.write(self.style.MIGRATE_HEADING("\n== Storefront settings =="))
        for name in REQUIRED_SETTINGS:
            if getattr(settings, name, ""):
                self.stdout.write(self.style.SUCCESS(f"OK: {name}"))
            else:
                self.stdout.write(self.style.ERROR(f"Missing setting: {name}"))
                ok = False

        self.stdout.write(self.style.MIGRATE_HEADING("\n== Final verdict =="))
        if ok:
            self.stdout.write(self.style.SUCCESS("All checks passed"))
        else:
            self.stdout.write(self.style.ERROR("Some checks failed"))
