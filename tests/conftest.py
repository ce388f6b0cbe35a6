from __future__ import annotations

import django
from django.conf import settings


def pytest_configure(config) -> None:  # noqa: ANN001
    if settings.configured:
        return
    settings.configure(
        DEBUG=False,
        INSTALLED_APPS=["bootstrap_ui"],
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "APP_DIRS": True,
            }
        ],
    )
    django.setup()
