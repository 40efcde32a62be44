"""
ASGI config for minisearch project.

It exposes the ASGI callable as a module-level variable named ``application``.
Every HTTP request is bounded by ``settings.HTTP_TIMEOUT`` seconds.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "minisearch.settings")

django_asgi_app = get_asgi_application()


from django.conf import settings  # noqa: E402

from minisearch.middleware import RequestTimeoutMiddleware  # noqa: E402

application = RequestTimeoutMiddleware(django_asgi_app, settings.HTTP_TIMEOUT)
