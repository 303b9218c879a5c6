"""Management command to fetch weather for a CEP using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from cepweather.api.views import get_weather_service
from cepweather.core.errors import (
    MSG_INTERNAL_ERROR,
    MSG_INVALID_ZIPCODE,
    MSG_ZIPCODE_NOT_FOUND,
    ErrorKind,
    ServiceError,
)


class Command(BaseCommand):
    help = "Fetch current weather for the locality of a CEP"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--cep", type=str, required=True, help="Eight digit postal code")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        cep = options["cep"]
        try:
            result = get_weather_service().get_weather(cep)
        except ServiceError as exc:
            if exc.kind is ErrorKind.INVALID_INPUT:
                raise CommandError(MSG_INVALID_ZIPCODE) from exc
            if exc.kind is ErrorKind.NOT_FOUND:
                raise CommandError(MSG_ZIPCODE_NOT_FOUND) from exc
            raise CommandError(MSG_INTERNAL_ERROR) from exc

        self.stdout.write(json.dumps(result.as_dict(), ensure_ascii=False))
