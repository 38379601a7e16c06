#!/usr/bin/env python
"""
PATH: manage.py

Management entrypoint for the business backend.

DJANGO_SETTINGS_MODULE falls back to backend.settings.dev when it is
unset or names the bare settings package (which configures nothing).
Production sets backend.settings.prod explicitly.
"""

from __future__ import annotations

import os
import sys

DEFAULT_SETTINGS = "backend.settings.dev"


def main() -> None:
    if os.environ.get("DJANGO_SETTINGS_MODULE", "").strip() in ("", "backend.settings"):
        os.environ["DJANGO_SETTINGS_MODULE"] = DEFAULT_SETTINGS

    from django.core.management import execute_from_command_line

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
