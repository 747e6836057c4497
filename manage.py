#!/usr/bin/env python
"""
Command line entry point for CareData. Sets ``caredata.settings`` as the
settings module; ``runserver`` without an address listens on ``$PORT``.
"""
import os
import sys


def main() -> None:
    """Run administrative tasks for the CareData project."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'caredata.settings')
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    argv = list(sys.argv)
    if len(argv) == 2 and argv[1] == 'runserver':
        from django.conf import settings
        argv.append(settings.PORT)
    execute_from_command_line(argv)


if __name__ == '__main__':
    main()
