"""WSGI entrypoint for serving the message API."""

from msgbundle.app import create_app

# WSGI servers look up a module-level variable named ``application``.
application = create_app()
