"""Deployment entrypoint: `gunicorn app:app` serves the tip form.

Run directly it behaves like the tip-calc command line.
"""

from web_app import app as app


if __name__ == "__main__":
    from cli import main

    raise SystemExit(main())
