"""Entry point: ``flask --app app run``."""

from punchclock.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=bool(app.config.get("DEBUG")))
